# app/api/users.py
# Профиль пользователя и рекомендации по его предпочтениям.
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas import ProductOut, ProfileUpdate, UserOut
from app.services import catalog

router = APIRouter()


@router.get("/user/profile", response_model=UserOut)
def get_profile(user: User = Depends(get_current_user)):
    return user


@router.put("/user/profile", response_model=UserOut)
def update_profile(payload: ProfileUpdate, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Обновляет только переданные поля."""
    if payload.name:
        user.name = payload.name
    if payload.phone:
        user.phone = payload.phone
    if payload.address is not None:
        user.address = payload.address.model_dump(by_alias=True)
    if payload.preferences is not None:
        user.preferences = payload.preferences.model_dump(by_alias=True)
    db.commit()
    db.refresh(user)
    return user


@router.get("/recommendations", response_model=List[ProductOut])
def recommendations(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return catalog.recommend_for_preferences(db, user.preferences)
