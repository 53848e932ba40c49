# app/api/wishlist.py
# Избранное текущего пользователя.
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas import ProductRefIn, WishlistOut
from app.services import cart as cart_service

router = APIRouter()


@router.get("", response_model=WishlistOut)
def get_wishlist(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    wishlist = cart_service.get_wishlist(db, user.id)
    return wishlist if wishlist is not None else {"items": []}


@router.post("/add", response_model=WishlistOut)
def add_to_wishlist(payload: ProductRefIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.add_to_wishlist(db, user.id, payload.product_id)


@router.post("/remove", response_model=WishlistOut)
def remove_from_wishlist(payload: ProductRefIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.remove_from_wishlist(db, user.id, payload.product_id)
