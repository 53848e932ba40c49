# app/api/auth.py
# Роуты для регистрации и входа по email + пароль.
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core import security
from app.db.session import get_db
from app.models.cart import Cart
from app.models.user import User
from app.models.wishlist import Wishlist
from app.schemas import AuthOut, LoginIn, RegisterIn

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    """
    Регистрация пользователя: name + email + password.
    Вместе с пользователем создаются пустые корзина и избранное.
    """
    email = payload.email.lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise HTTPException(status_code=400, detail="User with this email already exists")

    user = User(
        name=payload.name,
        email=email,
        phone=payload.phone,
        hashed_password=security.get_password_hash(payload.password),
    )
    db.add(user)
    db.flush()
    db.add(Cart(user_id=user.id))
    db.add(Wishlist(user_id=user.id))
    db.commit()
    db.refresh(user)
    logger.info(f"Registered user {user.id}")

    token = security.create_access_token(user.id, user.email)
    return {"token": token, "user": user}


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    """Логин: возвращает JWT и данные пользователя без хеша пароля."""
    user = db.query(User).filter(User.email == payload.email.lower()).first()
    if not user or not security.verify_password(payload.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = security.create_access_token(user.id, user.email)
    return {"token": token, "user": user}
