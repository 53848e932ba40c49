# app/api/cart.py
# Корзина текущего пользователя.
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas import CartAddIn, CartOut, CartUpdateIn, MessageOut, ProductRefIn
from app.services import cart as cart_service

router = APIRouter()


@router.get("", response_model=CartOut)
def get_cart(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    cart = cart_service.get_cart(db, user.id)
    return cart if cart is not None else {"items": []}


@router.post("/add", response_model=CartOut)
def add_to_cart(payload: CartAddIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.add_to_cart(db, user.id, payload.product_id, payload.quantity)


@router.put("/update", response_model=CartOut)
def update_cart(payload: CartUpdateIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.update_cart_item(db, user.id, payload.product_id, payload.quantity)


@router.post("/remove", response_model=CartOut)
def remove_from_cart(payload: ProductRefIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.remove_from_cart(db, user.id, payload.product_id)


@router.delete("/clear", response_model=MessageOut)
def clear_cart(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    cart_service.clear_cart(db, user.id)
    return {"message": "Cart cleared successfully"}
