# app/api/orders.py
# Заказы: оформление из корзины (без оплаты) и история заказов.
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas import OrderCreateIn, OrderOut
from app.services import cart as cart_service

router = APIRouter()


@router.post("/create", response_model=OrderOut)
def create_order(payload: OrderCreateIn, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    shipping_address = payload.shipping_address.model_dump(by_alias=True) if payload.shipping_address else None
    return cart_service.create_order(db, user.id, total=payload.total, shipping_address=shipping_address)


@router.get("", response_model=List[OrderOut])
def list_orders(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.list_orders(db, user.id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return cart_service.get_order_or_404(db, user.id, order_id)
