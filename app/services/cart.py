# app/services/cart.py
# Операции над корзиной, избранным и оформление заказа.
# Каждая функция работает в переданной сессии и сама делает commit.
import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.cart import Cart, CartItem
from app.models.order import Order, OrderItem, OrderStatus
from app.models.product import Product
from app.models.wishlist import Wishlist

logger = logging.getLogger(__name__)


def get_product_or_404(db: Session, product_id: int) -> Product:
    product = db.get(Product, product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


def get_cart(db: Session, user_id: int) -> Cart | None:
    return db.query(Cart).filter(Cart.user_id == user_id).first()


def get_cart_or_404(db: Session, user_id: int) -> Cart:
    cart = get_cart(db, user_id)
    if cart is None:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


def _find_line(cart: Cart, product_id: int) -> CartItem | None:
    for item in cart.items:
        if item.product_id == product_id:
            return item
    return None


def add_to_cart(db: Session, user_id: int, product_id: int, quantity: int = 1) -> Cart:
    """Увеличивает количество существующей строки или добавляет новую в конец."""
    if quantity < 1:
        raise HTTPException(status_code=400, detail="Quantity must be at least 1")
    get_product_or_404(db, product_id)

    cart = get_cart(db, user_id)
    if cart is None:
        cart = Cart(user_id=user_id)
        db.add(cart)

    line = _find_line(cart, product_id)
    if line is not None:
        line.quantity += quantity
    else:
        cart.items.append(CartItem(product_id=product_id, quantity=quantity))
    db.commit()
    db.refresh(cart)
    return cart


def update_cart_item(db: Session, user_id: int, product_id: int, quantity: int) -> Cart:
    """Задаёт количество напрямую; при quantity <= 0 строка удаляется."""
    cart = get_cart_or_404(db, user_id)
    line = _find_line(cart, product_id)
    if line is None:
        raise HTTPException(status_code=404, detail="Product not found in cart")

    if quantity <= 0:
        cart.items.remove(line)
    else:
        line.quantity = quantity
    db.commit()
    db.refresh(cart)
    return cart


def remove_from_cart(db: Session, user_id: int, product_id: int) -> Cart:
    cart = get_cart_or_404(db, user_id)
    cart.items = [item for item in cart.items if item.product_id != product_id]
    db.commit()
    db.refresh(cart)
    return cart


def clear_cart(db: Session, user_id: int) -> Cart:
    cart = get_cart_or_404(db, user_id)
    cart.items.clear()
    db.commit()
    return cart


def get_wishlist(db: Session, user_id: int) -> Wishlist | None:
    return db.query(Wishlist).filter(Wishlist.user_id == user_id).first()


def add_to_wishlist(db: Session, user_id: int, product_id: int) -> Wishlist:
    """Добавляет товар в избранное; повторное добавление ничего не меняет."""
    product = get_product_or_404(db, product_id)
    wishlist = get_wishlist(db, user_id)
    if wishlist is None:
        wishlist = Wishlist(user_id=user_id)
        db.add(wishlist)
    if product not in wishlist.items:
        wishlist.items.append(product)
    db.commit()
    db.refresh(wishlist)
    return wishlist


def remove_from_wishlist(db: Session, user_id: int, product_id: int) -> Wishlist:
    wishlist = get_wishlist(db, user_id)
    if wishlist is None:
        raise HTTPException(status_code=404, detail="Wishlist not found")
    wishlist.items = [product for product in wishlist.items if product.id != product_id]
    db.commit()
    db.refresh(wishlist)
    return wishlist


def create_order(
    db: Session,
    user_id: int,
    total: float | None = None,
    shipping_address: dict | None = None,
) -> Order:
    """
    Оформляет заказ из корзины пользователя.

    Строки корзины копируются в заказ вместе с текущей ценой товара, сумма
    берётся из запроса (или считается по строкам, если не передана).
    Оплаты нет: заказ сразу получает статус completed, корзина очищается.
    """
    cart = get_cart(db, user_id)
    if cart is None or not cart.items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    lines = [
        OrderItem(product_id=item.product_id, quantity=item.quantity, price=item.product.price)
        for item in cart.items
    ]
    if total is None:
        total = sum(line.price * line.quantity for line in lines)

    order = Order(
        user_id=user_id,
        items=lines,
        total=total,
        shipping_address=shipping_address or {},
        status=OrderStatus.completed,
    )
    db.add(order)
    cart.items.clear()
    db.commit()
    db.refresh(order)
    logger.info(f"Order {order.id} created for user {user_id} ({len(lines)} lines, total {total})")
    return order


def list_orders(db: Session, user_id: int) -> list[Order]:
    return (
        db.query(Order)
        .filter(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )


def get_order_or_404(db: Session, user_id: int, order_id: int) -> Order:
    order = db.query(Order).filter(Order.id == order_id, Order.user_id == user_id).first()
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
