# app/models/wishlist.py
# Модель Wishlist — избранное пользователя, множество товаров без повторов.
from sqlalchemy import Column, Integer, ForeignKey, Table
from sqlalchemy.orm import relationship
from app.db.base import Base

wishlist_products = Table(
    "wishlist_products",
    Base.metadata,
    Column("wishlist_id", Integer, ForeignKey("wishlists.id"), primary_key=True),
    Column("product_id", Integer, ForeignKey("products.id"), primary_key=True),
)


class Wishlist(Base):
    __tablename__ = "wishlists"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)

    user = relationship("User")
    items = relationship("Product", secondary=wishlist_products, order_by="Product.id")
