# app/models/product.py
# Модели Product и ProductTag — позиция каталога украшений и её теги.
# Вложенные атрибуты (характеристики, изображения) хранятся в JSON, теги —
# отдельными строками, поля для фильтров каталога вынесены в колонки.
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from app.db.base import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String, nullable=False, index=True)
    subcategory = Column(String, nullable=True, index=True)
    price = Column(Float, nullable=False, index=True)
    original_price = Column(Float, nullable=True)
    discount = Column(Float, nullable=True)
    images = Column(JSON, nullable=False, default=list)
    # {material, weight, dimensions, gemstone, metalPurity}
    specifications = Column(JSON, nullable=True)
    in_stock = Column(Boolean, default=True, index=True)
    stock_quantity = Column(Integer, default=0)
    rating_average = Column(Float, default=0.0)
    rating_count = Column(Integer, default=0)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)

    tag_rows = relationship(
        "ProductTag",
        back_populates="product",
        order_by="ProductTag.id",
        cascade="all, delete-orphan",
    )

    @property
    def tags(self) -> list[str]:
        return [row.name for row in self.tag_rows]

    @tags.setter
    def tags(self, names) -> None:
        self.tag_rows = [ProductTag(name=name) for name in dict.fromkeys(names or [])]

    @property
    def availability(self) -> dict:
        return {"inStock": bool(self.in_stock), "quantity": self.stock_quantity or 0}

    @property
    def ratings(self) -> dict:
        return {"average": self.rating_average or 0.0, "count": self.rating_count or 0}


class ProductTag(Base):
    __tablename__ = "product_tags"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False, index=True)

    product = relationship("Product", back_populates="tag_rows")
