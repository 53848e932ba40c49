"""
API Schemas

Pydantic models for request bodies and responses.
JSON keys are camelCase (productId, originalPrice, availability.inStock);
snake_case names are accepted on input as well.
"""

from datetime import datetime
from typing import List, Optional, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from app.models.order import OrderStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Users

class Address(CamelModel):
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    pincode: Optional[str] = None
    country: Optional[str] = None


class Preferences(CamelModel):
    face_shape: Optional[str] = Field(None, description="oval, round, square, heart...")
    style_preference: List[str] = []
    price_range: Optional[str] = Field(None, description="Range as 'low-high', e.g. '1000-3000'")
    metal_preference: List[str] = []


class UserOut(CamelModel):
    id: int
    name: str
    email: EmailStr
    phone: Optional[str] = None
    address: Optional[Address] = None
    preferences: Optional[Preferences] = None


class RegisterIn(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    phone: Optional[str] = None


class LoginIn(CamelModel):
    email: EmailStr
    password: str


class AuthOut(CamelModel):
    token: str
    user: UserOut


class ProfileUpdate(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[Address] = None
    preferences: Optional[Preferences] = None


# Catalog

class Specifications(CamelModel):
    material: Optional[str] = None
    weight: Optional[str] = None
    dimensions: Optional[str] = None
    gemstone: Optional[str] = None
    metal_purity: Optional[str] = None


class Availability(CamelModel):
    in_stock: bool = True
    quantity: int = 0


class Ratings(CamelModel):
    average: float = 0.0
    count: int = 0


class ProductOut(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    category: str
    subcategory: Optional[str] = None
    price: float
    original_price: Optional[float] = None
    discount: Optional[float] = None
    images: List[str] = []
    specifications: Optional[Specifications] = None
    availability: Availability
    tags: List[str] = []
    ratings: Ratings
    created_at: Optional[datetime] = None


# Cart / wishlist

class CartAddIn(CamelModel):
    product_id: int
    quantity: int = 1


class CartUpdateIn(CamelModel):
    product_id: int
    quantity: int


class ProductRefIn(CamelModel):
    product_id: int


class CartLineOut(CamelModel):
    product: ProductOut
    quantity: int


class CartOut(CamelModel):
    id: Optional[int] = None
    user_id: Optional[int] = None
    items: List[CartLineOut] = []


class WishlistOut(CamelModel):
    id: Optional[int] = None
    user_id: Optional[int] = None
    items: List[ProductOut] = []


class MessageOut(CamelModel):
    message: str


# Orders

class OrderCreateIn(CamelModel):
    total: Optional[float] = Field(None, ge=0)
    shipping_address: Optional[Address] = None


class OrderLineOut(CamelModel):
    product: ProductOut
    quantity: int
    price: float


class OrderOut(CamelModel):
    id: int
    user_id: int
    items: List[OrderLineOut]
    total: float
    status: OrderStatus
    shipping_address: Optional[Address] = None
    created_at: Optional[datetime] = None


# Chat assistant

class ChatIn(CamelModel):
    message: str = Field(..., min_length=1)
    context: Literal["jewelry", "clothing"] = "jewelry"
    user_id: Optional[int] = None


class SuggestedProduct(CamelModel):
    id: int
    name: str
    price: float
    image: Optional[str] = None
    category: str


class ChatOut(CamelModel):
    response: str
    suggested_products: List[SuggestedProduct] = []
    context: str


class ClothingRecommendationIn(CamelModel):
    occasion: Optional[str] = None
    body_type: Optional[str] = None
    style: Optional[str] = None
    budget: Optional[str] = None


class ClothingRecommendationOut(ClothingRecommendationIn):
    recommendations: str
