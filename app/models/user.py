# app/models/user.py
# Модель пользователя: email, hashed_password, контакты и предпочтения по украшениям.
from sqlalchemy import Column, Integer, String, DateTime, JSON
from datetime import datetime
from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    # {street, city, state, pincode, country}
    address = Column(JSON, nullable=True)
    # {faceShape, stylePreference[], priceRange, metalPreference[]}
    preferences = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
