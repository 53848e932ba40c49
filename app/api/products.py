# app/api/products.py
# Каталог: список с фильтрами/поиском/сортировкой и карточка товара.
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas import ProductOut
from app.services import catalog
from app.services.cart import get_product_or_404

router = APIRouter()


@router.get("", response_model=List[ProductOut])
def list_products(
    category: str | None = None,
    subcategory: str | None = None,
    search: str | None = None,
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    sort_by: str = Query(catalog.DEFAULT_SORT_FIELD, alias="sortBy"),
    sort_order: str = Query("desc", alias="sortOrder"),
    db: Session = Depends(get_db),
):
    return catalog.list_products(
        db,
        category=category,
        subcategory=subcategory,
        search=search,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return get_product_or_404(db, product_id)
