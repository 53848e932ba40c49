# app/services/catalog.py
# Построение запросов к каталогу: фильтры, поиск, сортировка, рекомендации.
from sqlalchemy import asc, desc, func, or_
from sqlalchemy.orm import Query, Session

from app.core.config import settings
from app.models.product import Product, ProductTag

# Имена полей сортировки из API -> колонки модели
SORT_FIELDS = {
    "createdAt": Product.created_at,
    "price": Product.price,
    "name": Product.name,
    "discount": Product.discount,
    "ratings": Product.rating_average,
}
DEFAULT_SORT_FIELD = "createdAt"

RECOMMENDATION_CATEGORY = "earrings"
RECOMMENDATION_LIMIT = 5
RECOMMENDATION_DEFAULT_MAX_PRICE = 5000


def _icontains(column, text: str):
    return func.lower(column).contains(text.lower(), autoescape=True)


def tags_contain(tag: str):
    """У товара есть тег, равный tag."""
    return Product.tag_rows.any(ProductTag.name == tag)


def tags_match(text: str):
    """Хотя бы один тег содержит text (без учёта регистра)."""
    return Product.tag_rows.any(_icontains(ProductTag.name, text))


def build_product_query(
    db: Session,
    category: str | None = None,
    subcategory: str | None = None,
    search: str | None = None,
    min_price: float | None = None,
    max_price: float | None = None,
    sort_by: str = DEFAULT_SORT_FIELD,
    sort_order: str = "desc",
) -> Query:
    """
    Переводит параметры каталога в запрос SQLAlchemy.

    category/subcategory — точное совпадение; search — подстрока без учёта
    регистра в name, description и tags; цена — включительный диапазон,
    каждая граница применяется только если задана. Неизвестное поле
    сортировки заменяется на createdAt.
    """
    query = db.query(Product)

    if category:
        query = query.filter(Product.category == category)
    if subcategory:
        query = query.filter(Product.subcategory == subcategory)
    if search:
        query = query.filter(
            or_(
                _icontains(Product.name, search),
                _icontains(Product.description, search),
                tags_match(search),
            )
        )
    if min_price is not None:
        query = query.filter(Product.price >= min_price)
    if max_price is not None:
        query = query.filter(Product.price <= max_price)

    column = SORT_FIELDS.get(sort_by, SORT_FIELDS[DEFAULT_SORT_FIELD])
    direction = desc if sort_order == "desc" else asc
    return query.order_by(direction(column), direction(Product.id))


def list_products(db: Session, **filters) -> list[Product]:
    """Товары каталога, не больше CATALOG_PAGE_SIZE штук."""
    return build_product_query(db, **filters).limit(settings.CATALOG_PAGE_SIZE).all()


def in_stock_query(db: Session) -> Query:
    return db.query(Product).filter(Product.in_stock.is_(True))


def parse_price_ceiling(price_range: str | None) -> int | None:
    """'1000-3000' -> 3000; нечитаемая верхняя граница -> значение по умолчанию."""
    if not price_range:
        return None
    parts = price_range.split("-")
    try:
        return int(parts[1])
    except (IndexError, ValueError):
        return RECOMMENDATION_DEFAULT_MAX_PRICE


def recommend_for_preferences(db: Session, preferences: dict | None) -> list[Product]:
    """Серьги в наличии, подобранные под форму лица и бюджет пользователя."""
    preferences = preferences or {}
    query = in_stock_query(db).filter(Product.category == RECOMMENDATION_CATEGORY)

    face_shape = preferences.get("faceShape")
    if face_shape:
        query = query.filter(tags_contain(face_shape))

    ceiling = parse_price_ceiling(preferences.get("priceRange"))
    if ceiling is not None:
        query = query.filter(Product.price <= ceiling)

    return query.order_by(Product.id).limit(RECOMMENDATION_LIMIT).all()
