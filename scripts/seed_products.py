# scripts/seed_products.py
# Добавляет в каталог демонстрационную коллекцию серёг (повторный запуск обновляет её).
# Запуск из корня проекта: python -m scripts.seed_products
import logging

from sqlalchemy.orm import Session

from app.db.base import Base, import_models
from app.db.session import SessionLocal, engine
from app.models.product import Product

logger = logging.getLogger(__name__)

IMG = "https://images.unsplash.com/photo-{}?w=500"

SAMPLE_PRODUCTS = [
    {
        "name": "Classic Diamond Studs",
        "description": "Elegant diamond stud earrings perfect for everyday wear and special occasions.",
        "subcategory": "studs",
        "price": 2500, "original_price": 3000, "discount": 17,
        "images": [IMG.format("1515562141207-7a88fb7ce338"), IMG.format("1506630448388-4e683c67ddb0")],
        "specifications": {"material": "Sterling Silver", "weight": "2.5g", "dimensions": "6mm diameter",
                           "gemstone": "Cubic Zirconia", "metalPurity": "925 Silver"},
        "stock_quantity": 25,
        "tags": ["classic", "diamond", "everyday", "elegant"],
        "rating_average": 4.5, "rating_count": 123,
    },
    {
        "name": "Rose Gold Hoops",
        "description": "Beautiful rose gold plated hoop earrings that add glamour to any outfit.",
        "subcategory": "hoops",
        "price": 1800, "original_price": 2200, "discount": 18,
        "images": [IMG.format("1535632066927-ab7c9ab60908")],
        "specifications": {"material": "Rose Gold Plated", "weight": "3.2g", "dimensions": "25mm diameter",
                           "gemstone": "None", "metalPurity": "18K Gold Plated"},
        "stock_quantity": 18,
        "tags": ["hoops", "rose-gold", "glamorous", "medium"],
        "rating_average": 4.3, "rating_count": 89,
    },
    {
        "name": "Ethnic Jhumka Earrings",
        "description": "Traditional jhumkas with pearls and kundan work, made for sarees and lehengas.",
        "subcategory": "jhumkas",
        "price": 3200, "original_price": 4000, "discount": 20,
        "images": [IMG.format("1617038260897-41a1f14a8ca0")],
        "specifications": {"material": "Gold Plated", "weight": "8.5g", "dimensions": "40mm length",
                           "gemstone": "Pearls, Kundan", "metalPurity": "22K Gold Plated"},
        "stock_quantity": 12,
        "tags": ["ethnic", "traditional", "jhumka", "bridal", "pearls"],
        "rating_average": 4.7, "rating_count": 156,
    },
    {
        "name": "Pearl Drop Earrings",
        "description": "Freshwater pearl drops on sterling silver for formal evenings.",
        "subcategory": "drops",
        "price": 2800, "original_price": 3500, "discount": 20,
        "images": [IMG.format("1573408301185-9146fe634ad0")],
        "specifications": {"material": "Sterling Silver", "weight": "4.1g", "dimensions": "30mm length",
                           "gemstone": "Fresh Water Pearls", "metalPurity": "925 Silver"},
        "stock_quantity": 20,
        "tags": ["pearls", "drop", "elegant", "formal", "oval"],
        "rating_average": 4.4, "rating_count": 92,
    },
    {
        "name": "Geometric Statement Earrings",
        "description": "Bold geometric shapes in gold plated brass.",
        "subcategory": "statement",
        "price": 2200, "original_price": 2800, "discount": 21,
        "images": [IMG.format("1611652022419-a9419f74343d")],
        "specifications": {"material": "Brass", "weight": "5.2g", "dimensions": "45mm length",
                           "gemstone": "None", "metalPurity": "Gold Plated Brass"},
        "stock_quantity": 15,
        "tags": ["geometric", "modern", "statement", "bold", "round"],
        "rating_average": 4.2, "rating_count": 67,
    },
    {
        "name": "Vintage Chandelier Earrings",
        "description": "Antique finish chandeliers with Austrian crystals for bridal looks.",
        "subcategory": "chandeliers",
        "price": 4200, "original_price": 5500, "discount": 24,
        "images": [IMG.format("1544005313-94ddf0286df2")],
        "specifications": {"material": "Antique Gold Plated", "weight": "12.3g", "dimensions": "65mm length",
                           "gemstone": "Austrian Crystals", "metalPurity": "18K Gold Plated"},
        "stock_quantity": 8,
        "tags": ["vintage", "chandelier", "crystals", "bridal", "heavy"],
        "rating_average": 4.8, "rating_count": 201,
    },
    {
        "name": "Colorful Tassel Earrings",
        "description": "Light cotton thread tassels for festivals and casual days.",
        "subcategory": "tassel",
        "price": 1200, "original_price": 1500, "discount": 20,
        "images": [IMG.format("1506630448388-4e683c67ddb0")],
        "specifications": {"material": "Cotton Thread, Metal", "weight": "3.5g", "dimensions": "50mm length",
                           "gemstone": "None", "metalPurity": "Brass Base"},
        "in_stock": False,
        "stock_quantity": 0,
        "tags": ["tassel", "colorful", "casual", "festival", "fun"],
        "rating_average": 4.0, "rating_count": 78,
    },
]


def seed(db: Session) -> int:
    """
    Обновляет SAMPLE_PRODUCTS по имени или добавляет недостающие.

    Остальные товары не удаляются: на них ссылаются корзины, избранное
    и заказы. Возвращает число обработанных образцов.
    """
    for data in SAMPLE_PRODUCTS:
        fields = {"category": "earrings", "in_stock": True, **data}
        product = db.query(Product).filter(Product.name == fields["name"]).first()
        if product is None:
            db.add(Product(**fields))
        else:
            for key, value in fields.items():
                setattr(product, key, value)
    db.commit()
    return len(SAMPLE_PRODUCTS)


def main():
    logging.basicConfig(level=logging.INFO)
    import_models()
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        count = seed(db)
        logger.info(f"✅ Seeded {count} sample products")
    finally:
        db.close()


if __name__ == '__main__':
    main()
