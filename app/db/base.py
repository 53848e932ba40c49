# app/db/base.py
# Общая declarative база для SQLAlchemy.
# Модуль не импортирует модели, чтобы избежать циклических импортов;
# модели импортируют Base отсюда, а import_models() регистрирует их все.

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def import_models() -> None:
    """Импортирует все модели, чтобы они попали в Base.metadata."""
    import app.models.user  # noqa: F401
    import app.models.product  # noqa: F401
    import app.models.cart  # noqa: F401
    import app.models.wishlist  # noqa: F401
    import app.models.order  # noqa: F401
