# app/services/assistant.py
# Мост к чат-модели: системные промпты, вызов LLM и подбор товаров по ключевым словам.
import logging
import re
from functools import lru_cache

from fastapi import HTTPException
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.product import Product
from app.services.catalog import in_stock_query, tags_contain

logger = logging.getLogger(__name__)

JEWELRY_SYSTEM_PROMPT = """\
You are Glimmr's AI jewelry assistant. Provide helpful responses on jewelry,
recommending earrings based on face shape, style, or ethnic outfits (e.g., sarees, lehengas).
Suggest products from our collection. Be friendly and knowledgeable about jewelry trends and styling.
"""

CLOTHING_SYSTEM_PROMPT = """\
You are Glimmr's AI fashion assistant specializing in clothing recommendations.
You help users find the perfect outfits for different occasions, body types, and styles.
Provide helpful fashion advice, styling tips, and outfit suggestions.
Be friendly, knowledgeable, and specific in your recommendations.
"""

STYLIST_SYSTEM_PROMPT = (
    "You are a professional fashion stylist. Provide detailed, practical clothing "
    "recommendations with specific styling advice."
)

STYLIST_PROMPT_TEMPLATE = """\
Provide detailed clothing recommendations for:
Occasion: {occasion}
Body Type: {body_type}
Style Preference: {style}
Budget: {budget}

Give specific outfit suggestions, styling tips, and color recommendations.
"""

CHAT_MAX_TOKENS = 500
CHAT_TEMPERATURE = 0.7
STYLIST_MAX_TOKENS = 800
STYLIST_TEMPERATURE = 0.8

MAX_SUGGESTIONS = 3

RECOMMEND_TRIGGERS = ("recommend", "earring")
JEWELRY_STYLES = {"studs", "jhumkas", "hoops", "drops", "chandeliers", "traditional", "modern"}
CLOTHING_WORDS = {"dress", "saree", "lehenga", "kurta", "top", "blouse", "pants", "skirt"}
CLOTHING_PAIRING_TAGS = ("ethnic", "traditional", "modern")


@lru_cache
def build_chat_model() -> BaseChatModel:
    return ChatOpenAI(model=settings.OPENAI_MODEL, api_key=settings.OPENAI_API_KEY)


def get_chat_model() -> BaseChatModel:
    """Зависимость FastAPI: общий клиент чат-модели; ошибка настройки — 500 Chat error."""
    try:
        return build_chat_model()
    except Exception as e:
        logger.error(f"Chat model unavailable: {e}")
        raise HTTPException(status_code=500, detail=f"Chat error: {e}")


def complete(llm: BaseChatModel, system_prompt: str, user_message: str,
             max_tokens: int, temperature: float) -> str:
    """Один запрос без истории: system + user, ответ — текст модели."""
    messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_message)]
    result = llm.bind(max_tokens=max_tokens, temperature=temperature).invoke(messages)
    return result.content


def _words(message: str) -> set[str]:
    return set(re.findall(r"[a-z]+", message.lower()))


def suggest_products(db: Session, message: str, context: str) -> list[Product]:
    """
    Подбор товаров по ключевым словам сообщения пользователя.

    jewelry: при словах recommend/earring ищем серьги в наличии, сужая по
    подкатегориям-стилям, если они упомянуты. clothing: при упоминании
    одежды предлагаем украшения с тегами ethnic/traditional/modern.
    """
    lowered = message.lower()
    words = _words(message)

    if context == "clothing":
        if not words & CLOTHING_WORDS:
            return []
        query = in_stock_query(db).filter(or_(*(tags_contain(tag) for tag in CLOTHING_PAIRING_TAGS)))
    else:
        if not any(trigger in lowered for trigger in RECOMMEND_TRIGGERS):
            return []
        query = in_stock_query(db).filter(Product.category == "earrings")
        styles = words & JEWELRY_STYLES
        if styles:
            query = query.filter(Product.subcategory.in_(sorted(styles)))

    return query.order_by(Product.id).limit(MAX_SUGGESTIONS).all()


def to_suggestion(product: Product) -> dict:
    return {
        "id": product.id,
        "name": product.name,
        "price": product.price,
        "image": product.images[0] if product.images else None,
        "category": product.category,
    }


def chat(llm: BaseChatModel, db: Session, message: str, context: str = "jewelry") -> dict:
    system_prompt = CLOTHING_SYSTEM_PROMPT if context == "clothing" else JEWELRY_SYSTEM_PROMPT
    reply = complete(llm, system_prompt, message, CHAT_MAX_TOKENS, CHAT_TEMPERATURE)
    suggestions = suggest_products(db, message, context)
    return {
        "response": reply,
        "suggested_products": [to_suggestion(p) for p in suggestions],
        "context": context,
    }


def clothing_recommendations(llm: BaseChatModel, occasion=None, body_type=None, style=None, budget=None) -> str:
    prompt = STYLIST_PROMPT_TEMPLATE.format(
        occasion=occasion, body_type=body_type, style=style, budget=budget
    )
    return complete(llm, STYLIST_SYSTEM_PROMPT, prompt, STYLIST_MAX_TOKENS, STYLIST_TEMPERATURE)
