# app/api/chat.py
# Чат-ассистент (без авторизации): ответ LLM + подбор товаров по ключевым словам.
import logging

from fastapi import APIRouter, Depends, HTTPException
from langchain_core.language_models.chat_models import BaseChatModel
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas import ChatIn, ChatOut, ClothingRecommendationIn, ClothingRecommendationOut
from app.services import assistant

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ChatOut)
def chat(
    payload: ChatIn,
    llm: BaseChatModel = Depends(assistant.get_chat_model),
    db: Session = Depends(get_db),
):
    try:
        return assistant.chat(llm, db, payload.message, payload.context)
    except Exception as e:
        logger.error(f"Chat error: {e}")
        raise HTTPException(status_code=500, detail=f"Chat error: {e}")


@router.post("/clothing-recommendations", response_model=ClothingRecommendationOut)
def clothing_recommendations(
    payload: ClothingRecommendationIn,
    llm: BaseChatModel = Depends(assistant.get_chat_model),
):
    try:
        text = assistant.clothing_recommendations(
            llm,
            occasion=payload.occasion,
            body_type=payload.body_type,
            style=payload.style,
            budget=payload.budget,
        )
    except Exception as e:
        logger.error(f"Clothing recommendations error: {e}")
        raise HTTPException(status_code=500, detail=f"Recommendations error: {e}")
    return {**payload.model_dump(), "recommendations": text}
