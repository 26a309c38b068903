"""AI Chef and micronutrition routes backed by the language model"""

from fastapi import APIRouter, Depends
import logging

from adapters.document_store import DocumentStore
from adapters.llm_adapter import LanguageModelClient
from api.dependencies import authorize_user, get_llm, get_store
from api.responses import ERROR_RESPONSES
from domain.schemas.assistant_schemas import (
    AIChefQueryRequest,
    AIChefQueryResponse,
    MicronutritionRequest,
    MicronutritionResponse,
)
from services.assistant_service import AIChefService

router = APIRouter(
    tags=["AI Chef"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.assistant")


@router.post("/ai-chef/query", response_model=AIChefQueryResponse)
def ai_chef_query(
    payload: AIChefQueryRequest,
    store: DocumentStore = Depends(get_store),
    llm: LanguageModelClient = Depends(get_llm),
):
    """Recipe suggestions for a free-text question, using the caller's pantry"""
    answer = AIChefService.query(store, llm, payload.user_id, payload.query)
    return AIChefQueryResponse(response=answer)


@router.post("/micronutrition/analyze", response_model=MicronutritionResponse)
def analyze_micronutrition(
    payload: MicronutritionRequest, llm: LanguageModelClient = Depends(get_llm)
):
    analysis = AIChefService.analyze_micronutrition(llm, payload.food_name)
    return MicronutritionResponse(food_name=payload.food_name, analysis=analysis)
