"""Food image recognition and receipt routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from adapters.llm_adapter import LanguageModelClient
from api.dependencies import authorize_user, get_llm, get_principal, get_store
from api.responses import ERROR_RESPONSES, success_response
from domain.schemas.assistant_schemas import (
    ImageRequest,
    ParsedReceipt,
    ReceiptItem,
    ReceiptTextRequest,
    RecognizedFoodItem,
)
from services.recognition_service import RecognitionService

router = APIRouter(
    tags=["Recognition"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.recognition")


@router.post("/food/recognize")
def recognize_food(
    payload: ImageRequest,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
    llm: LanguageModelClient = Depends(get_llm),
):
    """Identify food items in a photo"""
    items = RecognitionService.recognize_food(store, llm, principal, payload.image_url)
    recognized = [RecognizedFoodItem(**i).model_dump(by_alias=True) for i in items]
    return success_response(
        "Food items recognized successfully", data={"recognizedItems": recognized}
    )


@router.post("/receipt/scan")
def scan_receipt(
    payload: ImageRequest,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
    llm: LanguageModelClient = Depends(get_llm),
):
    """Read line items from a receipt photo"""
    items = RecognitionService.scan_receipt(store, llm, principal, payload.image_url)
    return success_response(
        "Receipt scanned successfully",
        data={"items": [ReceiptItem(**i).model_dump(by_alias=True) for i in items]},
    )


@router.post("/receipt/process")
def process_receipt(payload: ReceiptTextRequest, store: DocumentStore = Depends(get_store)):
    """Parse receipt text that was already extracted from an image"""
    receipt = RecognitionService.process_receipt_text(store, payload.user_id, payload.text)
    return {"success": True, **ParsedReceipt(**receipt).model_dump(by_alias=True)}
