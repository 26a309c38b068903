"""Pantry management routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from api.dependencies import authorize_user, get_principal, get_store
from api.responses import ERROR_RESPONSES, success_response
from domain.schemas.pantry_schemas import (
    PantryAddRequest,
    PantryItemResponse,
    PantryItemUpdate,
    PantryResponse,
    ShoppingListToPantryRequest,
)
from services.pantry_service import PantryService

router = APIRouter(
    prefix="/pantry",
    tags=["Pantry"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.pantry")


@router.post("/add")
def add_pantry_items(payload: PantryAddRequest, store: DocumentStore = Depends(get_store)):
    """
    Add items to the user's pantry; the pantry is created on first use.

    Entries without a name are skipped rather than failing the request.
    """
    result = PantryService.add_items(store, payload.user_id, payload.items)
    return success_response(
        "Items added to pantry", added=result.written, skipped=result.skipped
    )


@router.post("/from-shopping-list")
def add_from_shopping_list(
    payload: ShoppingListToPantryRequest,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Copy purchased shopping list items into the pantry and check them off"""
    result = PantryService.add_from_shopping_list(
        store, principal, payload.user_id, payload.list_id, payload.purchased_items
    )
    return success_response(
        "Shopping list items added to pantry",
        added=result.written,
        skipped=result.skipped,
    )


@router.get("/{user_id}", response_model=PantryResponse)
def get_pantry(user_id: str, store: DocumentStore = Depends(get_store)):
    """Get all pantry items for a user"""
    items = PantryService.get_items(store, user_id)
    return PantryResponse(items=[PantryItemResponse.model_validate(i) for i in items])


@router.put("/item/{user_id}/{item_id}")
def update_pantry_item(
    user_id: str,
    item_id: str,
    update: PantryItemUpdate,
    store: DocumentStore = Depends(get_store),
):
    """Partially update a pantry item; unknown fields are rejected"""
    PantryService.update_item(store, user_id, item_id, update)
    return success_response("Item updated")


@router.delete("/item/{user_id}/{item_id}")
def delete_pantry_item(user_id: str, item_id: str, store: DocumentStore = Depends(get_store)):
    PantryService.delete_item(store, user_id, item_id)
    return success_response("Item deleted")
