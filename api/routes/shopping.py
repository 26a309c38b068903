"""Shopping list routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from api.dependencies import authorize_user, get_principal, get_store
from api.responses import ERROR_RESPONSES, success_response
from domain.schemas.shopping_schemas import (
    ListItemResponse,
    ListItemUpdate,
    ShoppingListAddRequest,
    ShoppingListCreateRequest,
    ShoppingListDetailResponse,
    ShoppingListResponse,
    ShoppingListsResponse,
)
from services.shopping_service import ShoppingListService

router = APIRouter(
    tags=["Shopping Lists"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.shopping")


@router.post("/shopping-list/create")
def create_shopping_list(
    payload: ShoppingListCreateRequest, store: DocumentStore = Depends(get_store)
):
    """Create a shopping list with optional initial items"""
    result = ShoppingListService.create_list(
        store, payload.user_id, payload.name, payload.items
    )
    return success_response("Shopping list created", listId=result.container_id)


@router.get("/shopping-lists/{user_id}", response_model=ShoppingListsResponse)
def get_shopping_lists(user_id: str, store: DocumentStore = Depends(get_store)):
    """All of a user's shopping lists, newest first"""
    lists = ShoppingListService.get_user_lists(store, user_id)
    return ShoppingListsResponse(
        lists=[ShoppingListResponse.model_validate(l) for l in lists]
    )


@router.get("/shopping-list/{list_id}", response_model=ShoppingListDetailResponse)
def get_shopping_list(
    list_id: str,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    shopping_list, items = ShoppingListService.get_list(store, principal, list_id)
    return ShoppingListDetailResponse(
        list=ShoppingListResponse.model_validate(shopping_list),
        items=[ListItemResponse.model_validate(i) for i in items],
    )


@router.post("/shopping-list/{list_id}/add")
def add_shopping_list_items(
    list_id: str,
    payload: ShoppingListAddRequest,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    result = ShoppingListService.add_items(store, principal, list_id, payload.items)
    return success_response(
        "Items added to shopping list", added=result.written, skipped=result.skipped
    )


@router.put("/shopping-list/{list_id}/item/{item_id}")
def update_shopping_list_item(
    list_id: str,
    item_id: str,
    update: ListItemUpdate,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Partially update a list item, e.g. to check it off"""
    ShoppingListService.update_item(store, principal, list_id, item_id, update)
    return success_response("Item updated")


@router.delete("/shopping-list/{list_id}/item/{item_id}")
def delete_shopping_list_item(
    list_id: str,
    item_id: str,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    ShoppingListService.delete_item(store, principal, list_id, item_id)
    return success_response("Item deleted")
