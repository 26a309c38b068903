from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from services.ownership import ensure_owner
from domain.schemas.shopping_schemas import ListItemEntry, ListItemUpdate
from repositories import ShoppingListRepository, utcnow
from services.batch_writer import BatchWriter, BatchWriteResult, ChildSpec, parse_entry
from app.exceptions import NotFoundError

logger = logging.getLogger("pantrykeeper.shopping")

DEFAULT_LIST_NAME = "Shopping List"


def build_list_item(entry: Any, now: datetime) -> Optional[Dict[str, Any]]:
    item = parse_entry(ListItemEntry, entry)
    if item is None:
        return None
    return {
        "name": item.name,
        "quantity": item.quantity or 1,
        "unit": item.unit or "item",
        "category": item.category or "uncategorized",
        "is_checked": bool(item.is_checked),
        "created_at": now,
        "updated_at": now,
    }


LIST_ITEMS = ChildSpec(
    collection=ShoppingListRepository.child_collection,
    parent_field=ShoppingListRepository.parent_field,
    build=build_list_item,
)


class ShoppingListService:
    """Shopping lists are addressed by generated id and checked against their owner"""

    @staticmethod
    def create_list(
        store: DocumentStore,
        user_id: str,
        name: Optional[str] = None,
        items: Optional[List[Any]] = None,
    ) -> BatchWriteResult:
        """Create a list and its initial items in one batch"""
        list_id = store.new_id()

        def new_list(now: datetime) -> Dict[str, Any]:
            return {
                "owner_id": user_id,
                "name": name or DEFAULT_LIST_NAME,
                "created_at": now,
                "updated_at": now,
            }

        result = BatchWriter.write(
            store,
            ShoppingListRepository.collection,
            list_id,
            new_list,
            items or [],
            LIST_ITEMS,
        )
        logger.info(
            f"shopping_list_created user_id={user_id} list_id={list_id} items={result.written}"
        )
        return result

    @staticmethod
    def get_user_lists(store: DocumentStore, user_id: str) -> List[Dict[str, Any]]:
        return ShoppingListRepository(store).find_by_owner(user_id)

    @staticmethod
    def _get_owned_list(
        repo: ShoppingListRepository, principal: Principal, list_id: str
    ) -> Dict[str, Any]:
        shopping_list = repo.get_by_id(list_id)
        if shopping_list is None:
            raise NotFoundError("Shopping list not found")
        return ensure_owner(principal, shopping_list, "shopping list")

    @staticmethod
    def get_list(
        store: DocumentStore, principal: Principal, list_id: str
    ) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        repo = ShoppingListRepository(store)
        shopping_list = ShoppingListService._get_owned_list(repo, principal, list_id)
        return shopping_list, repo.get_children(list_id)

    @staticmethod
    def add_items(
        store: DocumentStore, principal: Principal, list_id: str, items: Any
    ) -> BatchWriteResult:
        """Append items to an existing list and stamp the list's ``updated_at``"""
        repo = ShoppingListRepository(store)
        shopping_list = ShoppingListService._get_owned_list(repo, principal, list_id)

        def recreate(now: datetime) -> Dict[str, Any]:
            # only reached if the list vanished after the ownership check
            data = {k: v for k, v in shopping_list.items() if k != "id"}
            return dict(data, updated_at=now)

        result = BatchWriter.write(
            store,
            repo.collection,
            list_id,
            recreate,
            items,
            LIST_ITEMS,
            touch_container=True,
        )
        logger.info(f"shopping_list_items_added list_id={list_id} added={result.written}")
        return result

    @staticmethod
    def update_item(
        store: DocumentStore,
        principal: Principal,
        list_id: str,
        item_id: str,
        update: ListItemUpdate,
    ) -> None:
        repo = ShoppingListRepository(store)
        ShoppingListService._get_owned_list(repo, principal, list_id)

        changes = update.model_dump(exclude_unset=True)
        changes["updated_at"] = utcnow()
        if not repo.update_child(list_id, item_id, changes):
            raise NotFoundError("Item not found")
        logger.info(f"shopping_list_item_updated list_id={list_id} item_id={item_id}")

    @staticmethod
    def delete_item(
        store: DocumentStore, principal: Principal, list_id: str, item_id: str
    ) -> None:
        repo = ShoppingListRepository(store)
        ShoppingListService._get_owned_list(repo, principal, list_id)

        if not repo.delete_child(list_id, item_id):
            raise NotFoundError("Item not found")
        logger.info(f"shopping_list_item_deleted list_id={list_id} item_id={item_id}")
