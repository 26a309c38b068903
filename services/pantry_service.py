from datetime import datetime
from typing import Any, Dict, List, Optional
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore, WriteBatch
from services.ownership import ensure_owner
from domain.schemas.pantry_schemas import PantryItemEntry, PantryItemUpdate
from repositories import PantryRepository, ShoppingListRepository, as_utc, utcnow
from services.batch_writer import BatchWriter, BatchWriteResult, ChildSpec, parse_entry
from app.exceptions import NotFoundError

logger = logging.getLogger("pantrykeeper.pantry")


def build_pantry_item(entry: Any, now: datetime) -> Optional[Dict[str, Any]]:
    """Turn one raw entry into a pantry item document, None to drop it"""
    item = parse_entry(PantryItemEntry, entry)
    if item is None:
        return None
    return {
        "name": item.name,
        "quantity": item.quantity or 1,
        "unit": item.unit or "item",
        "category": item.category or "uncategorized",
        "expiry_date": as_utc(item.expiry_date),
        "purchase_date": as_utc(item.purchase_date) or now,
        "custom_image": item.custom_image,
        "is_custom": bool(item.is_custom),
        "created_at": now,
        "updated_at": now,
    }


PANTRY_ITEMS = ChildSpec(
    collection=PantryRepository.child_collection,
    parent_field=PantryRepository.parent_field,
    build=build_pantry_item,
)


def _new_pantry(user_id: str):
    def build(now: datetime) -> Dict[str, Any]:
        return {"owner_id": user_id, "created_at": now, "updated_at": now}

    return build


class PantryService:
    @staticmethod
    def add_items(store: DocumentStore, user_id: str, items: Any) -> BatchWriteResult:
        """
        Add items to a user's pantry, creating the pantry on first use.

        Entries without a usable name are skipped; all other entries are
        written in a single atomic batch.
        """
        result = BatchWriter.write(
            store,
            PantryRepository.collection,
            user_id,
            _new_pantry(user_id),
            items,
            PANTRY_ITEMS,
        )
        logger.info(
            f"pantry_items_added user_id={user_id} added={result.written} skipped={result.skipped}"
        )
        return result

    @staticmethod
    def get_items(store: DocumentStore, user_id: str) -> List[Dict[str, Any]]:
        repo = PantryRepository(store)
        if not repo.exists(user_id):
            raise NotFoundError("Pantry not found")
        return repo.get_children(user_id)

    @staticmethod
    def update_item(
        store: DocumentStore, user_id: str, item_id: str, update: PantryItemUpdate
    ) -> None:
        """Apply a partial update; ``updated_at`` is always stamped"""
        changes = update.model_dump(exclude_unset=True)
        for key in ("expiry_date", "purchase_date"):
            if key in changes:
                changes[key] = as_utc(changes[key])
        changes["updated_at"] = utcnow()

        if not PantryRepository(store).update_child(user_id, item_id, changes):
            raise NotFoundError("Item not found")
        logger.info(f"pantry_item_updated user_id={user_id} item_id={item_id}")

    @staticmethod
    def delete_item(store: DocumentStore, user_id: str, item_id: str) -> None:
        if not PantryRepository(store).delete_child(user_id, item_id):
            raise NotFoundError("Item not found")
        logger.info(f"pantry_item_deleted user_id={user_id} item_id={item_id}")

    @staticmethod
    def add_from_shopping_list(
        store: DocumentStore,
        principal: Principal,
        user_id: str,
        list_id: str,
        purchased_item_ids: List[str],
    ) -> BatchWriteResult:
        """
        Move purchased shopping list items into the pantry.

        The purchased list items are copied into the pantry and checked off on
        the list in the same batch, so a failure leaves both untouched.
        """
        lists = ShoppingListRepository(store)
        shopping_list = lists.get_by_id(list_id)
        if shopping_list is None:
            raise NotFoundError("Shopping list not found")
        ensure_owner(principal, shopping_list, "shopping list")

        wanted = set(purchased_item_ids)
        purchased = [i for i in lists.get_children(list_id) if i["id"] in wanted]

        def check_off(batch: WriteBatch, now: datetime) -> None:
            for item in purchased:
                batch.update(
                    lists.child_collection,
                    item["id"],
                    {"is_checked": True, "updated_at": now},
                )
            if purchased:
                batch.update(lists.collection, list_id, {"updated_at": now})

        entries = [
            {
                "name": item.get("name"),
                "quantity": item.get("quantity"),
                "unit": item.get("unit"),
                "category": item.get("category"),
            }
            for item in purchased
        ]
        result = BatchWriter.write(
            store,
            PantryRepository.collection,
            user_id,
            _new_pantry(user_id),
            entries,
            PANTRY_ITEMS,
            extra=check_off,
        )
        result.skipped += len(wanted) - len(purchased)
        logger.info(
            f"shopping_list_to_pantry user_id={user_id} list_id={list_id} moved={result.written}"
        )
        return result
