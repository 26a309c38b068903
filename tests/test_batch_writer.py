"""
Tests for the batched multi-document writer.

Verifies:
- container is created on first use and left untouched afterwards
- repeated calls add new children each time
- entries without a name are dropped, defaults are applied
- top-level validation happens before any store access
- a failed commit writes nothing
"""

import pytest

from app.exceptions import ServiceValidationError, StoreError
from services.batch_writer import BatchWriter, ChildSpec
from services.pantry_service import PANTRY_ITEMS, PantryService
from test_fixtures import InMemoryDocumentStore


def _pantry(store):
    return store.collections.get("pantries", {})


def test_first_write_creates_container_and_children():
    store = InMemoryDocumentStore()

    result = PantryService.add_items(store, "u1", [{"name": "Milk", "quantity": 2}])

    assert result.container_created is True
    assert result.written == 1
    assert _pantry(store)["u1"]["owner_id"] == "u1"
    item = store.docs("pantry_items")[0]
    assert item["name"] == "Milk"
    assert item["quantity"] == 2
    assert item["pantry_id"] == "u1"


def test_defaults_applied_and_nameless_entries_skipped():
    store = InMemoryDocumentStore()

    result = PantryService.add_items(
        store, "u1", [{"name": "Milk"}, {"quantity": 2}, "eggs", {"name": ""}]
    )

    assert result.written == 1
    assert result.skipped == 3
    (item,) = store.docs("pantry_items")
    assert item["quantity"] == 1
    assert item["unit"] == "item"
    assert item["category"] == "uncategorized"
    assert item["is_custom"] is False
    assert item["expiry_date"] is None
    assert item["created_at"] == item["updated_at"]
    assert item["purchase_date"] == item["created_at"]


def test_zero_quantity_falls_back_to_one():
    store = InMemoryDocumentStore()
    PantryService.add_items(store, "u1", [{"name": "Rice", "quantity": 0}])
    assert store.docs("pantry_items")[0]["quantity"] == 1


def test_second_write_leaves_container_untouched():
    store = InMemoryDocumentStore()
    PantryService.add_items(store, "u1", [{"name": "Milk"}, {"name": "Eggs"}])
    container_before = dict(_pantry(store)["u1"])

    result = PantryService.add_items(store, "u1", [{"name": "Milk"}, {"name": "Eggs"}])

    assert result.container_created is False
    assert _pantry(store)["u1"] == container_before
    assert store.count("pantries") == 1
    # no deduplication: each call adds its own children
    assert store.count("pantry_items") == 4


def test_empty_entries_still_creates_container():
    store = InMemoryDocumentStore()

    result = PantryService.add_items(store, "u1", [])

    assert result.written == 0
    assert store.count("pantries") == 1


@pytest.mark.parametrize("container_id, entries", [(None, []), ("", []), ("u1", "milk"), ("u1", None)])
def test_invalid_request_rejected_before_store_access(container_id, entries):
    store = InMemoryDocumentStore()

    with pytest.raises(ServiceValidationError):
        PantryService.add_items(store, container_id, entries)

    assert store.reads == 0
    assert store.commits == 0


def test_failed_commit_writes_nothing():
    store = InMemoryDocumentStore()
    store.fail_commits = True

    with pytest.raises(StoreError):
        PantryService.add_items(store, "u1", [{"name": "Milk"}])

    assert store.count("pantries") == 0
    assert store.count("pantry_items") == 0


def test_failing_op_rolls_back_whole_batch():
    """An update on a missing document aborts every staged write"""
    store = InMemoryDocumentStore()

    def update_missing(batch, now):
        batch.update("shopping_lists", "missing", {"updated_at": now})

    with pytest.raises(StoreError):
        BatchWriter.write(
            store,
            "pantries",
            "u1",
            lambda now: {"owner_id": "u1"},
            [{"name": "Milk"}],
            PANTRY_ITEMS,
            extra=update_missing,
        )

    assert store.count("pantries") == 0
    assert store.count("pantry_items") == 0


def test_touch_container_stamps_existing_container():
    store = InMemoryDocumentStore()
    spec = ChildSpec("notes", "board_id", lambda entry, now: dict(entry, created_at=now))
    BatchWriter.write(store, "boards", "b1", lambda now: {"updated_at": None}, [], spec)

    BatchWriter.write(
        store,
        "boards",
        "b1",
        lambda now: {"updated_at": None},
        [{"text": "hello"}],
        spec,
        touch_container=True,
    )

    board = store.get("boards", "b1")
    assert board["updated_at"] is not None
    assert store.docs("notes")[0]["board_id"] == "b1"
