"""
Tests for the MongoDB document store, using a mocked MongoClient.

Verifies:
- a batch runs as one transaction on one session
- create-if-absent is an upsert with $setOnInsert, so it never overwrites
- set, update and delete map to replace_one, update_one and delete_one
- an update on a missing document aborts the rest of the batch
- driver errors surface as StoreError
"""

from unittest.mock import MagicMock

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from adapters.mongo_adapter import MongoDocumentStore
from app.exceptions import StoreError


def _mongo():
    """Store over a mocked client; returns (store, client, session, collections)"""
    client = MagicMock()
    session = MagicMock()
    client.start_session.return_value.__enter__.return_value = session
    session.with_transaction.side_effect = lambda callback: callback(session)

    collections = {}
    db = MagicMock()
    db.__getitem__.side_effect = lambda name: collections.setdefault(name, MagicMock())
    client.__getitem__.return_value = db

    return MongoDocumentStore(client, "pantrykeeper"), client, session, collections


def test_batch_runs_in_one_transaction():
    store, client, session, collections = _mongo()

    batch = store.batch()
    batch.create_if_absent("pantries", "u1", {"owner_id": "u1"})
    batch.set("pantry_items", "i1", {"name": "Milk", "pantry_id": "u1"})
    batch.set("pantry_items", "i2", {"name": "Eggs", "pantry_id": "u1"})
    batch.commit()

    client.start_session.assert_called_once()
    session.with_transaction.assert_called_once()
    assert collections["pantry_items"].replace_one.call_count == 2


def test_create_if_absent_uses_set_on_insert():
    store, client, session, collections = _mongo()

    store.commit_batch(
        store.batch().create_if_absent("pantries", "u1", {"id": "u1", "owner_id": "u1"}).ops
    )

    collections["pantries"].update_one.assert_called_once_with(
        {"_id": "u1"},
        {"$setOnInsert": {"owner_id": "u1"}},
        upsert=True,
        session=session,
    )
    collections["pantries"].replace_one.assert_not_called()


def test_set_update_and_delete_ops():
    store, client, session, collections = _mongo()
    lists = collections.setdefault("shopping_lists", MagicMock())
    lists.update_one.return_value.matched_count = 1

    batch = store.batch()
    batch.set("shopping_list_items", "i1", {"name": "Flour"})
    batch.update("shopping_lists", "l1", {"updated_at": "2025-03-03"})
    batch.delete("shopping_list_items", "i0")
    batch.commit()

    items = collections["shopping_list_items"]
    items.replace_one.assert_called_once_with(
        {"_id": "i1"}, {"name": "Flour"}, upsert=True, session=session
    )
    lists.update_one.assert_called_once_with(
        {"_id": "l1"}, {"$set": {"updated_at": "2025-03-03"}}, session=session
    )
    items.delete_one.assert_called_once_with({"_id": "i0"}, session=session)


def test_missing_update_target_aborts_batch():
    store, client, session, collections = _mongo()
    lists = collections.setdefault("shopping_lists", MagicMock())
    lists.update_one.return_value.matched_count = 0

    batch = store.batch()
    batch.update("shopping_lists", "missing", {"updated_at": "2025-03-03"})
    batch.set("pantry_items", "i1", {"name": "Milk"})

    with pytest.raises(StoreError):
        batch.commit()
    assert "pantry_items" not in collections


def test_transaction_failure_is_store_error():
    store, client, session, collections = _mongo()
    session.with_transaction.side_effect = OperationFailure(
        "Transaction numbers are only allowed on a replica set member or mongos"
    )

    with pytest.raises(StoreError):
        store.batch().set("pantries", "u1", {"owner_id": "u1"}).commit()


def test_read_failure_is_store_error():
    store, client, session, collections = _mongo()
    pantries = collections.setdefault("pantries", MagicMock())
    pantries.find_one.side_effect = ServerSelectionTimeoutError("localhost:27017: connection refused")

    with pytest.raises(StoreError):
        store.get("pantries", "u1")


def test_get_maps_object_id_to_id():
    store, client, session, collections = _mongo()
    pantries = collections.setdefault("pantries", MagicMock())
    pantries.find_one.return_value = {"_id": "u1", "owner_id": "u1"}

    assert store.get("pantries", "u1") == {"id": "u1", "owner_id": "u1"}
    pantries.find_one.assert_called_once_with({"_id": "u1"})
