"""MongoDB adapter implementing the document store contract.
"""

from typing import Optional, Dict, List, Any, Iterable, Sequence
import logging
from pymongo import MongoClient, ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from adapters.document_store import (
    DocumentStore,
    WriteOp,
    Filter,
    SET,
    CREATE_IF_ABSENT,
    UPDATE,
    DELETE,
    validate_filters,
)
from app.exceptions import StoreError

logger = logging.getLogger("pantrykeeper.mongo")

_RANGE_OPS = {"<": "$lt", "<=": "$lte", ">": "$gt", ">=": "$gte", "in": "$in"}


def _to_public(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    out = dict(doc)
    out["id"] = str(out.pop("_id"))
    return out


def _strip_id(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k not in ("_id", "id")}


def build_query(filters: Sequence[Filter]) -> Dict[str, Any]:
    """Translate ``(field, op, value)`` triples into a MongoDB filter document."""
    validate_filters(filters)
    query: Dict[str, Any] = {}
    for field_name, op, value in filters:
        if op in ("==", "array-contains"):
            # arrays match on element equality
            query[field_name] = value
        else:
            clause = query.setdefault(field_name, {})
            if not isinstance(clause, dict):
                raise ValueError(f"Conflicting filters on {field_name}")
            clause[_RANGE_OPS[op]] = value
    return query


class MongoDocumentStore(DocumentStore):
    """Document store backed by a MongoDB database.

    Batch commits run inside a multi-document transaction, so the server must
    be a replica set (a single-node replica set is enough for development).
    """

    def __init__(self, client: MongoClient, db_name: str = "pantrykeeper"):
        self._client = client
        self._db = client[db_name]

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        try:
            return _to_public(self._db[collection].find_one({"_id": doc_id}))
        except PyMongoError as exc:
            logger.exception("Error reading %s/%s", collection, doc_id)
            raise StoreError(f"get {collection}/{doc_id} failed: {exc}") from exc

    def set(
        self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False
    ) -> None:
        try:
            if merge:
                self._db[collection].update_one(
                    {"_id": doc_id}, {"$set": _strip_id(data)}, upsert=True
                )
            else:
                self._db[collection].replace_one(
                    {"_id": doc_id}, _strip_id(data), upsert=True
                )
        except PyMongoError as exc:
            logger.exception("Error writing %s/%s", collection, doc_id)
            raise StoreError(f"set {collection}/{doc_id} failed: {exc}") from exc

    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        try:
            result = self._db[collection].update_one(
                {"_id": doc_id}, {"$set": _strip_id(data)}
            )
            return result.matched_count > 0
        except PyMongoError as exc:
            logger.exception("Error updating %s/%s", collection, doc_id)
            raise StoreError(f"update {collection}/{doc_id} failed: {exc}") from exc

    def delete(self, collection: str, doc_id: str) -> bool:
        try:
            return self._db[collection].delete_one({"_id": doc_id}).deleted_count > 0
        except PyMongoError as exc:
            logger.exception("Error deleting %s/%s", collection, doc_id)
            raise StoreError(f"delete {collection}/{doc_id} failed: {exc}") from exc

    def find(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        query = build_query(filters)
        try:
            cursor = self._db[collection].find(query)
            if order_by:
                cursor = cursor.sort(order_by, DESCENDING if descending else ASCENDING)
            if limit:
                cursor = cursor.limit(limit)
            docs = [_to_public(d) for d in cursor]
            logger.debug("Found %d documents in %s", len(docs), collection)
            return docs
        except PyMongoError as exc:
            logger.exception("Error querying %s", collection)
            raise StoreError(f"find on {collection} failed: {exc}") from exc

    def commit_batch(self, ops: Iterable[WriteOp]) -> None:
        ops = list(ops)

        def apply(session):
            for op in ops:
                self._apply(op, session)

        try:
            with self._client.start_session() as session:
                session.with_transaction(apply)
            logger.debug("Committed batch of %d writes", len(ops))
        except PyMongoError as exc:
            logger.exception("Batch commit of %d writes failed", len(ops))
            raise StoreError(f"batch commit failed: {exc}") from exc

    def _apply(self, op: WriteOp, session) -> None:
        col = self._db[op.collection]
        if op.kind == SET:
            col.replace_one(
                {"_id": op.doc_id}, _strip_id(op.data), upsert=True, session=session
            )
        elif op.kind == CREATE_IF_ABSENT:
            col.update_one(
                {"_id": op.doc_id},
                {"$setOnInsert": _strip_id(op.data)},
                upsert=True,
                session=session,
            )
        elif op.kind == UPDATE:
            result = col.update_one(
                {"_id": op.doc_id}, {"$set": _strip_id(op.data)}, session=session
            )
            if result.matched_count == 0:
                # abort the transaction like a failed batch update would
                raise StoreError(f"update target {op.collection}/{op.doc_id} missing")
        elif op.kind == DELETE:
            col.delete_one({"_id": op.doc_id}, session=session)
        else:
            raise ValueError(f"Unknown write op {op.kind!r}")

    def ping(self) -> bool:
        try:
            self._client.admin.command("ping")
            return True
        except PyMongoError:
            logger.warning("MongoDB ping failed", exc_info=True)
            return False

    def close(self) -> None:
        """Close MongoDB connection."""
        try:
            self._client.close()
            logger.info("MongoDB client closed")
        except PyMongoError:
            logger.exception("Error closing MongoDB client")


def connect(uri: str, db_name: str = "pantrykeeper", timeout_ms: int = 5000) -> MongoDocumentStore:
    """Create a client, verify the server answers, and wrap it as a store."""
    client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms, tz_aware=True)
    store = MongoDocumentStore(client, db_name)
    if store.ping():
        logger.info("Connected to MongoDB (database: %s)", db_name)
    else:
        logger.warning("MongoDB not reachable yet; requests will fail until it is")
    return store
