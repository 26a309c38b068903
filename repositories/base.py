"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from adapters.document_store import DocumentStore


def utcnow() -> datetime:
    """Timestamp used for created_at / updated_at stamps."""
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes from clients are taken to be UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BaseRepository(ABC):
    """
    Base repository providing common CRUD operations on one collection.
    All repositories should inherit from this class.
    """

    collection: str = ""

    def __init__(self, store: DocumentStore):
        self.store = store

    def new_id(self) -> str:
        return self.store.new_id()

    def get_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get document by ID"""
        return self.store.get(self.collection, doc_id)

    def exists(self, doc_id: str) -> bool:
        """Check if document exists"""
        return self.get_by_id(doc_id) is not None

    def create(self, data: Dict[str, Any], doc_id: Optional[str] = None) -> str:
        """Create new document and return its ID"""
        doc_id = doc_id or self.new_id()
        self.store.set(self.collection, doc_id, data)
        return doc_id

    def update(self, doc_id: str, data: Dict[str, Any]) -> bool:
        """Update fields of an existing document"""
        return self.store.update(self.collection, doc_id, data)

    def delete(self, doc_id: str) -> bool:
        """Delete document by ID"""
        return self.store.delete(self.collection, doc_id)

    def find_by_owner(
        self, owner_id: str, order_by: str = "created_at", descending: bool = True
    ) -> List[Dict[str, Any]]:
        """All documents owned by a user, newest first by default"""
        return self.store.find(
            self.collection,
            [("owner_id", "==", owner_id)],
            order_by=order_by,
            descending=descending,
        )


class ContainerRepository(BaseRepository):
    """
    Repository for a container document that owns a collection of child records.

    Children live in ``child_collection`` and point at their container through
    ``parent_field``.
    """

    child_collection: str = ""
    parent_field: str = ""
    child_order_by: Optional[str] = None

    def get_children(self, container_id: str) -> List[Dict[str, Any]]:
        return self.store.find(
            self.child_collection,
            [(self.parent_field, "==", container_id)],
            order_by=self.child_order_by,
        )

    def get_child(self, container_id: str, child_id: str) -> Optional[Dict[str, Any]]:
        """Get a child only if it belongs to the given container"""
        child = self.store.get(self.child_collection, child_id)
        if child is None or child.get(self.parent_field) != container_id:
            return None
        return child

    def update_child(self, container_id: str, child_id: str, data: Dict[str, Any]) -> bool:
        if self.get_child(container_id, child_id) is None:
            return False
        return self.store.update(self.child_collection, child_id, data)

    def delete_child(self, container_id: str, child_id: str) -> bool:
        if self.get_child(container_id, child_id) is None:
            return False
        return self.store.delete(self.child_collection, child_id)
