"""Document store interface shared by the MongoDB adapter and the repositories.

Documents live in named collections and are keyed by string ids. Reads return
plain dicts carrying the key under ``id``. Multi-document writes are staged in
a ``WriteBatch`` and committed atomically by the concrete store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
import uuid


SET = "set"
CREATE_IF_ABSENT = "create_if_absent"
UPDATE = "update"
DELETE = "delete"

FILTER_OPS = ("==", "<", "<=", ">", ">=", "array-contains", "in")

Filter = Tuple[str, str, Any]


@dataclass(frozen=True)
class WriteOp:
    """One staged write inside a batch."""

    kind: str
    collection: str
    doc_id: str
    data: Dict[str, Any] = field(default_factory=dict)


class WriteBatch:
    """Collects writes and hands them to the store as one atomic unit."""

    def __init__(self, store: "DocumentStore"):
        self._store = store
        self._ops: List[WriteOp] = []
        self._committed = False

    def __len__(self) -> int:
        return len(self._ops)

    @property
    def ops(self) -> List[WriteOp]:
        return list(self._ops)

    def set(self, collection: str, doc_id: str, data: Dict[str, Any]) -> "WriteBatch":
        self._stage(WriteOp(SET, collection, doc_id, dict(data)))
        return self

    def create_if_absent(
        self, collection: str, doc_id: str, data: Dict[str, Any]
    ) -> "WriteBatch":
        """Create the document unless it already exists; never overwrite it."""
        self._stage(WriteOp(CREATE_IF_ABSENT, collection, doc_id, dict(data)))
        return self

    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> "WriteBatch":
        self._stage(WriteOp(UPDATE, collection, doc_id, dict(data)))
        return self

    def delete(self, collection: str, doc_id: str) -> "WriteBatch":
        self._stage(WriteOp(DELETE, collection, doc_id))
        return self

    def commit(self) -> None:
        if self._committed:
            raise RuntimeError("WriteBatch has already been committed")
        self._committed = True
        if not self._ops:
            return
        self._store.commit_batch(list(self._ops))

    def _stage(self, op: WriteOp) -> None:
        if self._committed:
            raise RuntimeError("Cannot stage writes on a committed WriteBatch")
        self._ops.append(op)


class DocumentStore(ABC):
    """Minimal document database contract used by the repositories."""

    def new_id(self) -> str:
        return uuid.uuid4().hex

    def batch(self) -> WriteBatch:
        return WriteBatch(self)

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Return the document or None when absent."""

    @abstractmethod
    def set(
        self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False
    ) -> None:
        """Write the document, replacing it unless ``merge`` is set."""

    @abstractmethod
    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        """Update fields of an existing document; False when it does not exist."""

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> bool:
        """Delete the document; False when it did not exist."""

    @abstractmethod
    def find(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Return documents matching all filters, optionally ordered on one field."""

    @abstractmethod
    def commit_batch(self, ops: Iterable[WriteOp]) -> None:
        """Apply all ops atomically: either every write lands or none does."""

    def ping(self) -> bool:
        return True

    def close(self) -> None:
        return None


def validate_filters(filters: Sequence[Filter]) -> None:
    for f in filters:
        if len(f) != 3 or f[1] not in FILTER_OPS:
            raise ValueError(f"Unsupported filter: {f!r}")
