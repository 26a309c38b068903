"""Batched multi-document writer.

Mutating routes that touch a container document (pantry, shopping list,
meal plan) together with a variable number of child records go through
``BatchWriter.write``:

1. reject a malformed request (no container key, non-list entries) before
   touching the store
2. look the container up and stage its creation only when it is absent
3. stage one child write per entry; entries lacking the required name or
   date field are dropped, bad optional values fall back to defaults
4. commit everything as one atomic batch

Container creation is staged as create-if-absent, so two first writers racing
on the same key both land on the same single container document.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Type

from pydantic import BaseModel, ValidationError

from adapters.document_store import DocumentStore, WriteBatch
from app.exceptions import ServiceValidationError, StoreError
from repositories.base import utcnow

logger = logging.getLogger("pantrykeeper.batch_writer")

ChildBuilder = Callable[[Dict[str, Any], datetime], Optional[Dict[str, Any]]]


@dataclass(frozen=True)
class ChildSpec:
    """Where children go and how a raw entry becomes a child document.

    ``build`` returns None for entries that should be dropped.
    """

    collection: str
    parent_field: str
    build: ChildBuilder


@dataclass
class BatchWriteResult:
    container_id: str
    container_created: bool
    written_ids: List[str] = field(default_factory=list)
    skipped: int = 0

    @property
    def written(self) -> int:
        return len(self.written_ids)


def parse_entry(model: Type[BaseModel], entry: Any) -> Optional[BaseModel]:
    """Validate one raw entry; None when it is not an object or a required field is unusable."""
    if not isinstance(entry, dict):
        return None
    try:
        return model.model_validate(entry)
    except ValidationError:
        return None


class BatchWriter:
    @staticmethod
    def write(
        store: DocumentStore,
        container_collection: str,
        container_id: Optional[str],
        build_container: Callable[[datetime], Dict[str, Any]],
        entries: Any,
        child_spec: ChildSpec,
        touch_container: bool = False,
        extra: Optional[Callable[[WriteBatch, datetime], None]] = None,
    ) -> BatchWriteResult:
        """
        Ensure the container exists and persist all valid children atomically.

        Args:
            store: document store to write to
            container_collection: collection holding the container document
            container_id: container key (owner id for pantries, generated id otherwise)
            build_container: returns the container document for a given timestamp;
                only used when the container does not exist yet
            entries: raw child payloads
            child_spec: child collection, parent link field and entry builder
            touch_container: stamp ``updated_at`` on an existing container
            extra: hook to stage additional writes into the same batch

        Returns:
            BatchWriteResult with the new child ids and the number of dropped entries

        Raises:
            ServiceValidationError: container key missing or entries not a list
            StoreError: the batch commit failed; nothing was written
        """
        if not container_id:
            raise ServiceValidationError("Container key is required")
        if not isinstance(entries, list):
            raise ServiceValidationError("Items must be provided as an array")

        now = utcnow()
        batch = store.batch()

        existing = store.get(container_collection, container_id)
        created = existing is None
        if created:
            batch.create_if_absent(container_collection, container_id, build_container(now))
        elif touch_container:
            batch.update(container_collection, container_id, {"updated_at": now})

        result = BatchWriteResult(container_id=container_id, container_created=created)
        for entry in entries:
            child = child_spec.build(entry, now)
            if child is None:
                result.skipped += 1
                continue
            child_id = store.new_id()
            child[child_spec.parent_field] = container_id
            batch.set(child_spec.collection, child_id, child)
            result.written_ids.append(child_id)

        if extra is not None:
            extra(batch, now)

        try:
            batch.commit()
        except StoreError:
            logger.exception(
                "Batch commit failed for %s/%s (%d staged writes)",
                container_collection,
                container_id,
                len(batch),
            )
            raise

        logger.info(
            "Wrote %d children to %s/%s (container created: %s, skipped: %d)",
            result.written,
            container_collection,
            container_id,
            created,
            result.skipped,
        )
        return result
