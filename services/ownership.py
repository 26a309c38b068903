"""Ownership checks for documents addressed by generated id"""

from typing import Any, Dict, Mapping
import logging

from adapters.auth_adapter import Principal
from app.exceptions import ForbiddenError

logger = logging.getLogger("pantrykeeper.ownership")


def ensure_owner(
    principal: Principal, document: Mapping[str, Any], what: str = "resource"
) -> Dict[str, Any]:
    """Documents addressed by generated id must belong to the principal."""
    if document.get("owner_id") != principal.subject_id:
        logger.warning(
            "Principal %s denied access to %s %s",
            principal.subject_id,
            what,
            document.get("id"),
        )
        raise ForbiddenError("Unauthorized access")
    return dict(document)
