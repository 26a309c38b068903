"""
Shared test doubles and utilities for the PantryKeeper test suite.

The application is built through ``main.create_app`` with an in-memory
document store, a token verifier that knows a fixed set of tokens and a
scripted language model, so no test touches MongoDB, the identity provider
or OpenAI.
"""

import copy
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

from fastapi.testclient import TestClient

from adapters.auth_adapter import Principal
from adapters.document_store import (
    CREATE_IF_ABSENT,
    DELETE,
    SET,
    UPDATE,
    DocumentStore,
    Filter,
    WriteOp,
    validate_filters,
)
from adapters.food_database_adapter import FoodDatabaseClient
from adapters.llm_adapter import LanguageModelClient
from app.config import Settings
from app.exceptions import StoreError, UnauthorizedError
from main import create_app


# Realistic users; each token maps to exactly one of them
ALICE = Principal(subject_id="u1", email="alice.nguyen@example.com")
BOB = Principal(subject_id="u2", email="bob.okafor@example.com")

TOKENS = {"token-alice": ALICE, "token-bob": BOB}


def auth(token: str = "token-alice") -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def utc(days: float = 0) -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=days)


# =============================================================================
# DOCUMENT STORE
# =============================================================================


def _matches(doc: Dict[str, Any], flt: Filter) -> bool:
    field_name, op, value = flt
    actual = doc.get(field_name)
    if op == "array-contains":
        return isinstance(actual, list) and value in actual
    if op == "in":
        return actual in value
    if op == "==":
        return actual == value
    if actual is None:
        return False
    if op == "<":
        return actual < value
    if op == "<=":
        return actual <= value
    if op == ">":
        return actual > value
    return actual >= value


class InMemoryDocumentStore(DocumentStore):
    """
    Dict-backed DocumentStore.

    ``commit_batch`` applies all ops to a copy and swaps it in only when every
    op succeeded. Set ``fail_commits`` to make the next commits raise.
    """

    def __init__(self):
        self.collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.fail_commits = False
        self.reads = 0
        self.commits = 0

    # ---- helpers for tests -------------------------------------------------

    def docs(self, collection: str) -> List[Dict[str, Any]]:
        return [dict(d, id=k) for k, d in self.collections.get(collection, {}).items()]

    def count(self, collection: str) -> int:
        return len(self.collections.get(collection, {}))

    # ---- DocumentStore -----------------------------------------------------

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        self.reads += 1
        doc = self.collections.get(collection, {}).get(doc_id)
        return None if doc is None else dict(copy.deepcopy(doc), id=doc_id)

    def set(self, collection: str, doc_id: str, data: Dict[str, Any], merge: bool = False) -> None:
        col = self.collections.setdefault(collection, {})
        data = {k: v for k, v in copy.deepcopy(data).items() if k != "id"}
        if merge and doc_id in col:
            col[doc_id].update(data)
        else:
            col[doc_id] = data

    def update(self, collection: str, doc_id: str, data: Dict[str, Any]) -> bool:
        col = self.collections.get(collection, {})
        if doc_id not in col:
            return False
        col[doc_id].update(copy.deepcopy(data))
        return True

    def delete(self, collection: str, doc_id: str) -> bool:
        return self.collections.get(collection, {}).pop(doc_id, None) is not None

    def find(
        self,
        collection: str,
        filters: Sequence[Filter] = (),
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        validate_filters(filters)
        self.reads += 1
        docs = [d for d in self.docs(collection) if all(_matches(d, f) for f in filters)]
        if order_by:
            # missing values sort first, as in MongoDB
            docs.sort(
                key=lambda d: (d.get(order_by) is not None, d.get(order_by)),
                reverse=descending,
            )
        if limit is not None:
            docs = docs[:limit]
        return copy.deepcopy(docs)

    def commit_batch(self, ops: Iterable[WriteOp]) -> None:
        if self.fail_commits:
            raise StoreError("simulated commit failure")
        staged = copy.deepcopy(self.collections)
        for op in ops:
            col = staged.setdefault(op.collection, {})
            if op.kind == SET:
                col[op.doc_id] = copy.deepcopy(op.data)
            elif op.kind == CREATE_IF_ABSENT:
                col.setdefault(op.doc_id, copy.deepcopy(op.data))
            elif op.kind == UPDATE:
                if op.doc_id not in col:
                    raise StoreError(f"update target {op.collection}/{op.doc_id} missing")
                col[op.doc_id].update(copy.deepcopy(op.data))
            elif op.kind == DELETE:
                col.pop(op.doc_id, None)
        self.collections = staged
        self.commits += 1


# =============================================================================
# IDENTITY PROVIDER AND LANGUAGE MODEL
# =============================================================================


class StubTokenVerifier:
    """Accepts only the tokens in ``TOKENS``"""

    def __init__(self, tokens: Optional[Dict[str, Principal]] = None):
        self.tokens = dict(TOKENS if tokens is None else tokens)
        self.verified: List[str] = []

    def verify(self, token: str) -> Principal:
        self.verified.append(token)
        if token not in self.tokens:
            raise UnauthorizedError("Invalid authentication token")
        return self.tokens[token]


class ScriptedLanguageModel(LanguageModelClient):
    """
    Configured model whose completions come from ``replies``.

    A reply that is an exception instance is raised instead of returned.
    """

    def __init__(self, *replies: Any):
        super().__init__(api_key="sk-test")
        self.replies = list(replies)
        self.calls: List[Dict[str, Any]] = []

    def _complete(self, model, messages, json_mode, max_tokens, feature):
        self.calls.append(
            {"model": model, "messages": messages, "json_mode": json_mode, "feature": feature}
        )
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, BaseException):
            raise reply
        return reply


# =============================================================================
# APPLICATION
# =============================================================================


def make_settings(**overrides) -> Settings:
    values = {
        "environment": "testing",
        "expiry_check_enabled": False,
        "openai_api_key": None,
        "edamam_app_id": None,
        "edamam_app_key": None,
    }
    values.update(overrides)
    return Settings(**values)


def make_client(
    store: Optional[InMemoryDocumentStore] = None,
    llm: Optional[LanguageModelClient] = None,
    food_db: Optional[FoodDatabaseClient] = None,
    verifier: Optional[StubTokenVerifier] = None,
    raise_server_exceptions: bool = True,
) -> TestClient:
    """
    TestClient for an app wired to test doubles.

    The client is not used as a context manager, so the lifespan (MongoDB
    connection and scheduler) never runs.
    """
    app = create_app(
        settings=make_settings(),
        store=store if store is not None else InMemoryDocumentStore(),
        token_verifier=verifier or StubTokenVerifier(),
        llm=llm or LanguageModelClient(),
        food_db=food_db or FoodDatabaseClient(),
    )
    return TestClient(app, raise_server_exceptions=raise_server_exceptions)
