"""
API dependencies for dependency injection

Clients are created once by the application factory and kept on
``app.state``; routes receive them through these dependencies.

Usage:
    @router.get("/example")
    def example(store: DocumentStore = Depends(get_store)):
        ...
"""

from fastapi import Request

from adapters.document_store import DocumentStore
from adapters.food_database_adapter import FoodDatabaseClient
from adapters.llm_adapter import LanguageModelClient
from api.security import authorize_user, get_principal


def get_store(request: Request) -> DocumentStore:
    """Document store dependency for FastAPI routes."""
    return request.app.state.store


def get_llm(request: Request) -> LanguageModelClient:
    return request.app.state.llm


def get_food_db(request: Request) -> FoodDatabaseClient:
    return request.app.state.food_db


__all__ = ["get_store", "get_llm", "get_food_db", "get_principal", "authorize_user"]
