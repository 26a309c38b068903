"""
Adapters package - External service connections.
Document store (MongoDB), identity provider, language model and food database.
"""

from adapters.document_store import DocumentStore, WriteBatch, WriteOp
from adapters.auth_adapter import Principal, TokenVerifier
from adapters.llm_adapter import LanguageModelClient
from adapters.food_database_adapter import FoodDatabaseClient

__all__ = [
    "DocumentStore",
    "WriteBatch",
    "WriteOp",
    "Principal",
    "TokenVerifier",
    "LanguageModelClient",
    "FoodDatabaseClient",
]
