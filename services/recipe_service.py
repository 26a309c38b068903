from typing import Any, Dict, List
import json
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from adapters.llm_adapter import LanguageModelClient
from services.ownership import ensure_owner
from domain.schemas.recipe_schemas import RecipeIn
from repositories import RecipeRepository, utcnow
from app.exceptions import DependencyUnavailableError, NotFoundError

logger = logging.getLogger("pantrykeeper.recipes")

SEARCH_LIMIT_PER_KEYWORD = 5

KEYWORD_PROMPT = (
    "You are a recipe search assistant. Extract key ingredients and dish types "
    "from the user's query. Respond with a JSON object of the form "
    '{"keywords": ["..."]} and nothing else.'
)


class RecipeService:
    @staticmethod
    def save_recipe(store: DocumentStore, user_id: str, recipe: RecipeIn) -> str:
        now = utcnow()
        data = recipe.model_dump()
        data.update({"owner_id": user_id, "created_at": now, "updated_at": now})
        recipe_id = RecipeRepository(store).create(data)
        logger.info(f"recipe_saved user_id={user_id} recipe_id={recipe_id}")
        return recipe_id

    @staticmethod
    def get_user_recipes(store: DocumentStore, user_id: str) -> List[Dict[str, Any]]:
        return RecipeRepository(store).find_by_owner(user_id)

    @staticmethod
    def get_recipe(store: DocumentStore, principal: Principal, recipe_id: str) -> Dict[str, Any]:
        recipe = RecipeRepository(store).get_by_id(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return ensure_owner(principal, recipe, "recipe")

    @staticmethod
    def extract_keywords(llm: LanguageModelClient, query: str) -> List[str]:
        """
        Search keywords for a free-text query.

        Without a configured model the query is split on whitespace. When the
        model answers with something that is not a keyword object the whole
        query is used as the single keyword.
        """
        if not llm.is_configured:
            return query.lower().split()

        try:
            content = llm.chat(KEYWORD_PROMPT, query, json_mode=True, feature="Recipe search")
        except DependencyUnavailableError:
            logger.warning("Recipe keyword extraction failed, using plain keyword search")
            return query.lower().split()

        try:
            keywords = json.loads(content)["keywords"]
        except (ValueError, KeyError, TypeError):
            return [query]
        if not isinstance(keywords, list):
            return [query]
        return [str(k) for k in keywords if str(k).strip()] or [query]

    @staticmethod
    def search_recipes(
        store: DocumentStore, llm: LanguageModelClient, query: str
    ) -> List[Dict[str, Any]]:
        """Recipes tagged with any keyword of the query, deduplicated by id"""
        repo = RecipeRepository(store)
        keywords = RecipeService.extract_keywords(llm, query)

        results: List[Dict[str, Any]] = []
        seen = set()
        for keyword in keywords:
            for recipe in repo.find_by_tag(keyword.strip().lower(), SEARCH_LIMIT_PER_KEYWORD):
                if recipe["id"] in seen:
                    continue
                seen.add(recipe["id"])
                results.append(recipe)

        logger.info(f"recipe_search keywords={keywords} results={len(results)}")
        return results
