"""Recipe routes: saved recipes and keyword search"""

from fastapi import APIRouter, Depends
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from adapters.llm_adapter import LanguageModelClient
from api.dependencies import authorize_user, get_llm, get_principal, get_store
from api.responses import ERROR_RESPONSES, success_response
from domain.schemas.recipe_schemas import (
    RecipeResponse,
    RecipeSaveRequest,
    RecipeSearchRequest,
    RecipeSearchResponse,
    RecipesResponse,
)
from services.recipe_service import RecipeService

router = APIRouter(
    tags=["Recipes"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.recipes")


@router.post("/recipe/save")
def save_recipe(payload: RecipeSaveRequest, store: DocumentStore = Depends(get_store)):
    recipe_id = RecipeService.save_recipe(store, payload.user_id, payload.recipe)
    return success_response("Recipe saved", recipeId=recipe_id)


@router.post("/recipes/search", response_model=RecipeSearchResponse)
def search_recipes(
    payload: RecipeSearchRequest,
    store: DocumentStore = Depends(get_store),
    llm: LanguageModelClient = Depends(get_llm),
):
    """
    Search saved recipes by tag.

    Keywords are extracted by the language model when it is configured;
    otherwise the query words are used directly.
    """
    results = RecipeService.search_recipes(store, llm, payload.query)
    return RecipeSearchResponse(results=[RecipeResponse.model_validate(r) for r in results])


@router.get("/recipes/{user_id}", response_model=RecipesResponse)
def get_recipes(user_id: str, store: DocumentStore = Depends(get_store)):
    recipes = RecipeService.get_user_recipes(store, user_id)
    return RecipesResponse(recipes=[RecipeResponse.model_validate(r) for r in recipes])


@router.get("/recipe/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: str,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    return RecipeResponse.model_validate(RecipeService.get_recipe(store, principal, recipe_id))
