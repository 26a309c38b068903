"""Meal plan routes"""

from fastapi import APIRouter, Depends
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from api.dependencies import authorize_user, get_principal, get_store
from api.responses import ERROR_RESPONSES, success_response
from domain.schemas.plan_schemas import (
    MealEntryResponse,
    MealPlanCreateRequest,
    MealPlanDetailResponse,
    MealPlanResponse,
    MealPlansResponse,
)
from services.meal_plan_service import MealPlanService

router = APIRouter(
    tags=["Meal Plans"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.meal_plans")


@router.post("/meal-plan/create")
def create_meal_plan(payload: MealPlanCreateRequest, store: DocumentStore = Depends(get_store)):
    """
    Create a meal plan.

    Meals missing a date or a meal type are skipped.
    """
    result = MealPlanService.create_plan(store, payload)
    return success_response("Meal plan created", mealPlanId=result.container_id)


@router.get("/meal-plans/{user_id}", response_model=MealPlansResponse)
def get_meal_plans(user_id: str, store: DocumentStore = Depends(get_store)):
    plans = MealPlanService.get_user_plans(store, user_id)
    return MealPlansResponse(plans=[MealPlanResponse.model_validate(p) for p in plans])


@router.get("/meal-plan/{plan_id}", response_model=MealPlanDetailResponse)
def get_meal_plan(
    plan_id: str,
    principal: Principal = Depends(get_principal),
    store: DocumentStore = Depends(get_store),
):
    """Meal plan with its meals ordered by date"""
    plan, meals = MealPlanService.get_plan(store, principal, plan_id)
    return MealPlanDetailResponse(
        plan=MealPlanResponse.model_validate(plan),
        meals=[MealEntryResponse.model_validate(m) for m in meals],
    )
