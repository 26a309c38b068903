"""
Meal plan service: plans with dated meal slots.

Plan and meal dates are stored as ISO ``YYYY-MM-DD`` strings so they sort
chronologically in the store.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
import logging

from adapters.auth_adapter import Principal
from adapters.document_store import DocumentStore
from services.ownership import ensure_owner
from domain.schemas.plan_schemas import MealEntryIn, MealPlanCreateRequest
from repositories import MealPlanRepository
from services.batch_writer import BatchWriter, BatchWriteResult, ChildSpec, parse_entry
from app.exceptions import NotFoundError

logger = logging.getLogger("pantrykeeper.meal_plan")

DEFAULT_PLAN_NAME = "Meal Plan"


def build_meal(entry: Any, now: datetime) -> Optional[Dict[str, Any]]:
    """Meals need both a date and a meal type; anything else is dropped"""
    meal = parse_entry(MealEntryIn, entry)
    if meal is None:
        return None
    return {
        "date": meal.meal_date.isoformat(),
        "meal_type": meal.meal_type,
        "recipe_id": meal.recipe_id,
        "recipe_name": meal.recipe_name,
        "notes": meal.notes,
        "created_at": now,
        "updated_at": now,
    }


MEALS = ChildSpec(
    collection=MealPlanRepository.child_collection,
    parent_field=MealPlanRepository.parent_field,
    build=build_meal,
)


class MealPlanService:
    @staticmethod
    def create_plan(store: DocumentStore, request: MealPlanCreateRequest) -> BatchWriteResult:
        plan_id = store.new_id()

        def new_plan(now: datetime) -> Dict[str, Any]:
            return {
                "owner_id": request.user_id,
                "name": request.name or DEFAULT_PLAN_NAME,
                "start_date": request.start_date.isoformat(),
                "end_date": request.end_date.isoformat() if request.end_date else None,
                "created_at": now,
                "updated_at": now,
            }

        result = BatchWriter.write(
            store,
            MealPlanRepository.collection,
            plan_id,
            new_plan,
            request.meals or [],
            MEALS,
        )
        logger.info(
            f"meal_plan_created user_id={request.user_id} plan_id={plan_id} meals={result.written}"
        )
        return result

    @staticmethod
    def get_user_plans(store: DocumentStore, user_id: str) -> List[Dict[str, Any]]:
        return MealPlanRepository(store).find_by_owner(user_id)

    @staticmethod
    def get_plan(
        store: DocumentStore, principal: Principal, plan_id: str
    ) -> Tuple[Dict[str, Any], List[Dict[str, Any]]]:
        """Plan with its meals, earliest date first"""
        repo = MealPlanRepository(store)
        plan = repo.get_by_id(plan_id)
        if plan is None:
            raise NotFoundError("Meal plan not found")
        ensure_owner(principal, plan, "meal plan")
        return plan, repo.get_children(plan_id)
