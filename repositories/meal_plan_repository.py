"""
Meal Plan Repository - Data access layer for meal plans
"""

from repositories.base import ContainerRepository


class MealPlanRepository(ContainerRepository):
    """Meal plans and their meal entries, entries ordered by date"""

    collection = "meal_plans"
    child_collection = "meal_plan_meals"
    parent_field = "plan_id"
    child_order_by = "date"
