"""Food database routes: search, nutrition and barcode lookup"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
import logging

from adapters.food_database_adapter import FoodDatabaseClient
from api.dependencies import authorize_user, get_food_db
from api.responses import ERROR_RESPONSES
from domain.schemas.assistant_schemas import BarcodeRequest
from services.food_service import FoodService

router = APIRouter(
    tags=["Food Database"],
    dependencies=[Depends(authorize_user)],
    responses=ERROR_RESPONSES,
)
logger = logging.getLogger("pantrykeeper.api.food")


@router.get("/food/search")
def search_food(
    query: str = Query(..., min_length=1, description="Free-text food query"),
    food_db: FoodDatabaseClient = Depends(get_food_db),
):
    """Search the food database; the response is passed through unchanged"""
    return FoodService.search(food_db, query)


@router.get("/food/nutrition/{food_id}")
def food_nutrition(
    food_id: str,
    quantity: float = Query(default=1, gt=0),
    measure_uri: Optional[str] = Query(default=None, alias="measureUri"),
    food_db: FoodDatabaseClient = Depends(get_food_db),
):
    return FoodService.nutrition(food_db, food_id, quantity, measure_uri)


@router.post("/barcode/process")
def process_barcode(
    payload: BarcodeRequest, food_db: FoodDatabaseClient = Depends(get_food_db)
):
    """Look up a product by its UPC/EAN barcode"""
    product = FoodService.lookup_barcode(food_db, payload.barcode)
    return {"success": True, "product": product}
