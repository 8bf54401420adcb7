# backend/modules/inventory/routes/inventory_routes.py

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from core.database import get_db
from core.exports import csv_response
from ..schemas.inventory_schemas import (
    Ingredient, IngredientCreate, IngredientUpdate,
    InventoryTransaction, StockAdjustment, StockAnalytics,
)
from ..services.inventory_service import InventoryService

router = APIRouter(prefix="/inventory", tags=["Inventory"])


def get_inventory_service(db: Session = Depends(get_db)) -> InventoryService:
    """Dependency to get inventory service instance"""
    return InventoryService(db)


@router.get("/ingredients", response_model=List[Ingredient])
async def list_ingredients(
    category: Optional[str] = Query(None),
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    """Get stock items ordered by name"""
    return inventory_service.list_ingredients(category)


@router.post("/ingredients", response_model=Ingredient, status_code=status.HTTP_201_CREATED)
async def create_ingredient(
    ingredient_data: IngredientCreate,
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    return inventory_service.create_ingredient(ingredient_data)


@router.get("/ingredients/{ingredient_id}", response_model=Ingredient)
async def get_ingredient(
    ingredient_id: int,
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    return inventory_service.get_ingredient(ingredient_id)


@router.put("/ingredients/{ingredient_id}", response_model=Ingredient)
async def update_ingredient(
    ingredient_id: int,
    ingredient_data: IngredientUpdate,
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    return inventory_service.update_ingredient(ingredient_id, ingredient_data)


@router.delete("/ingredients/{ingredient_id}")
async def delete_ingredient(
    ingredient_id: int,
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    inventory_service.delete_ingredient(ingredient_id)
    return {"success": True, "message": "Stock item deleted successfully"}


@router.post("/ingredients/{ingredient_id}/adjust", response_model=Ingredient)
async def adjust_stock(
    ingredient_id: int,
    adjustment: StockAdjustment,
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    """Manually adjust stock or record waste"""
    return inventory_service.adjust_stock(ingredient_id, adjustment)


@router.get("/ingredients/{ingredient_id}/history", response_model=List[InventoryTransaction])
async def get_stock_history(
    ingredient_id: int,
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    """Stock transactions for an ingredient, newest first"""
    return inventory_service.get_stock_history(ingredient_id)


@router.get("/analytics", response_model=StockAnalytics)
async def get_stock_analytics(
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    return inventory_service.get_stock_analytics()


@router.get("/export")
async def export_inventory(
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    return csv_response(inventory_service.export_inventory_csv(), "inventory")


@router.get("/transactions/export")
async def export_transactions(
    inventory_service: InventoryService = Depends(get_inventory_service),
):
    return csv_response(inventory_service.export_transactions_csv(), "inventory_transactions")
