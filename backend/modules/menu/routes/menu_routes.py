# backend/modules/menu/routes/menu_routes.py

from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from core.database import get_db
from core.exports import csv_response
from core.pagination import Page, build_meta, resolve_page_size
from ..services.menu_service import MenuService
from ..schemas.menu_schemas import (
    MenuCategory, MenuCategoryCreate, MenuCategoryUpdate,
    ModifierGroup, ModifierGroupCreate, ModifierGroupUpdate,
    ModifierOption, ModifierOptionCreate, ModifierOptionUpdate,
    FoodItem, FoodItemCreate, FoodItemUpdate, FoodItemSearchParams,
    SortField, SortOrder,
)


router = APIRouter(prefix="/menu", tags=["Menu Management"])


def get_menu_service(db: Session = Depends(get_db)) -> MenuService:
    """Dependency to get menu service instance"""
    return MenuService(db)


# Menu Categories
@router.post("/categories", response_model=MenuCategory, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: MenuCategoryCreate,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Create a new menu category"""
    return menu_service.create_category(category_data)


@router.get("/categories", response_model=List[MenuCategory])
async def get_categories(
    active_only: bool = Query(False, description="Filter by active categories only"),
    menu_service: MenuService = Depends(get_menu_service),
):
    """Get all menu categories"""
    return menu_service.get_categories(active_only)


@router.get("/categories/{category_id}", response_model=MenuCategory)
async def get_category(
    category_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.get_category(category_id)


@router.put("/categories/{category_id}", response_model=MenuCategory)
async def update_category(
    category_id: int,
    category_data: MenuCategoryUpdate,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.update_category(category_id, category_data)


@router.delete("/categories/{category_id}")
async def delete_category(
    category_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Delete a category; its items become uncategorized"""
    menu_service.delete_category(category_id)
    return {"success": True, "message": "Category deleted successfully"}


# Modifier Groups
@router.get("/modifier-groups", response_model=List[ModifierGroup])
async def get_modifier_groups(menu_service: MenuService = Depends(get_menu_service)):
    """Get modifier groups with their options"""
    return menu_service.get_modifier_groups()


@router.post("/modifier-groups", response_model=ModifierGroup, status_code=status.HTTP_201_CREATED)
async def create_modifier_group(
    group_data: ModifierGroupCreate,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.create_modifier_group(group_data)


@router.put("/modifier-groups/{group_id}", response_model=ModifierGroup)
async def update_modifier_group(
    group_id: int,
    group_data: ModifierGroupUpdate,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.update_modifier_group(group_id, group_data)


@router.delete("/modifier-groups/{group_id}")
async def delete_modifier_group(
    group_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    menu_service.delete_modifier_group(group_id)
    return {"success": True, "message": "Modifier group deleted successfully"}


@router.post(
    "/modifier-groups/{group_id}/options",
    response_model=ModifierOption,
    status_code=status.HTTP_201_CREATED,
)
async def add_modifier_option(
    group_id: int,
    option_data: ModifierOptionCreate,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.add_modifier_option(group_id, option_data)


@router.put("/modifier-options/{option_id}", response_model=ModifierOption)
async def update_modifier_option(
    option_id: int,
    option_data: ModifierOptionUpdate,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.update_modifier_option(option_id, option_data)


@router.delete("/modifier-options/{option_id}")
async def delete_modifier_option(
    option_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    menu_service.delete_modifier_option(option_id)
    return {"success": True, "message": "Modifier option deleted successfully"}


# Food Items
@router.get("/food-items", response_model=Page[FoodItem])
async def search_food_items(
    query: Optional[str] = Query(None, description="Search in name and description"),
    category_id: Optional[int] = Query(None),
    available: Optional[bool] = Query(None),
    sort_by: SortField = Query(SortField.NAME),
    sort_order: SortOrder = Query(SortOrder.ASC),
    page: int = Query(1, ge=1),
    size: Optional[int] = Query(None, ge=1),
    menu_service: MenuService = Depends(get_menu_service),
):
    """Search food items with filtering, sorting and pagination"""
    size = resolve_page_size(size)
    params = FoodItemSearchParams(
        query=query,
        category_id=category_id,
        available=available,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        size=size,
    )
    items, total = menu_service.search_food_items(params)
    return Page[FoodItem](
        items=[FoodItem.model_validate(item) for item in items],
        meta=build_meta(page, size, total),
    )


@router.get("/food-items/export")
async def export_food_items(menu_service: MenuService = Depends(get_menu_service)):
    """Export food items as CSV"""
    return csv_response(menu_service.export_food_items_csv(), "food_items")


@router.post("/food-items", response_model=FoodItem, status_code=status.HTTP_201_CREATED)
async def create_food_item(
    item_data: FoodItemCreate,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Create a new food item"""
    return menu_service.create_food_item(item_data)


@router.get("/food-items/{food_item_id}", response_model=FoodItem)
async def get_food_item(
    food_item_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    return menu_service.get_food_item(food_item_id)


@router.put("/food-items/{food_item_id}", response_model=FoodItem)
async def update_food_item(
    food_item_id: int,
    item_data: FoodItemUpdate,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Update a food item and replace its modifier groups"""
    return menu_service.update_food_item(food_item_id, item_data)


@router.delete("/food-items/{food_item_id}")
async def delete_food_item(
    food_item_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    menu_service.delete_food_item(food_item_id)
    return {"success": True, "message": "Food item deleted successfully"}


@router.post("/food-items/{food_item_id}/toggle-availability")
async def toggle_availability(
    food_item_id: int,
    menu_service: MenuService = Depends(get_menu_service),
):
    """Enable or disable a food item"""
    food_item, message = menu_service.toggle_availability(food_item_id)
    return {
        "success": True,
        "message": message,
        "item": FoodItem.model_validate(food_item),
    }
