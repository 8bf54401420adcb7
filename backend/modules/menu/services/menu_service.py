# backend/modules/menu/services/menu_service.py

from typing import List, Optional, Tuple
import logging

from sqlalchemy import or_, asc, desc
from sqlalchemy.orm import Session, joinedload, selectinload

from core.crud import CRUDRepository
from core.exceptions import ConflictError, NotFoundError, ValidationError
from core.exports import to_csv
from core.pagination import offset_for
from ..models.menu_models import (
    MenuCategory, FoodItem, ModifierGroup, ModifierOption, FoodItemModifier
)
from ..schemas.menu_schemas import (
    MenuCategoryCreate, MenuCategoryUpdate,
    ModifierGroupCreate, ModifierGroupUpdate,
    ModifierOptionCreate, ModifierOptionUpdate,
    FoodItemCreate, FoodItemUpdate, FoodItemSearchParams, SortOrder,
)

logger = logging.getLogger(__name__)

NAME_AND_PRICE_REQUIRED = "Name and price are required"

FOOD_ITEM_FIELDS = (
    "name", "description", "price", "cost", "image_url", "category_id",
    "available", "is_vegetarian", "is_vegan", "is_gluten_free", "is_spicy",
    "preparation_time",
)

FOOD_ITEM_EXPORT_HEADERS = [
    "Name", "Category", "Price", "Cost", "Profit Margin (%)", "Available",
    "Vegetarian", "Vegan", "Gluten Free", "Spicy", "Preparation Time (min)",
]


def calculate_profit_margin(price: Optional[float], cost: Optional[float]) -> Optional[float]:
    """Margin as a percentage of the selling price"""
    if cost is None or not price:
        return None
    return round((price - cost) / price * 100, 2)


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


class MenuService:
    """Service class for menu management operations"""

    def __init__(self, db: Session):
        self.db = db
        self.categories = CRUDRepository(MenuCategory, db, label="Category")
        self.modifier_groups = CRUDRepository(ModifierGroup, db, label="Modifier group")
        self.modifier_options = CRUDRepository(ModifierOption, db, label="Modifier option")
        self.food_items = CRUDRepository(FoodItem, db, label="Food item")

    # Menu Category operations
    def get_categories(self, active_only: bool = False) -> List[MenuCategory]:
        """Get menu categories ordered by name"""
        filters = {"active": True} if active_only else None
        return self.categories.list(filters=filters, order_by="name")

    def get_category(self, category_id: int) -> MenuCategory:
        return self.categories.get_or_404(category_id)

    def create_category(self, category_data: MenuCategoryCreate) -> MenuCategory:
        return self.categories.create(category_data.model_dump())

    def update_category(self, category_id: int, category_data: MenuCategoryUpdate) -> MenuCategory:
        return self.categories.update(category_id, category_data.model_dump(exclude_unset=True))

    def delete_category(self, category_id: int) -> None:
        """Delete a category; its food items become uncategorized"""
        self.categories.get_or_404(category_id)
        self.db.query(FoodItem).filter(FoodItem.category_id == category_id).update(
            {FoodItem.category_id: None}, synchronize_session=False
        )
        self.categories.delete(category_id)

    # Modifier Group operations
    def get_modifier_groups(self) -> List[ModifierGroup]:
        return self.db.query(ModifierGroup).options(
            joinedload(ModifierGroup.options)
        ).order_by(ModifierGroup.name).all()

    def get_modifier_group(self, group_id: int) -> ModifierGroup:
        return self.modifier_groups.get_or_404(group_id)

    def create_modifier_group(self, group_data: ModifierGroupCreate) -> ModifierGroup:
        return self.modifier_groups.create(group_data.model_dump())

    def update_modifier_group(self, group_id: int, group_data: ModifierGroupUpdate) -> ModifierGroup:
        return self.modifier_groups.update(group_id, group_data.model_dump(exclude_unset=True))

    def delete_modifier_group(self, group_id: int) -> None:
        """Delete a modifier group that no food item offers"""
        self.modifier_groups.get_or_404(group_id)
        in_use = self.db.query(FoodItemModifier).filter(
            FoodItemModifier.modifier_group_id == group_id
        ).count()
        if in_use:
            raise ConflictError("Cannot delete group as it is used by food items")
        self.modifier_groups.delete(group_id)

    def add_modifier_option(self, group_id: int, option_data: ModifierOptionCreate) -> ModifierOption:
        self.modifier_groups.get_or_404(group_id)
        return self.modifier_options.create({**option_data.model_dump(), "modifier_group_id": group_id})

    def update_modifier_option(self, option_id: int, option_data: ModifierOptionUpdate) -> ModifierOption:
        return self.modifier_options.update(option_id, option_data.model_dump(exclude_unset=True))

    def delete_modifier_option(self, option_id: int) -> None:
        self.modifier_options.delete(option_id)

    # Food Item operations
    def search_food_items(self, params: FoodItemSearchParams) -> Tuple[List[FoodItem], int]:
        """Search, filter, sort and paginate food items"""
        query = self.db.query(FoodItem).options(
            joinedload(FoodItem.category), selectinload(FoodItem.modifier_links)
        )

        if params.query:
            search_term = f"%{params.query}%"
            query = query.filter(
                or_(
                    FoodItem.name.ilike(search_term),
                    FoodItem.description.ilike(search_term),
                )
            )

        if params.category_id is not None:
            query = query.filter(FoodItem.category_id == params.category_id)

        if params.available is not None:
            query = query.filter(FoodItem.available == params.available)

        total = query.count()

        sort_column = getattr(FoodItem, params.sort_by.value)
        if params.sort_order == SortOrder.DESC:
            query = query.order_by(desc(sort_column), FoodItem.id)
        else:
            query = query.order_by(asc(sort_column), FoodItem.id)

        items = query.offset(offset_for(params.page, params.size)).limit(params.size).all()
        return items, total

    def get_food_item(self, food_item_id: int) -> FoodItem:
        return self.food_items.get_or_404(food_item_id)

    def create_food_item(self, item_data: FoodItemCreate) -> FoodItem:
        """Create a food item and link its modifier groups"""
        if not item_data.name or not item_data.price:
            raise ValidationError(NAME_AND_PRICE_REQUIRED)

        values = item_data.model_dump(include=set(FOOD_ITEM_FIELDS))
        values["profit_margin"] = calculate_profit_margin(values["price"], values["cost"])

        food_item = self.food_items.create(values, commit=False)
        self._link_modifier_groups(food_item.id, item_data.modifier_group_ids)
        self.db.commit()
        self.db.refresh(food_item)
        return food_item

    def update_food_item(self, food_item_id: Optional[int], item_data: FoodItemUpdate) -> FoodItem:
        """
        Replace a food item's fields.

        When ``modifier_group_ids`` is given the existing modifier links are
        removed and the new ones inserted.
        """
        if not item_data.name or not item_data.price:
            raise ValidationError(NAME_AND_PRICE_REQUIRED)
        if not food_item_id:
            raise ValidationError("Food item ID is required for update")

        values = item_data.model_dump(include=set(FOOD_ITEM_FIELDS))
        values["profit_margin"] = calculate_profit_margin(values["price"], values["cost"])

        food_item = self.food_items.update(food_item_id, values, commit=False)
        if item_data.modifier_group_ids is not None:
            self.db.query(FoodItemModifier).filter(
                FoodItemModifier.food_item_id == food_item_id
            ).delete(synchronize_session=False)
            self._link_modifier_groups(food_item_id, item_data.modifier_group_ids)

        self.db.commit()
        self.db.refresh(food_item)
        return food_item

    def delete_food_item(self, food_item_id: int) -> None:
        self.food_items.get_or_404(food_item_id)
        self.db.query(FoodItemModifier).filter(
            FoodItemModifier.food_item_id == food_item_id
        ).delete(synchronize_session=False)
        self.food_items.delete(food_item_id)

    def toggle_availability(self, food_item_id: int) -> Tuple[FoodItem, str]:
        """Flip availability; returns the item and the message to show"""
        food_item = self.food_items.get_or_404(food_item_id)
        food_item = self.food_items.update(food_item_id, {"available": not food_item.available})
        message = f"Food item {'enabled' if food_item.available else 'disabled'}"
        logger.info(f"{message}: {food_item.name}")
        return food_item, message

    def export_food_items_csv(self) -> str:
        items = self.db.query(FoodItem).options(
            joinedload(FoodItem.category)
        ).order_by(FoodItem.name).all()
        rows = [
            [
                item.name,
                item.category_name,
                f"{item.price:.2f}",
                f"{item.cost:.2f}" if item.cost is not None else "",
                item.profit_margin if item.profit_margin is not None else "",
                _yes_no(item.available),
                _yes_no(item.is_vegetarian),
                _yes_no(item.is_vegan),
                _yes_no(item.is_gluten_free),
                _yes_no(item.is_spicy),
                item.preparation_time or "",
            ]
            for item in items
        ]
        return to_csv(FOOD_ITEM_EXPORT_HEADERS, rows)

    def _link_modifier_groups(self, food_item_id: int, group_ids: List[int]) -> None:
        for group_id in dict.fromkeys(group_ids):
            if not self.modifier_groups.get(group_id):
                raise NotFoundError(f"Modifier group {group_id} not found")
            self.db.add(FoodItemModifier(food_item_id=food_item_id, modifier_group_id=group_id))
