# backend/modules/menu/models/__init__.py

from .menu_models import (
    MenuCategory,
    FoodItem,
    ModifierGroup,
    ModifierOption,
    FoodItemModifier,
)

__all__ = [
    "MenuCategory",
    "FoodItem",
    "ModifierGroup",
    "ModifierOption",
    "FoodItemModifier",
]
