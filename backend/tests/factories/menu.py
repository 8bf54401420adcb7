# backend/tests/factories/menu.py

import random

import factory
from factory import Faker, LazyFunction, SubFactory

from .base import BaseFactory
from modules.menu.models.menu_models import MenuCategory, FoodItem, ModifierGroup, ModifierOption


class CategoryFactory(BaseFactory):
    """Factory for creating menu categories."""

    class Meta:
        model = MenuCategory

    name = factory.Iterator(["Appetizers", "Main Courses", "Desserts", "Beverages", "Sides"])
    description = Faker("sentence")
    active = True


class FoodItemFactory(BaseFactory):
    """Factory for creating food items."""

    class Meta:
        model = FoodItem

    name = Faker("catch_phrase")
    description = Faker("sentence")
    price = LazyFunction(lambda: round(random.uniform(5.0, 50.0), 2))
    cost = None
    category = SubFactory(CategoryFactory)
    available = True
    preparation_time = LazyFunction(lambda: random.randint(5, 30))


class ModifierGroupFactory(BaseFactory):
    class Meta:
        model = ModifierGroup

    name = factory.Iterator(["Size", "Toppings", "Spice Level"])
    required = False


class ModifierOptionFactory(BaseFactory):
    class Meta:
        model = ModifierOption

    modifier_group = SubFactory(ModifierGroupFactory)
    name = factory.Iterator(["Small", "Medium", "Large"])
    price = 0.0
