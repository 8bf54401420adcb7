# backend/tests/factories/inventory.py

import factory
from factory import Faker

from .base import BaseFactory
from modules.inventory.models.inventory_models import Ingredient


class IngredientFactory(BaseFactory):
    """Factory for creating ingredients with stock on hand."""

    class Meta:
        model = Ingredient

    name = factory.Iterator(["Flour", "Sugar", "Tomatoes", "Chicken", "Olive Oil", "Teff"])
    category = factory.Iterator(["Dry Goods", "Produce", "Meat", "Oils"])
    stock_quantity = 100.0
    reorder_level = 20.0
    unit = "kg"
    cost = 2.5
    supplier = Faker("company")
    allergens = factory.LazyFunction(list)
    dietary = factory.LazyFunction(list)
