# backend/tests/factories/__init__.py

"""
Shared test factories for the back-office backend.

These factories provide reusable test data generation for all modules.
"""

from .base import BaseFactory, bind_session
from .tables import RoomFactory, TableFactory
from .menu import CategoryFactory, FoodItemFactory, ModifierGroupFactory, ModifierOptionFactory
from .inventory import IngredientFactory
from .staff import StaffMemberFactory
from .finance import ExpenseCategoryFactory, ExpenseFactory

__all__ = [
    # Base
    'BaseFactory',
    'bind_session',

    # Tables
    'RoomFactory',
    'TableFactory',

    # Menu
    'CategoryFactory',
    'FoodItemFactory',
    'ModifierGroupFactory',
    'ModifierOptionFactory',

    # Inventory
    'IngredientFactory',

    # Staff
    'StaffMemberFactory',

    # Finance
    'ExpenseCategoryFactory',
    'ExpenseFactory',
]
