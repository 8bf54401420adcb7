# backend/tests/factories/tables.py

import factory
from factory import Faker, Sequence, SubFactory

from .base import BaseFactory
from modules.tables.models.table_models import Room, RestaurantTable, TableStatus, TableShape


class RoomFactory(BaseFactory):
    """Factory for creating dining rooms."""

    class Meta:
        model = Room

    name = factory.Iterator(["Main Hall", "Patio", "Terrace", "Private Room"])
    description = Faker("sentence")
    active = True


class TableFactory(BaseFactory):
    """Factory for creating tables placed in a room."""

    class Meta:
        model = RestaurantTable

    room = SubFactory(RoomFactory)
    table_number = Sequence(lambda n: f"T{n + 1}")
    capacity = 4
    status = TableStatus.AVAILABLE
    shape = TableShape.RECTANGLE
    position_x = Sequence(lambda n: (n % 5) * 150)
    position_y = Sequence(lambda n: (n // 5) * 150)
    width = 100
    height = 100
    rotation = 0
