# backend/modules/tables/__init__.py

from .models.table_models import Room, RestaurantTable, TableStatus, TableShape

from .services.room_service import RoomService
from .services.table_service import TableService

from .routers.room_router import router as room_router
from .routers.table_router import router as table_router
from .routers.floor_plan_router import router as floor_plan_router

__all__ = [
    # Models
    "Room", "RestaurantTable", "TableStatus", "TableShape",

    # Services
    "RoomService", "TableService",

    # Routers
    "room_router", "table_router", "floor_plan_router",
]
