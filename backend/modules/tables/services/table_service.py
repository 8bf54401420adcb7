# backend/modules/tables/services/table_service.py

from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.crud import CRUDRepository
from core.exceptions import NotFoundError
from core.exports import to_csv, render_print_document
from ..models.table_models import Room, RestaurantTable, TableStatus
from ..schemas.table_schemas import TableCreate, TableUpdate, TableStats

logger = logging.getLogger(__name__)

LAYOUT_FIELDS = ("position_x", "position_y", "width", "height", "rotation")

LAYOUT_EXPORT_HEADERS = [
    "Table Number", "Room", "Capacity", "Status", "Shape",
    "Position X", "Position Y", "Width", "Height", "Rotation",
]


def room_display_name(room_id: Optional[int], rooms: List[Room]) -> str:
    """Name shown for the room a floor plan is filtered by"""
    if room_id is None:
        return "All Rooms"
    room = next((r for r in rooms if r.id == room_id), None)
    return room.name if room else "Unknown Room"


class TableService:
    """Service for restaurant tables and their floor plan placement"""

    def __init__(self, db: Session):
        self.db = db
        self.tables = CRUDRepository(RestaurantTable, db, label="Table")

    def list_tables(self, room_id: Optional[int] = None) -> List[RestaurantTable]:
        """Tables in a room, or every table when no room is given"""
        return self.tables.list(filters={"room_id": room_id}, order_by="table_number")

    def get_table(self, table_id: int) -> RestaurantTable:
        return self.tables.get_or_404(table_id)

    def create_table(self, table_data: TableCreate) -> RestaurantTable:
        if table_data.room_id is not None:
            self._ensure_room(table_data.room_id)
        return self.tables.create(table_data.model_dump())

    def update_table(self, table_id: int, table_data: TableUpdate) -> RestaurantTable:
        update_data = table_data.model_dump(exclude_unset=True)
        if update_data.get("room_id") is not None:
            self._ensure_room(update_data["room_id"])
        return self.tables.update(table_id, update_data)

    def delete_table(self, table_id: int) -> None:
        self.tables.delete(table_id)

    def update_table_status(self, table_id: int, status: TableStatus) -> RestaurantTable:
        table = self.tables.update(table_id, {"status": status})
        logger.info(f"Table {table.table_number} is now {status.value}")
        return table

    def save_layout(self, table_id: int, changes: Dict[str, Any]) -> RestaurantTable:
        """Persist position, size and rotation edits from the floor plan editor"""
        layout = {key: value for key, value in changes.items() if key in LAYOUT_FIELDS}
        try:
            return self.tables.update(table_id, layout)
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get_table_stats(self) -> TableStats:
        rows = self.db.query(
            RestaurantTable.status, func.count(RestaurantTable.id)
        ).group_by(RestaurantTable.status).all()

        stats = TableStats()
        for status, count in rows:
            setattr(stats, TableStatus(status).value, count)
            stats.total += count
        return stats

    def export_layout_csv(self, room_id: Optional[int] = None) -> str:
        rooms = {room.id: room.name for room in self.db.query(Room).all()}
        rows = [
            [
                table.table_number,
                rooms.get(table.room_id, ""),
                table.capacity,
                table.status.value,
                table.shape.value,
                table.position_x,
                table.position_y,
                table.width,
                table.height,
                table.rotation,
            ]
            for table in self.list_tables(room_id)
        ]
        return to_csv(LAYOUT_EXPORT_HEADERS, rows)

    def print_floor_plan(self, room_id: Optional[int] = None) -> str:
        rooms = self.db.query(Room).all()
        tables = self.list_tables(room_id)
        rows = [
            [
                table.table_number,
                table.capacity,
                table.status.value.capitalize(),
                table.shape.value.capitalize(),
                table.location or "",
                f"{table.position_x}, {table.position_y}",
                f"{table.width} x {table.height}",
                f"{table.rotation}°",
            ]
            for table in tables
        ]
        return render_print_document(
            title=f"Floor Plan - {room_display_name(room_id, rooms)}",
            subtitle=f"{len(tables)} tables",
            headers=["Table", "Capacity", "Status", "Shape", "Location", "Position", "Size", "Rotation"],
            rows=rows,
        )

    def _ensure_room(self, room_id: int) -> Room:
        room = self.db.query(Room).filter(Room.id == room_id).first()
        if not room:
            raise NotFoundError("Room not found")
        return room
