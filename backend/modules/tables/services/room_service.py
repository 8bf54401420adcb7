# backend/modules/tables/services/room_service.py

from typing import List
import logging

from sqlalchemy.orm import Session

from core.crud import CRUDRepository
from core.exceptions import ConflictError
from ..models.table_models import Room, RestaurantTable
from ..schemas.table_schemas import RoomCreate, RoomUpdate

logger = logging.getLogger(__name__)

ROOM_IN_USE_MESSAGE = (
    "Cannot delete this room because it has associated tables. "
    "Please reassign or delete these tables first."
)


class RoomService:
    """Service for managing dining rooms"""

    def __init__(self, db: Session):
        self.db = db
        self.rooms = CRUDRepository(Room, db, label="Room")

    def list_rooms(self, active_only: bool = False) -> List[Room]:
        """Get rooms ordered by name"""
        filters = {"active": True} if active_only else None
        return self.rooms.list(filters=filters, order_by="name")

    def get_room(self, room_id: int) -> Room:
        return self.rooms.get_or_404(room_id)

    def create_room(self, room_data: RoomCreate) -> Room:
        return self.rooms.create(room_data.model_dump())

    def update_room(self, room_id: int, room_data: RoomUpdate) -> Room:
        return self.rooms.update(room_id, room_data.model_dump(exclude_unset=True))

    def delete_room(self, room_id: int) -> None:
        """Delete a room that no table references"""
        self.rooms.get_or_404(room_id)

        table_count = self.db.query(RestaurantTable).filter(
            RestaurantTable.room_id == room_id
        ).count()
        if table_count > 0:
            logger.warning(f"Refusing to delete room {room_id}: {table_count} tables reference it")
            raise ConflictError(ROOM_IN_USE_MESSAGE, error_code="ROOM_IN_USE")

        self.rooms.delete(room_id)
