# backend/modules/tables/routers/room_router.py

from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from ..schemas.table_schemas import RoomCreate, RoomUpdate, RoomResponse
from ..services.room_service import RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])


def get_room_service(db: Session = Depends(get_db)) -> RoomService:
    """Dependency to get room service instance"""
    return RoomService(db)


@router.get("", response_model=List[RoomResponse])
async def list_rooms(
    active_only: bool = Query(False, description="Only return active rooms"),
    room_service: RoomService = Depends(get_room_service),
):
    """Get all rooms ordered by name"""
    return room_service.list_rooms(active_only)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_room(
    room_data: RoomCreate,
    room_service: RoomService = Depends(get_room_service),
):
    """Create a new room"""
    return room_service.create_room(room_data)


@router.get("/{room_id}", response_model=RoomResponse)
async def get_room(
    room_id: int,
    room_service: RoomService = Depends(get_room_service),
):
    return room_service.get_room(room_id)


@router.put("/{room_id}", response_model=RoomResponse)
async def update_room(
    room_id: int,
    room_data: RoomUpdate,
    room_service: RoomService = Depends(get_room_service),
):
    """Update room details"""
    return room_service.update_room(room_id, room_data)


@router.delete("/{room_id}")
async def delete_room(
    room_id: int,
    room_service: RoomService = Depends(get_room_service),
):
    """
    Delete a room

    Rooms that still have tables cannot be deleted.
    """
    room_service.delete_room(room_id)
    return {"success": True, "message": "Room deleted successfully"}
