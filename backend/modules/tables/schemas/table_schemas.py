# backend/modules/tables/schemas/table_schemas.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..models.table_models import (
    TableStatus,
    TableShape,
    MIN_TABLE_SIZE,
    DEFAULT_TABLE_SIZE,
)


# Room Schemas
class RoomBase(BaseModel):
    """Base room schema"""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class RoomCreate(RoomBase):
    """Room creation schema"""

    active: bool = True


class RoomUpdate(BaseModel):
    """Room update schema"""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    active: Optional[bool] = None

    @field_validator("name", "active")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class RoomResponse(RoomBase):
    """Room response schema"""

    id: int
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Table Schemas
class TableLayoutData(BaseModel):
    """Table layout position data"""

    position_x: int = 0
    position_y: int = 0
    width: int = Field(DEFAULT_TABLE_SIZE, ge=MIN_TABLE_SIZE)
    height: int = Field(DEFAULT_TABLE_SIZE, ge=MIN_TABLE_SIZE)
    rotation: int = Field(0, ge=0, lt=360)
    shape: TableShape = TableShape.RECTANGLE


class TableCreate(TableLayoutData):
    """Table creation schema"""

    table_number: str = Field(..., min_length=1, max_length=20)
    capacity: int = Field(4, ge=1)
    location: Optional[str] = Field(None, max_length=100)
    room_id: Optional[int] = None
    status: TableStatus = TableStatus.AVAILABLE


class TableUpdate(BaseModel):
    """Table update schema"""

    table_number: Optional[str] = Field(None, min_length=1, max_length=20)
    capacity: Optional[int] = Field(None, ge=1)
    location: Optional[str] = Field(None, max_length=100)
    room_id: Optional[int] = None
    status: Optional[TableStatus] = None
    shape: Optional[TableShape] = None
    position_x: Optional[int] = None
    position_y: Optional[int] = None
    width: Optional[int] = Field(None, ge=MIN_TABLE_SIZE)
    height: Optional[int] = Field(None, ge=MIN_TABLE_SIZE)
    rotation: Optional[int] = Field(None, ge=0, lt=360)

    @field_validator(
        "table_number", "capacity", "status", "shape",
        "position_x", "position_y", "width", "height", "rotation",
    )
    @classmethod
    def reject_null(cls, v, info):
        """Only location and room can be cleared"""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class TableResponse(TableLayoutData):
    """Table response schema"""

    id: int
    table_number: str
    capacity: int
    location: Optional[str] = None
    room_id: Optional[int] = None
    status: TableStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TableStatusUpdate(BaseModel):
    """Update table status"""

    status: TableStatus


class TableStats(BaseModel):
    """Table counts by status"""

    total: int = 0
    available: int = 0
    occupied: int = 0
    reserved: int = 0
    cleaning: int = 0
