# backend/modules/tables/models/table_models.py

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    ForeignKey,
    Enum as SQLEnum,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from enum import Enum

from core.database import Base
from core.mixins import ActiveMixin, TimestampMixin


MIN_TABLE_SIZE = 50
DEFAULT_TABLE_SIZE = 100


class TableStatus(str, Enum):
    """Table availability status"""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    CLEANING = "cleaning"


class TableShape(str, Enum):
    """Table shape for visual representation"""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class Room(Base, TimestampMixin, ActiveMixin):
    """Dining room or area that groups tables on the floor plan"""

    __tablename__ = "rooms"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    description = Column(Text)

    tables = relationship("RestaurantTable", back_populates="room")

    def __repr__(self):
        return f"<Room(id={self.id}, name='{self.name}', active={self.active})>"


class RestaurantTable(Base, TimestampMixin):
    """Table configuration and placement on the floor plan"""

    __tablename__ = "restaurant_tables"

    id = Column(Integer, primary_key=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=True, index=True)

    # Basic info
    table_number = Column(String(20), nullable=False)
    capacity = Column(Integer, nullable=False, default=4)
    location = Column(String(100))
    status = Column(SQLEnum(TableStatus), nullable=False, default=TableStatus.AVAILABLE)
    shape = Column(SQLEnum(TableShape), nullable=False, default=TableShape.RECTANGLE)

    # Position and dimensions (for layout designer)
    position_x = Column(Integer, nullable=False, default=0)
    position_y = Column(Integer, nullable=False, default=0)
    width = Column(Integer, nullable=False, default=DEFAULT_TABLE_SIZE)
    height = Column(Integer, nullable=False, default=DEFAULT_TABLE_SIZE)
    rotation = Column(Integer, nullable=False, default=0)  # Rotation in degrees

    room = relationship("Room", back_populates="tables")

    __table_args__ = (
        CheckConstraint("capacity >= 1", name="check_capacity_positive"),
        CheckConstraint(f"width >= {MIN_TABLE_SIZE}", name="check_min_width"),
        CheckConstraint(f"height >= {MIN_TABLE_SIZE}", name="check_min_height"),
        CheckConstraint("rotation >= 0 AND rotation < 360", name="check_rotation_range"),
    )

    def __repr__(self):
        return f"<RestaurantTable(id={self.id}, number='{self.table_number}', status={self.status})>"
