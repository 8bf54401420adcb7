# backend/modules/inventory/models/inventory_models.py

from sqlalchemy import (Column, Integer, String, ForeignKey, Float, Text,
                        DateTime, JSON, Enum as SQLEnum)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from enum import Enum

from core.database import Base
from core.mixins import TimestampMixin


class TransactionType(str, Enum):
    INITIAL = "initial"
    PURCHASE = "purchase"
    ADJUSTMENT = "adjustment"
    WASTE = "waste"
    CONSUMPTION = "consumption"


class StockStatus(str, Enum):
    NORMAL = "normal"
    LOW = "low"
    OUT_OF_STOCK = "out_of_stock"


class Ingredient(Base, TimestampMixin):
    """Stock item tracked in the kitchen inventory"""
    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    category = Column(String(100), nullable=True, index=True)
    stock_quantity = Column(Float, nullable=False, default=0.0)
    reorder_level = Column(Float, nullable=False, default=0.0)
    unit = Column(String(20), nullable=False)
    cost = Column(Float, nullable=True)  # Cost per unit
    supplier = Column(String(200), nullable=True)
    origin = Column(String(100), nullable=True)
    allergens = Column(JSON, nullable=True)  # List of allergens
    dietary = Column(JSON, nullable=True)  # vegan, halal, etc.
    type = Column(String(50), nullable=True)

    transactions = relationship(
        "InventoryTransaction", back_populates="ingredient", cascade="all, delete-orphan"
    )

    @property
    def stock_status(self) -> StockStatus:
        stock = self.stock_quantity or 0
        if stock <= 0:
            return StockStatus.OUT_OF_STOCK
        if stock <= (self.reorder_level or 0):
            return StockStatus.LOW
        return StockStatus.NORMAL

    def __repr__(self):
        return f"<Ingredient(id={self.id}, name='{self.name}', stock={self.stock_quantity})>"


class InventoryTransaction(Base):
    """Audit trail of every stock level change"""
    __tablename__ = "inventory_transactions"

    id = Column(Integer, primary_key=True, index=True)
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=False, index=True)
    transaction_type = Column(SQLEnum(TransactionType), nullable=False)
    quantity = Column(Float, nullable=False)  # Signed change
    previous_quantity = Column(Float, nullable=False)
    new_quantity = Column(Float, nullable=False)
    unit = Column(String(20), nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=func.now(), nullable=False, index=True)

    ingredient = relationship("Ingredient", back_populates="transactions")

    @property
    def ingredient_name(self) -> str:
        return self.ingredient.name if self.ingredient else str(self.ingredient_id)
