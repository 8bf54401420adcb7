# backend/modules/finance/models/finance_models.py

from sqlalchemy import Column, Integer, String, Float, Text, Date, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from enum import Enum

from core.database import Base
from core.mixins import TimestampMixin


class ExpenseType(str, Enum):
    FIXED = "fixed"
    VARIABLE = "variable"
    OPERATIONAL = "operational"
    DISCRETIONARY = "discretionary"


class ExpenseCategory(Base, TimestampMixin):
    __tablename__ = "expense_categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    type = Column(SQLEnum(ExpenseType), nullable=False, default=ExpenseType.OPERATIONAL)

    expenses = relationship("Expense", back_populates="category")

    def __repr__(self):
        return f"<ExpenseCategory(id={self.id}, name='{self.name}', type='{self.type}')>"


class Expense(Base, TimestampMixin):
    """A single payment, optionally tied to an inventory purchase"""
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    category_id = Column(Integer, ForeignKey("expense_categories.id"), nullable=True, index=True)
    amount = Column(Float, nullable=False)
    payee = Column(String(200), nullable=False)
    payment_method = Column(String(50), nullable=True)
    reference = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    date = Column(Date, nullable=False, index=True)

    # Purchases of stock
    ingredient_id = Column(Integer, ForeignKey("ingredients.id"), nullable=True)
    quantity = Column(Float, nullable=True)
    unit = Column(String(20), nullable=True)

    category = relationship("ExpenseCategory", back_populates="expenses")
    ingredient = relationship("Ingredient")

    @property
    def category_name(self) -> str:
        return self.category.name if self.category else "Uncategorized"

    @property
    def is_inventory_purchase(self) -> bool:
        return self.ingredient_id is not None
