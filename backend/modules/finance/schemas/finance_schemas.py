# backend/modules/finance/schemas/finance_schemas.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Optional
from datetime import date as date_type, datetime
from enum import Enum

from ..models.finance_models import ExpenseType


class DatePreset(str, Enum):
    TODAY = "Today"
    THIS_WEEK = "This Week"
    THIS_MONTH = "This Month"


class ExpenseCategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    type: ExpenseType = ExpenseType.OPERATIONAL


class ExpenseCategoryCreate(ExpenseCategoryBase):
    pass


class ExpenseCategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    type: Optional[ExpenseType] = None

    @field_validator("name", "type")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class ExpenseCategory(ExpenseCategoryBase):
    id: int
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ExpenseBase(BaseModel):
    category_id: Optional[int] = None
    amount: float = Field(..., gt=0)
    payee: str = Field(..., min_length=1, max_length=200)
    payment_method: Optional[str] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    date: date_type
    ingredient_id: Optional[int] = None
    quantity: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = None


class ExpenseCreate(ExpenseBase):
    pass


class ExpenseUpdate(BaseModel):
    category_id: Optional[int] = None
    amount: Optional[float] = Field(None, gt=0)
    payee: Optional[str] = Field(None, min_length=1, max_length=200)
    payment_method: Optional[str] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    date: Optional[date_type] = None

    @field_validator("amount", "payee", "date")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class Expense(ExpenseBase):
    id: int
    category_name: str
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ExpenseFilters(BaseModel):
    search: Optional[str] = None
    category_id: Optional[int] = None
    preset: Optional[DatePreset] = None
    start_date: Optional[date_type] = None
    end_date: Optional[date_type] = None

    @field_validator("category_id", mode="before")
    @classmethod
    def all_categories(cls, v):
        if v in ("All", "all", ""):
            return None
        return v


class ExpenseSummary(BaseModel):
    total: float
    count: int
    by_category: Dict[str, float]


class ExpenseList(BaseModel):
    items: List[Expense]
    summary: ExpenseSummary
