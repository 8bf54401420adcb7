# backend/modules/inventory/schemas/inventory_schemas.py

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Dict, List, Literal, Optional
from datetime import datetime

from ..models.inventory_models import StockStatus, TransactionType


class IngredientBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    category: Optional[str] = Field(None, max_length=100)
    stock_quantity: float = Field(0, ge=0)
    reorder_level: float = Field(0, ge=0)
    unit: str = Field(..., min_length=1, max_length=20)
    cost: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = None
    origin: Optional[str] = None
    allergens: List[str] = []
    dietary: List[str] = []
    type: Optional[str] = None


class IngredientCreate(IngredientBase):
    pass


class IngredientUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = Field(None, max_length=100)
    stock_quantity: Optional[float] = Field(None, ge=0)
    reorder_level: Optional[float] = Field(None, ge=0)
    unit: Optional[str] = Field(None, min_length=1, max_length=20)
    cost: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = None
    origin: Optional[str] = None
    allergens: Optional[List[str]] = None
    dietary: Optional[List[str]] = None
    type: Optional[str] = None

    @field_validator("name", "stock_quantity", "reorder_level", "unit")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class Ingredient(IngredientBase):
    id: int
    allergens: Optional[List[str]] = None
    dietary: Optional[List[str]] = None
    stock_status: StockStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StockAdjustment(BaseModel):
    """
    Manual stock change. ``adjustment`` adds the (signed) quantity,
    ``waste`` removes its absolute value.
    """
    quantity: float
    type: Literal["adjustment", "waste"] = "adjustment"
    notes: Optional[str] = None


class InventoryTransaction(BaseModel):
    id: int
    ingredient_id: int
    ingredient_name: str
    transaction_type: TransactionType
    quantity: float
    previous_quantity: float
    new_quantity: float
    unit: str
    notes: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StockStatusCounts(BaseModel):
    normal: int = 0
    low: int = 0
    out_of_stock: int = 0


class StockAnalytics(BaseModel):
    total_ingredients: int
    category_counts: Dict[str, int]
    stock_status: StockStatusCounts
    recent_transactions: List[InventoryTransaction]
