# backend/modules/menu/schemas/menu_schemas.py

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional
from datetime import datetime
from enum import Enum

from core.config import get_settings


class SortField(str, Enum):
    NAME = "name"
    PRICE = "price"
    PREPARATION_TIME = "preparation_time"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Menu Category Schemas
class MenuCategoryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)
    active: bool = True


class MenuCategoryCreate(MenuCategoryBase):
    pass


class MenuCategoryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)
    active: Optional[bool] = None

    @field_validator("name", "active")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class MenuCategory(MenuCategoryBase):
    id: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Modifier Schemas
class ModifierOptionCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    price: float = 0.0


class ModifierOptionUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[float] = None

    @field_validator("name", "price")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class ModifierOption(ModifierOptionCreate):
    id: int
    modifier_group_id: int

    model_config = ConfigDict(from_attributes=True)


class ModifierGroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    required: bool = False


class ModifierGroupUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    required: Optional[bool] = None

    @field_validator("name", "required")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class ModifierGroup(ModifierGroupCreate):
    id: int
    options: List[ModifierOption] = []

    model_config = ConfigDict(from_attributes=True)


# Food Item Schemas
class FoodItemBase(BaseModel):
    """
    Food item fields. ``name`` and ``price`` are optional at the schema
    level so the service can report a single clear message when either is
    missing.
    """
    name: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    cost: Optional[float] = Field(None, ge=0)
    image_url: Optional[str] = Field(None, max_length=500)
    category_id: Optional[int] = None
    available: bool = True
    is_vegetarian: bool = False
    is_vegan: bool = False
    is_gluten_free: bool = False
    is_spicy: bool = False
    preparation_time: Optional[int] = Field(None, ge=0)


class FoodItemCreate(FoodItemBase):
    modifier_group_ids: List[int] = []


class FoodItemUpdate(FoodItemBase):
    id: Optional[int] = None
    modifier_group_ids: Optional[List[int]] = None


class FoodItem(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: float
    cost: Optional[float] = None
    profit_margin: Optional[float] = None
    image_url: Optional[str] = None
    category_id: Optional[int] = None
    category_name: str
    available: bool
    is_vegetarian: bool
    is_vegan: bool
    is_gluten_free: bool
    is_spicy: bool
    preparation_time: Optional[int] = None
    modifier_group_ids: List[int] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class FoodItemSearchParams(BaseModel):
    query: Optional[str] = None
    category_id: Optional[int] = None
    available: Optional[bool] = None
    sort_by: SortField = SortField.NAME
    sort_order: SortOrder = SortOrder.ASC
    page: int = Field(1, ge=1)
    size: int = Field(default_factory=lambda: get_settings().default_page_size, ge=1)
