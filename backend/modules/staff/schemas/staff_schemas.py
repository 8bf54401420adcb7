from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import date, datetime

from ..enums.staff_enums import StaffRole, StaffStatus


class StaffBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    role: StaffRole = StaffRole.WAITER
    department: Optional[str] = None
    status: StaffStatus = StaffStatus.ACTIVE
    address: Optional[str] = None
    hourly_rate: Optional[float] = Field(None, ge=0)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    gender: Optional[str] = None
    performance: Optional[int] = Field(None, ge=0, le=100)
    attendance: Optional[int] = Field(None, ge=0, le=100)
    hiring_date: Optional[date] = None


class StaffCreate(StaffBase):
    pass


class StaffUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    role: Optional[StaffRole] = None
    department: Optional[str] = None
    status: Optional[StaffStatus] = None
    address: Optional[str] = None
    hourly_rate: Optional[float] = Field(None, ge=0)
    bio: Optional[str] = None
    image_url: Optional[str] = None
    gender: Optional[str] = None
    performance: Optional[int] = Field(None, ge=0, le=100)
    attendance: Optional[int] = Field(None, ge=0, le=100)
    hiring_date: Optional[date] = None

    @field_validator("first_name", "last_name", "role", "status")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class StaffOut(StaffBase):
    id: int
    full_name: str
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(from_attributes=True)
