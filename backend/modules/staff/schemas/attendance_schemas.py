from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import date, datetime

from ..enums.attendance_enums import AttendanceStatus


class ClockRequest(BaseModel):
    notes: Optional[str] = None


class AttendanceOut(BaseModel):
    id: int
    staff_id: int
    date: date
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    status: AttendanceStatus
    hours_worked: Optional[float] = None
    notes: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class ClockResponse(BaseModel):
    success: bool = True
    message: str
    record: AttendanceOut


class AttendanceMetrics(BaseModel):
    period_start: date
    period_end: date
    present: int = 0
    late: int = 0
    absent: int = 0
    on_leave: int = 0
    total_hours: float = 0.0


class AttendanceMark(BaseModel):
    date: date
    status: AttendanceStatus
    notes: Optional[str] = None
