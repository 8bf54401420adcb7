from .staff_models import StaffMember
from .attendance_models import AttendanceRecord

__all__ = [
    "StaffMember",
    "AttendanceRecord",
]
