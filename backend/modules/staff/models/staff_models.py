from sqlalchemy import Column, Integer, String, Float, Date, Text, Enum
from sqlalchemy.orm import relationship
from core.database import Base
from core.mixins import TimestampMixin
from ..enums.staff_enums import StaffStatus, StaffRole


def _enum_values(obj):
    return [e.value for e in obj]


class StaffMember(Base, TimestampMixin):
    __tablename__ = "staff_members"
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True)
    phone = Column(String(50))
    role = Column(Enum(StaffRole, values_callable=_enum_values), nullable=False, default=StaffRole.WAITER)
    department = Column(String(100))
    status = Column(Enum(StaffStatus, values_callable=_enum_values), default=StaffStatus.ACTIVE, nullable=False)
    address = Column(Text)
    hourly_rate = Column(Float)
    bio = Column(Text)
    image_url = Column(String(500))
    gender = Column(String(20))
    performance = Column(Integer)  # Rating out of 100
    attendance = Column(Integer)  # Attendance rate in percent
    hiring_date = Column(Date)

    attendance_records = relationship(
        "AttendanceRecord", back_populates="staff_member", cascade="all, delete-orphan"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
