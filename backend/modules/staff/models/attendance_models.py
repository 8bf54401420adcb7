from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey, Enum, Float, Text, UniqueConstraint
from sqlalchemy.orm import relationship
from core.database import Base
from core.mixins import TimestampMixin
from ..enums.attendance_enums import AttendanceStatus


class AttendanceRecord(Base, TimestampMixin):
    __tablename__ = "staff_attendance"
    __table_args__ = (
        UniqueConstraint("staff_id", "date", name="uq_staff_attendance_day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    staff_id = Column(Integer, ForeignKey("staff_members.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    check_in = Column(DateTime)
    check_out = Column(DateTime)
    status = Column(
        Enum(
            AttendanceStatus,
            values_callable=lambda obj: [e.value for e in obj],
        ),
        nullable=False,
        default=AttendanceStatus.PRESENT,
    )
    hours_worked = Column(Float, default=0.0)
    notes = Column(Text)

    staff_member = relationship("StaffMember", back_populates="attendance_records")
