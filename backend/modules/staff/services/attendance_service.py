import logging
from datetime import date, datetime
from typing import Callable, List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from core.crud import CRUDRepository
from core.exceptions import ConflictError
from core.exports import to_csv
from ..enums.attendance_enums import AttendanceStatus
from ..models.attendance_models import AttendanceRecord
from ..models.staff_models import StaffMember
from ..schemas.attendance_schemas import AttendanceMetrics

logger = logging.getLogger(__name__)

ATTENDANCE_EXPORT_HEADERS = [
    "Date", "Staff Name", "Status", "Check In", "Check Out", "Hours Worked", "Notes",
]


def _hours_between(start: datetime, end: datetime) -> float:
    return round((end - start).total_seconds() / 3600, 2)


class AttendanceService:
    """Clock in/out and attendance history"""

    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.now):
        self.db = db
        self.clock = clock
        self.records = CRUDRepository(AttendanceRecord, db, label="Attendance record")
        self.staff = CRUDRepository(StaffMember, db, label="Staff member")

    def get_current_attendance(self, staff_id: int) -> Optional[AttendanceRecord]:
        """Today's record for a staff member, if any"""
        today = self.clock().date()
        return self.records.query({"staff_id": staff_id, "date": today}).first()

    def clock_in(self, staff_id: int, notes: Optional[str] = None) -> Tuple[AttendanceRecord, str]:
        self.staff.get_or_404(staff_id)
        now = self.clock()
        record = self.get_current_attendance(staff_id)

        if record and record.check_in and not record.check_out:
            raise ConflictError("Already clocked in", error_code="ALREADY_CLOCKED_IN")
        if record and record.check_out:
            raise ConflictError("Already clocked out", error_code="ALREADY_CLOCKED_OUT")

        if record is None:
            record = self.records.create({
                "staff_id": staff_id,
                "date": now.date(),
                "check_in": now,
                "status": AttendanceStatus.PRESENT,
                "notes": notes,
            })
        else:
            # Day was pre-filled (e.g. marked absent) without a check-in
            data = {"check_in": now, "status": AttendanceStatus.PRESENT}
            if notes:
                data["notes"] = notes
            record = self.records.update(record.id, data)

        logger.info(f"Staff {staff_id} clocked in at {now:%H:%M}")
        return record, f"Clocked in successfully at {now:%I:%M %p}"

    def clock_out(self, staff_id: int, notes: Optional[str] = None) -> Tuple[AttendanceRecord, str]:
        self.staff.get_or_404(staff_id)
        now = self.clock()
        record = self.get_current_attendance(staff_id)

        if record is None or record.check_in is None:
            raise ConflictError("Not clocked in", error_code="NOT_CLOCKED_IN")
        if record.check_out is not None:
            raise ConflictError("Already clocked out", error_code="ALREADY_CLOCKED_OUT")

        data = {
            "check_out": now,
            "hours_worked": _hours_between(record.check_in, now),
        }
        if notes:
            data["notes"] = notes
        record = self.records.update(record.id, data)

        logger.info(f"Staff {staff_id} clocked out after {record.hours_worked} hours")
        return record, f"Clocked out successfully at {now:%I:%M %p}"

    def mark_attendance(
        self,
        staff_id: int,
        day: date,
        status: AttendanceStatus,
        notes: Optional[str] = None,
    ) -> AttendanceRecord:
        """Set the status of a day without clocking, e.g. absent or on leave"""
        self.staff.get_or_404(staff_id)
        record = self.records.query({"staff_id": staff_id, "date": day}).first()
        if record is None:
            return self.records.create({
                "staff_id": staff_id, "date": day, "status": status, "notes": notes,
            })
        return self.records.update(record.id, {"status": status, "notes": notes})

    def list_attendance(
        self,
        staff_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[AttendanceRecord]:
        query = self.records.query({"staff_id": staff_id}).options(
            joinedload(AttendanceRecord.staff_member)
        )
        if start_date:
            query = query.filter(AttendanceRecord.date >= start_date)
        if end_date:
            query = query.filter(AttendanceRecord.date <= end_date)
        return query.order_by(AttendanceRecord.date.desc(), AttendanceRecord.id.desc()).all()

    def get_metrics(self, start_date: date, end_date: date) -> AttendanceMetrics:
        metrics = AttendanceMetrics(period_start=start_date, period_end=end_date)
        for record in self.list_attendance(start_date=start_date, end_date=end_date):
            status = AttendanceStatus(record.status).value
            setattr(metrics, status, getattr(metrics, status) + 1)
            metrics.total_hours += record.hours_worked or 0
        metrics.total_hours = round(metrics.total_hours, 2)
        return metrics

    def export_attendance_csv(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> str:
        rows = [
            [
                record.date.isoformat(),
                record.staff_member.full_name if record.staff_member else record.staff_id,
                AttendanceStatus(record.status).value,
                record.check_in.strftime("%H:%M") if record.check_in else "",
                record.check_out.strftime("%H:%M") if record.check_out else "",
                record.hours_worked if record.hours_worked is not None else "",
                record.notes or "",
            ]
            for record in self.list_attendance(start_date=start_date, end_date=end_date)
        ]
        return to_csv(ATTENDANCE_EXPORT_HEADERS, rows)
