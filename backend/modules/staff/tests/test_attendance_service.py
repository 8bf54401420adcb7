# backend/modules/staff/tests/test_attendance_service.py

from datetime import date, datetime

import pytest
from sqlalchemy.orm import Session

from core.exceptions import ConflictError, NotFoundError
from modules.staff.enums.attendance_enums import AttendanceStatus
from modules.staff.services.attendance_service import AttendanceService
from tests.factories import StaffMemberFactory


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class TestAttendanceService:
    """Clock in/out rules"""

    @pytest.fixture
    def clock(self) -> FakeClock:
        return FakeClock(datetime(2024, 3, 4, 9, 0))

    @pytest.fixture
    def service(self, db_session: Session, clock) -> AttendanceService:
        return AttendanceService(db_session, clock=clock)

    def test_clock_in_creates_present_record(self, service, db_session):
        staff = StaffMemberFactory()

        record, message = service.clock_in(staff.id, "Morning shift")

        assert record.date == date(2024, 3, 4)
        assert record.check_in == datetime(2024, 3, 4, 9, 0)
        assert record.status == AttendanceStatus.PRESENT
        assert record.notes == "Morning shift"
        assert message == "Clocked in successfully at 09:00 AM"

    def test_clock_in_twice_is_rejected(self, service, db_session):
        staff = StaffMemberFactory()
        service.clock_in(staff.id)

        with pytest.raises(ConflictError) as exc_info:
            service.clock_in(staff.id)
        assert exc_info.value.detail == "Already clocked in"

    def test_clock_out_computes_hours(self, service, clock, db_session):
        """Test hours worked are rounded to two decimals"""
        staff = StaffMemberFactory()
        service.clock_in(staff.id)
        clock.now = datetime(2024, 3, 4, 17, 20, 30)

        record, _ = service.clock_out(staff.id)

        assert record.check_out == datetime(2024, 3, 4, 17, 20, 30)
        assert record.hours_worked == 8.34

    def test_clock_out_without_clock_in(self, service, db_session):
        staff = StaffMemberFactory()

        with pytest.raises(ConflictError) as exc_info:
            service.clock_out(staff.id)
        assert exc_info.value.detail == "Not clocked in"

    def test_clock_out_twice_and_clock_in_after(self, service, clock, db_session):
        staff = StaffMemberFactory()
        service.clock_in(staff.id)
        clock.now = datetime(2024, 3, 4, 12, 0)
        service.clock_out(staff.id)

        with pytest.raises(ConflictError, match="Already clocked out"):
            service.clock_out(staff.id)
        with pytest.raises(ConflictError, match="Already clocked out"):
            service.clock_in(staff.id)

    def test_clock_in_fills_marked_day(self, service, db_session):
        """Test clocking in on a day marked absent turns it into a present day"""
        staff = StaffMemberFactory()
        service.mark_attendance(staff.id, date(2024, 3, 4), AttendanceStatus.ABSENT)

        record, _ = service.clock_in(staff.id)

        assert record.status == AttendanceStatus.PRESENT
        assert len(service.list_attendance(staff_id=staff.id)) == 1

    def test_unknown_staff_member(self, service):
        with pytest.raises(NotFoundError):
            service.clock_in(999)

    def test_monthly_metrics(self, service, clock, db_session):
        staff = StaffMemberFactory()
        service.clock_in(staff.id)
        clock.now = datetime(2024, 3, 4, 17, 0)
        service.clock_out(staff.id)
        service.mark_attendance(staff.id, date(2024, 3, 5), AttendanceStatus.LATE)
        service.mark_attendance(staff.id, date(2024, 3, 6), AttendanceStatus.ON_LEAVE)
        service.mark_attendance(staff.id, date(2024, 4, 1), AttendanceStatus.ABSENT)

        metrics = service.get_metrics(date(2024, 3, 1), date(2024, 3, 31))

        assert (metrics.present, metrics.late, metrics.on_leave, metrics.absent) == (1, 1, 1, 0)
        assert metrics.total_hours == 8.0

    def test_export_csv(self, service, clock, db_session):
        staff = StaffMemberFactory(first_name="Selam", last_name="Bekele")
        service.clock_in(staff.id)
        clock.now = datetime(2024, 3, 4, 13, 30)
        service.clock_out(staff.id)

        lines = service.export_attendance_csv().split("\n")

        assert lines[0] == '"Date","Staff Name","Status","Check In","Check Out","Hours Worked","Notes"'
        assert lines[1] == '"2024-03-04","Selam Bekele","present","09:00","13:30","4.5",""'
