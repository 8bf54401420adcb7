from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from core.database import get_db
from core.exports import csv_response
from ..schemas.attendance_schemas import (
    AttendanceMark, AttendanceMetrics, AttendanceOut, ClockRequest, ClockResponse,
)
from ..services.attendance_service import AttendanceService

router = APIRouter(prefix="/attendance", tags=["Attendance"])


def get_attendance_service(db: Session = Depends(get_db)) -> AttendanceService:
    return AttendanceService(db)


def _month_bounds(day: date):
    start = day.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return start, date.fromordinal(next_month.toordinal() - 1)


@router.post("/{staff_id}/clock-in", response_model=ClockResponse)
async def clock_in(
    staff_id: int,
    clock_request: Optional[ClockRequest] = None,
    attendance_service: AttendanceService = Depends(get_attendance_service),
):
    notes = clock_request.notes if clock_request else None
    record, message = attendance_service.clock_in(staff_id, notes)
    return ClockResponse(message=message, record=record)


@router.post("/{staff_id}/clock-out", response_model=ClockResponse)
async def clock_out(
    staff_id: int,
    clock_request: Optional[ClockRequest] = None,
    attendance_service: AttendanceService = Depends(get_attendance_service),
):
    notes = clock_request.notes if clock_request else None
    record, message = attendance_service.clock_out(staff_id, notes)
    return ClockResponse(message=message, record=record)


@router.get("/{staff_id}/today", response_model=Optional[AttendanceOut])
async def get_today(
    staff_id: int,
    attendance_service: AttendanceService = Depends(get_attendance_service),
):
    """Today's attendance record, or null when the staff member has none"""
    return attendance_service.get_current_attendance(staff_id)


@router.put("/{staff_id}/mark", response_model=AttendanceOut)
async def mark_attendance(
    staff_id: int,
    mark: AttendanceMark,
    attendance_service: AttendanceService = Depends(get_attendance_service),
):
    return attendance_service.mark_attendance(staff_id, mark.date, mark.status, mark.notes)


@router.get("/records", response_model=List[AttendanceOut])
async def list_records(
    staff_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    attendance_service: AttendanceService = Depends(get_attendance_service),
):
    return attendance_service.list_attendance(staff_id, start_date, end_date)


@router.get("/metrics", response_model=AttendanceMetrics)
async def get_metrics(
    month: Optional[date] = Query(None, description="Any day in the month, defaults to the current month"),
    attendance_service: AttendanceService = Depends(get_attendance_service),
):
    """Attendance totals for one calendar month"""
    start, end = _month_bounds(month or attendance_service.clock().date())
    return attendance_service.get_metrics(start, end)


@router.get("/export")
async def export_attendance(
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    attendance_service: AttendanceService = Depends(get_attendance_service),
):
    return csv_response(
        attendance_service.export_attendance_csv(start_date, end_date), "attendance"
    )
