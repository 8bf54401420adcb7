from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional

from core.database import get_db
from ..enums.staff_enums import StaffRole, StaffStatus
from ..schemas.staff_schemas import StaffCreate, StaffOut, StaffUpdate
from ..services.staff_service import StaffService

router = APIRouter(prefix="/staff", tags=["Staff"])


def get_staff_service(db: Session = Depends(get_db)) -> StaffService:
    return StaffService(db)


@router.get("/members", response_model=List[StaffOut])
async def list_staff(
    search: Optional[str] = Query(None, description="Match first name, last name or email"),
    role: Optional[StaffRole] = None,
    staff_status: Optional[StaffStatus] = Query(None, alias="status"),
    staff_service: StaffService = Depends(get_staff_service),
):
    return staff_service.list_staff(search=search, role=role, status=staff_status)


@router.post("/members", response_model=StaffOut, status_code=status.HTTP_201_CREATED)
async def add_staff(
    staff_data: StaffCreate,
    staff_service: StaffService = Depends(get_staff_service),
):
    return staff_service.create_staff_member(staff_data)


@router.get("/members/{staff_id}", response_model=StaffOut)
async def get_staff(
    staff_id: int,
    staff_service: StaffService = Depends(get_staff_service),
):
    return staff_service.get_staff_member(staff_id)


@router.put("/members/{staff_id}", response_model=StaffOut)
async def update_staff(
    staff_id: int,
    staff_data: StaffUpdate,
    staff_service: StaffService = Depends(get_staff_service),
):
    return staff_service.update_staff_member(staff_id, staff_data)


@router.delete("/members/{staff_id}")
async def delete_staff(
    staff_id: int,
    staff_service: StaffService = Depends(get_staff_service),
):
    staff_service.delete_staff_member(staff_id)
    return {"success": True, "message": "Staff member deleted successfully"}
