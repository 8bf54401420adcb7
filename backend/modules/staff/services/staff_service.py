import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.crud import CRUDRepository
from core.exceptions import ConflictError
from ..enums.staff_enums import StaffRole, StaffStatus
from ..models.staff_models import StaffMember
from ..schemas.staff_schemas import StaffCreate, StaffUpdate

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "A staff member with this email already exists"


class StaffService:
    """Staff directory management"""

    def __init__(self, db: Session):
        self.db = db
        self.staff = CRUDRepository(StaffMember, db, label="Staff member")

    def list_staff(
        self,
        search: Optional[str] = None,
        role: Optional[StaffRole] = None,
        status: Optional[StaffStatus] = None,
    ) -> List[StaffMember]:
        query = self.staff.query({"role": role, "status": status})
        if search:
            term = f"%{search}%"
            query = query.filter(
                or_(
                    StaffMember.first_name.ilike(term),
                    StaffMember.last_name.ilike(term),
                    StaffMember.email.ilike(term),
                )
            )
        return query.order_by(StaffMember.first_name, StaffMember.last_name).all()

    def get_staff_member(self, staff_id: int) -> StaffMember:
        return self.staff.get_or_404(staff_id)

    def create_staff_member(self, staff_data: StaffCreate) -> StaffMember:
        self._ensure_unique_email(staff_data.email)
        try:
            return self.staff.create(staff_data.model_dump())
        except IntegrityError as e:
            self._handle_integrity_error(e, staff_data.email)

    def update_staff_member(self, staff_id: int, staff_data: StaffUpdate) -> StaffMember:
        update_data = staff_data.model_dump(exclude_unset=True)
        self._ensure_unique_email(update_data.get("email"), exclude_id=staff_id)
        try:
            return self.staff.update(staff_id, update_data)
        except IntegrityError as e:
            self._handle_integrity_error(e, update_data.get("email"))

    def delete_staff_member(self, staff_id: int) -> None:
        self.staff.delete(staff_id)

    def _ensure_unique_email(self, email: Optional[str], exclude_id: Optional[int] = None) -> None:
        if not email:
            return
        query = self.db.query(StaffMember.id).filter(StaffMember.email == email)
        if exclude_id is not None:
            query = query.filter(StaffMember.id != exclude_id)
        if query.first():
            logger.warning(f"Duplicate staff email {email}")
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE, error_code="DUPLICATE_EMAIL")

    def _handle_integrity_error(self, error: IntegrityError, email: Optional[str]) -> None:
        self.db.rollback()
        # Email is the only unique column on staff_members
        if "email" in str(error.orig):
            logger.warning(f"Duplicate staff email {email}")
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE, error_code="DUPLICATE_EMAIL")
        raise error
