# backend/modules/staff/tests/test_staff_service.py

import pytest
from sqlalchemy.exc import IntegrityError

from core.exceptions import ConflictError
from modules.staff.schemas.staff_schemas import StaffCreate
from modules.staff.services.staff_service import StaffService


class TestStaffIntegrityErrors:

    def test_email_constraint_maps_to_conflict(self, mock_db_session):
        mock_db_session.commit.side_effect = IntegrityError(
            "INSERT INTO staff_members", {}, Exception("UNIQUE constraint failed: staff_members.email")
        )
        service = StaffService(mock_db_session)

        with pytest.raises(ConflictError) as exc_info:
            service.create_staff_member(StaffCreate(first_name="Lidya", last_name="Haile"))

        assert exc_info.value.error_code == "DUPLICATE_EMAIL"
        mock_db_session.rollback.assert_called_once()

    def test_other_constraints_are_not_reported_as_duplicates(self, mock_db_session):
        mock_db_session.commit.side_effect = IntegrityError(
            "INSERT INTO staff_members", {}, Exception("NOT NULL constraint failed: staff_members.role")
        )
        service = StaffService(mock_db_session)

        with pytest.raises(IntegrityError):
            service.create_staff_member(StaffCreate(first_name="Lidya", last_name="Haile"))

        mock_db_session.rollback.assert_called_once()
