# backend/tests/factories/staff.py

import factory
from factory import Faker, Sequence

from .base import BaseFactory
from modules.staff.enums.staff_enums import StaffRole, StaffStatus
from modules.staff.models.staff_models import StaffMember


class StaffMemberFactory(BaseFactory):
    """Factory for creating staff members."""

    class Meta:
        model = StaffMember

    first_name = Faker("first_name")
    last_name = Faker("last_name")
    email = Sequence(lambda n: f"staff{n}@example.com")
    phone = Faker("phone_number")
    role = factory.Iterator([StaffRole.WAITER, StaffRole.CHEF, StaffRole.MANAGER])
    status = StaffStatus.ACTIVE
    hourly_rate = 18.5
