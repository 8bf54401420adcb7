from enum import Enum


class StaffStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ON_LEAVE = "on_leave"


class StaffRole(str, Enum):
    ADMIN = "admin"
    WAITER = "waiter"
    CHEF = "chef"
    DISHWASHER = "dishwasher"
    MANAGER = "manager"
