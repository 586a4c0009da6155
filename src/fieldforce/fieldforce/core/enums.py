from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role carried in the session token."""

    ADMIN = "ADMIN"
    EMPLOYEE = "EMPLOYEE"


class Capability(str, Enum):
    """What a role is allowed to do; each handler declares the one it needs."""

    MANAGE_USERS = "manage_users"
    MANAGE_EMPLOYEES = "manage_employees"
    VIEW_DIRECTORY = "view_directory"
    ALLOCATE_CUSTOMERS = "allocate_customers"
    FIELD_FEEDBACK = "field_feedback"
    ATTENDANCE = "attendance"
    VIEW_ADS = "view_ads"
    MANAGE_ADS = "manage_ads"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.ADMIN: frozenset(Capability),
    Role.EMPLOYEE: frozenset(
        {
            Capability.VIEW_DIRECTORY,
            Capability.FIELD_FEEDBACK,
            Capability.ATTENDANCE,
            Capability.VIEW_ADS,
        }
    ),
}


class AttendanceStatus(str, Enum):
    """Status stored on a daily attendance row."""

    PRESENT = "PRESENT"
