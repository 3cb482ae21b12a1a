from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization checks."""

    ADMIN = "admin"
    STAFF = "staff"


class LeaveStatus(str, Enum):
    """Leave request approval workflow states."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class AttendanceStatus(str, Enum):
    """Attendance record states; only completed shifts count toward payroll."""

    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class ListOperation(str, Enum):
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


class OrganizationList(str, Enum):
    """Named lookup lists managed from the organization settings page."""

    ROLES = "roles"
    GROUP_NAMES = "groupNames"
    SYSTEMS = "systems"
    CAMPUSES = "campuses"
    LEAVE_TYPES = "leaveTypes"
    STAGE = "stage"
    SUBJECTS = "subjects"
    MACHINE_NAMES = "machineNames"
    REPORT_LINES_1 = "reportLines1"
