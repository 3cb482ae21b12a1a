from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

import pytest

from src.hr_system.hr_system.common.audit import Actor
from src.hr_system.hr_system.core.constants import MAX_WORKDAY_RANGE_DAYS
from src.hr_system.hr_system.core.enums import LeaveStatus, Role
from src.hr_system.hr_system.core.exceptions import AuthorizationError, NotFoundError, StorageError, ValidationError
from src.hr_system.hr_system.employees.model import Employee
from src.hr_system.hr_system.leaves.model import LeaveRequest
from src.hr_system.hr_system.leaves.service import LeaveService
from src.hr_system.hr_system.settings.model import Holiday
from src.hr_system.hr_system.workdays.service import WorkCalendarService

ADMIN = Actor(user_id=1, email="admin@example.com", role="admin")
REASON = "Family wedding in another city"


class FakeLeavesRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, LeaveRequest] = {}
        self.last_list_call = None

    def create(self, *, employee_id, employee_name, leave_type, start_date, end_date, reason, number_of_days, attachment_url):
        rid = self._next_id
        self._next_id += 1
        self.rows[rid] = LeaveRequest(
            request_id=rid,
            employee_id=employee_id,
            employee_name=employee_name,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            number_of_days=number_of_days,
            status=LeaveStatus.PENDING,
            attachment_url=attachment_url,
        )
        return rid

    def get(self, *, request_id):
        return self.rows.get(int(request_id))

    def update(self, *, request_id, leave_type, start_date, end_date, reason, status, number_of_days):
        row = self.rows.get(int(request_id))
        if not row:
            return False
        self.rows[int(request_id)] = replace(
            row,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=status,
            number_of_days=number_of_days,
        )
        return True

    def update_status(self, *, request_id, status, manager_notes):
        row = self.rows[int(request_id)]
        self.rows[int(request_id)] = replace(row, status=status, manager_notes=manager_notes)
        return True

    def delete(self, *, request_id):
        return self.rows.pop(int(request_id), None) is not None

    def list_requests(self, *, status=None, employee_id=None, limit=200):
        self.last_list_call = {"status": status, "employee_id": employee_id, "limit": limit}
        return [
            {"request_id": r.request_id, "status": r.status.value}
            for r in self.rows.values()
            if (status is None or r.status == status) and (employee_id is None or r.employee_id == employee_id)
        ]


class FakeEmployeesRepo:
    def __init__(self, employees):
        self._employees = {e.employee_id: e for e in employees}

    def get(self, employee_id):
        return self._employees.get(int(employee_id))

    def list_active(self):
        return [e for e in self._employees.values() if e.status == "Active"]


class FakeSettingsRepo:
    def __init__(self, weekend=None, *, fail=False):
        self.weekend = weekend
        self.fail = fail

    def get_weekend_days(self):
        if self.fail:
            raise StorageError("down")
        return self.weekend


class FakeHolidayRepo:
    def __init__(self, holidays=()):
        self.holidays = list(holidays)

    def list_between(self, *, start_date, end_date):
        return [h for h in self.holidays if start_date <= h.holiday_date <= end_date]


def _service(*, settings=None, holidays=()):
    leaves = FakeLeavesRepo()
    employees = FakeEmployeesRepo([Employee(employee_id=7, name="Amina Haddad")])
    calendar = WorkCalendarService(settings or FakeSettingsRepo([5, 6]), FakeHolidayRepo(holidays))
    return LeaveService(leaves, employees, calendar), leaves


def test_submit_counts_working_days_and_creates_pending_request():
    svc, leaves = _service(holidays=[Holiday(holiday_id=1, name="Founding Day", holiday_date=date(2024, 1, 2))])

    # Mon 1st .. Sun 7th: Fri/Sat weekend and the Tuesday holiday are skipped.
    result = svc.submit_leave(
        employee_id=7,
        leave_type="Annual Leave",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 7),
        reason=REASON,
        attachment_url="https://files.example.com/invite.pdf",
    )

    assert result.number_of_days == 4
    assert result.warnings == ()
    row = leaves.rows[result.request_id]
    assert row.status == LeaveStatus.PENDING
    assert row.employee_name == "Amina Haddad"
    assert row.number_of_days == 4
    assert row.attachment_url == "https://files.example.com/invite.pdf"


def test_submit_carries_calendar_warnings():
    svc, _ = _service(settings=FakeSettingsRepo(fail=True))
    result = svc.submit_leave(
        employee_id=7,
        leave_type="Sick Leave",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 1),
        reason=REASON,
    )
    assert result.number_of_days == 1
    assert len(result.warnings) == 1


def test_submit_rejects_end_before_start():
    svc, leaves = _service()
    with pytest.raises(ValidationError) as exc:
        svc.submit_leave(
            employee_id=7,
            leave_type="Annual Leave",
            start_date=date(2024, 1, 10),
            end_date=date(2024, 1, 5),
            reason=REASON,
        )
    assert exc.value.field == "end_date"
    assert leaves.rows == {}


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"employee_id": None}, "employee_id"),
        ({"leave_type": "  "}, "leave_type"),
        ({"start_date": None}, "start_date"),
        ({"end_date": None}, "end_date"),
        ({"reason": "short"}, "reason"),
        ({"reason": "x" * 501}, "reason"),
        ({"attachment_url": "not a url"}, "attachment_url"),
    ],
)
def test_submit_validates_fields(overrides, field):
    svc, _ = _service()
    kwargs = dict(
        employee_id=7,
        leave_type="Annual Leave",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 2),
        reason=REASON,
    )
    kwargs.update(overrides)
    with pytest.raises(ValidationError) as exc:
        svc.submit_leave(**kwargs)
    assert exc.value.field == field


def test_submit_for_unknown_employee_fails():
    svc, _ = _service()
    with pytest.raises(ValidationError, match="Employee record not found"):
        svc.submit_leave(
            employee_id=99,
            leave_type="Annual Leave",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 1),
            reason=REASON,
        )


def _submitted(svc):
    return svc.submit_leave(
        employee_id=7,
        leave_type="Annual Leave",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 3),
        reason=REASON,
    ).request_id


def test_admin_can_approve_with_notes():
    svc, leaves = _service()
    rid = _submitted(svc)

    status = svc.update_status(
        current_role=Role.ADMIN, actor=ADMIN, request_id=rid, new_status="Approved", manager_notes=" ok "
    )

    assert status == LeaveStatus.APPROVED
    assert leaves.rows[rid].status == LeaveStatus.APPROVED
    assert leaves.rows[rid].manager_notes == "ok"


def test_staff_cannot_review():
    svc, _ = _service()
    rid = _submitted(svc)
    with pytest.raises(AuthorizationError):
        svc.update_status(current_role=Role.STAFF, actor=ADMIN, request_id=rid, new_status="Approved")


def test_review_requires_approved_or_rejected():
    svc, _ = _service()
    rid = _submitted(svc)
    with pytest.raises(ValidationError):
        svc.update_status(current_role=Role.ADMIN, actor=ADMIN, request_id=rid, new_status="Pending")


def test_review_of_missing_request_is_not_found():
    svc, _ = _service()
    with pytest.raises(NotFoundError):
        svc.update_status(current_role=Role.ADMIN, actor=ADMIN, request_id=42, new_status="Rejected")


def test_edit_recomputes_number_of_days():
    svc, leaves = _service()
    rid = _submitted(svc)

    result = svc.edit_leave(
        current_role=Role.ADMIN,
        actor=ADMIN,
        request_id=rid,
        leave_type="Unpaid Leave",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 14),
        reason=REASON,
        status="Approved",
    )

    assert result.number_of_days == 10
    row = leaves.rows[rid]
    assert row.number_of_days == 10
    assert row.status == LeaveStatus.APPROVED
    assert row.leave_type == "Unpaid Leave"


def test_delete_removes_request_and_missing_is_not_found():
    svc, leaves = _service()
    rid = _submitted(svc)

    svc.delete_leave(current_role=Role.ADMIN, actor=ADMIN, request_id=rid)
    assert rid not in leaves.rows

    with pytest.raises(NotFoundError):
        svc.delete_leave(current_role=Role.ADMIN, actor=ADMIN, request_id=rid)


def test_list_filters_by_status_and_employee():
    svc, leaves = _service()
    _submitted(svc)

    assert svc.list_requests(status="Pending") == [{"request_id": 1, "status": "Pending"}]
    assert leaves.last_list_call["status"] == LeaveStatus.PENDING
    assert svc.list_for_employee(employee_id=7) == [{"request_id": 1, "status": "Pending"}]
    assert leaves.last_list_call["employee_id"] == 7

    with pytest.raises(ValidationError):
        svc.list_requests(status="Archived")


def test_submit_rejects_span_longer_than_limit():
    svc, leaves = _service()
    with pytest.raises(ValidationError) as exc:
        svc.submit_leave(
            employee_id=7,
            leave_type="Unpaid Leave",
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 1) + timedelta(days=MAX_WORKDAY_RANGE_DAYS),
            reason=REASON,
        )
    assert exc.value.field == "end_date"
    assert leaves.rows == {}


class RecordingSystemLogRepo:
    def __init__(self):
        self.events = []

    def add(self, *, action, actor_id, actor_email, actor_role, details):
        self.events.append((action, actor_email, details))
        return len(self.events)


def test_review_is_written_to_the_system_log():
    logs = RecordingSystemLogRepo()
    leaves = FakeLeavesRepo()
    calendar = WorkCalendarService(FakeSettingsRepo([5, 6]), FakeHolidayRepo())
    svc = LeaveService(
        leaves, FakeEmployeesRepo([Employee(employee_id=7, name="Amina Haddad")]), calendar, system_logs=logs
    )
    rid = _submitted(svc)

    svc.update_status(current_role=Role.ADMIN, actor=ADMIN, request_id=rid, new_status="Rejected")

    assert logs.events == [
        ("Update Leave Status", "admin@example.com", {"request_id": rid, "new_status": "Rejected"})
    ]
