from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

os.environ.setdefault("APP_ENV", "testing")

from src.fieldforce.fieldforce.ads.service import AdService
from src.fieldforce.fieldforce.attendance.model import AttendanceRecord
from src.fieldforce.fieldforce.attendance.service import AttendanceService
from src.fieldforce.fieldforce.container import Container
from src.fieldforce.fieldforce.core.enums import AttendanceStatus, Role
from src.fieldforce.fieldforce.core.exceptions import Conflict
from src.fieldforce.fieldforce.customers.service import CustomerService
from src.fieldforce.fieldforce.employees.service import EmployeeService
from src.fieldforce.fieldforce.feedback.service import FeedbackService
from src.fieldforce.fieldforce.security.guard import AccessGuard
from src.fieldforce.fieldforce.security.tokens import Identity, TokenCodec
from src.fieldforce.fieldforce.storage.blob_router import BlobPlacementRouter
from src.fieldforce.fieldforce.users.model import User
from src.fieldforce.fieldforce.users.service import AuthService, UserService

TEST_SECRET = "test-secret"


class _Recorder:
    def __init__(self, calls: list):
        self.calls = calls

    def _hit(self, name: str) -> None:
        self.calls.append(f"{type(self).__name__}.{name}")


class InMemoryUsers(_Recorder):
    def __init__(self, calls: list):
        super().__init__(calls)
        self.users: dict[int, User] = {}
        self._id = 0

    def add(self, user_id: str, password: str, *, role: Role = Role.EMPLOYEE, full_name=None, is_active=True) -> User:
        self._id += 1
        user = User(
            id=self._id,
            user_id=user_id,
            password_hash=generate_password_hash(password),
            role=role,
            full_name=full_name,
            is_active=is_active,
        )
        self.users[user.id] = user
        return user

    def get_by_user_id(self, user_id: str) -> Optional[User]:
        self._hit("get_by_user_id")
        return next((u for u in self.users.values() if u.user_id == user_id), None)

    def list_all(self):
        self._hit("list_all")
        return [
            {"id": u.id, "user_id": u.user_id, "role": u.role.value, "is_active": int(u.is_active)}
            for u in sorted(self.users.values(), key=lambda u: u.id, reverse=True)
        ]

    def create_user(self, *, user_id: str, password_hash: str, role: Role, full_name=None) -> None:
        self._hit("create_user")
        if any(u.user_id == user_id for u in self.users.values()):
            raise Conflict("User already exists")
        self._id += 1
        self.users[self._id] = User(
            id=self._id, user_id=user_id, password_hash=password_hash, role=role, full_name=full_name
        )

    def set_active(self, id: int, *, is_active: bool) -> bool:
        self._hit("set_active")
        if id not in self.users:
            return False
        self.users[id] = replace(self.users[id], is_active=is_active)
        return True

    def delete_by_id(self, id: int) -> bool:
        self._hit("delete_by_id")
        return self.users.pop(id, None) is not None


class InMemoryEmployees(_Recorder):
    def __init__(self, calls: list):
        super().__init__(calls)
        self.rows: list[dict] = []
        self.fail_next = False

    def list_all(self):
        self._hit("list_all")
        return list(reversed(self.rows))

    def create(self, req, *, photo, resume) -> None:
        self._hit("create")
        if self.fail_next:
            raise RuntimeError("insert failed")
        self.rows.append({"id": len(self.rows) + 1, **req.__dict__, "photo": photo, "resume": resume})


class InMemoryCustomers(_Recorder):
    def __init__(self, calls: list):
        super().__init__(calls)
        self.rows: dict[int, dict] = {}

    def seed(self, *names: str) -> list[int]:
        ids = []
        for name in names:
            cid = len(self.rows) + 1
            self.rows[cid] = {"id": cid, "name": name, "phone": None, "address": None, "assigned_to": None}
            ids.append(cid)
        return ids

    def list_assigned(self, employee_id, *, limit: int):
        self._hit("list_assigned")
        rows = [
            r
            for r in self.rows.values()
            if employee_id is None or (r["assigned_to"] is not None and str(r["assigned_to"]) == str(employee_id))
        ]
        return rows[:limit]

    def set_assignment(self, customer_id: int, employee_id) -> bool:
        self._hit("set_assignment")
        row = next((r for r in self.rows.values() if str(r["id"]) == str(customer_id)), None)
        if row is None:
            return False
        row["assigned_to"] = employee_id
        return True

    def insert_many(self, rows) -> int:
        self._hit("insert_many")
        for r in rows:
            cid = len(self.rows) + 1
            self.rows[cid] = {"id": cid, **r.__dict__}
        return len(rows)


class InMemoryFeedback(_Recorder):
    def __init__(self, calls: list):
        super().__init__(calls)
        self.rows: dict[int, dict] = {}
        self.fail_next = False

    def list_all(self):
        self._hit("list_all")
        return [self.rows[k] for k in sorted(self.rows, reverse=True)]

    def create(self, *, author_id: int, req, photo) -> None:
        self._hit("create")
        if self.fail_next:
            raise RuntimeError("insert failed")
        fid = len(self.rows) + 1
        self.rows[fid] = {
            "id": fid,
            "user_id": author_id,
            "customer": req.customer,
            "notes": req.fields.notes,
            "photo": photo,
            "lat": req.fields.lat,
            "lng": req.fields.lng,
        }

    def update(self, feedback_id: int, fields) -> bool:
        self._hit("update")
        if feedback_id not in self.rows:
            return False
        self.rows[feedback_id].update(notes=fields.notes, lat=fields.lat, lng=fields.lng)
        return True

    def delete_by_id(self, feedback_id: int) -> bool:
        self._hit("delete_by_id")
        return self.rows.pop(feedback_id, None) is not None


class InMemoryAttendance(_Recorder):
    def __init__(self, calls: list):
        super().__init__(calls)
        self.by_employee_date: dict[tuple[int, date], AttendanceRecord] = {}

    def list_for_employee(self, employee_id: int):
        self._hit("list_for_employee")
        records = [r for r in self.by_employee_date.values() if r.employee_id == employee_id]
        records.sort(key=lambda r: r.work_date, reverse=True)
        return records

    def upsert_checkin(self, *, employee_id: int, work_date: date, login: time, status: AttendanceStatus) -> None:
        self._hit("upsert_checkin")
        existing = self.by_employee_date.get((employee_id, work_date))
        if existing:
            self.by_employee_date[(employee_id, work_date)] = replace(existing, login=login, status=status)
        else:
            self.by_employee_date[(employee_id, work_date)] = AttendanceRecord(
                employee_id=employee_id, work_date=work_date, login=login, logout=None, status=status
            )

    def update_checkout(self, *, employee_id: int, work_date: date, logout: time) -> bool:
        self._hit("update_checkout")
        existing = self.by_employee_date.get((employee_id, work_date))
        if not existing:
            return False
        self.by_employee_date[(employee_id, work_date)] = replace(existing, logout=logout)
        return True


class InMemoryAds(_Recorder):
    def __init__(self, calls: list):
        super().__init__(calls)
        self.rows: dict[int, dict] = {}
        self.fail_next = False

    def list_active(self):
        self._hit("list_active")
        return [self.rows[k] for k in sorted(self.rows, reverse=True) if self.rows[k]["is_active"]]

    def create(self, *, title: str, image) -> None:
        self._hit("create")
        if self.fail_next:
            raise RuntimeError("insert failed")
        aid = len(self.rows) + 1
        self.rows[aid] = {"id": aid, "title": title, "image": image, "is_active": 1}

    def toggle(self, ad_id: int) -> bool:
        self._hit("toggle")
        if ad_id not in self.rows:
            return False
        self.rows[ad_id]["is_active"] = 0 if self.rows[ad_id]["is_active"] else 1
        return True

    def delete_by_id(self, ad_id: int) -> bool:
        self._hit("delete_by_id")
        return self.rows.pop(ad_id, None) is not None


@dataclass
class Fakes:
    calls: list = field(default_factory=list)

    def __post_init__(self):
        self.users = InMemoryUsers(self.calls)
        self.employees = InMemoryEmployees(self.calls)
        self.customers = InMemoryCustomers(self.calls)
        self.feedback = InMemoryFeedback(self.calls)
        self.attendance = InMemoryAttendance(self.calls)
        self.ads = InMemoryAds(self.calls)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def fakes() -> Fakes:
    return Fakes()


@pytest.fixture
def tokens() -> TokenCodec:
    return TokenCodec(TEST_SECRET)


@pytest.fixture
def blobs(tmp_path) -> BlobPlacementRouter:
    return BlobPlacementRouter(tmp_path / "uploads", clock=lambda: 1700000000000)


@pytest.fixture
def make_container(fakes, tokens, blobs):
    def _make(*, enforce_roles: bool = False) -> Container:
        return Container(
            guard=AccessGuard(tokens, enforce_roles=enforce_roles),
            blobs=blobs,
            auth_service=AuthService(fakes.users, tokens),
            user_service=UserService(fakes.users),
            employee_service=EmployeeService(fakes.employees, blobs),
            customer_service=CustomerService(fakes.customers),
            feedback_service=FeedbackService(fakes.feedback, blobs),
            attendance_service=AttendanceService(fakes.attendance),
            ad_service=AdService(fakes.ads, blobs),
        )

    return _make


@pytest.fixture
def app(make_container):
    from src.fieldforce.fieldforce.main import create_app

    app = create_app(container=make_container())
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_header(tokens):
    def _header(user: User) -> dict:
        token = tokens.issue(Identity(id=user.id, role=user.role, user_id=user.user_id))
        return {"Authorization": f"Bearer {token}"}

    return _header
