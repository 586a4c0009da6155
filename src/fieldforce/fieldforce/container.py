from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ads.mysql_ad_repository import MySQLAdRepository
from .ads.service import AdService
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT_SECONDS
from .customers.mysql_customer_repository import MySQLCustomerRepository
from .customers.service import CustomerService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.service import EmployeeService
from .feedback.mysql_feedback_repository import MySQLFeedbackRepository
from .feedback.service import FeedbackService
from .security.guard import AccessGuard
from .security.tokens import TokenCodec
from .storage.blob_router import BlobPlacementRouter
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    """Process-scoped collaborators, built once at startup."""

    guard: AccessGuard
    blobs: BlobPlacementRouter

    auth_service: AuthService
    user_service: UserService
    employee_service: EmployeeService
    customer_service: CustomerService
    feedback_service: FeedbackService
    attendance_service: AttendanceService
    ad_service: AdService


def build_container(
    *,
    db_config: dict,
    secret: str,
    upload_dir: str | Path,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS,
    enforce_roles: bool = False,
) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(pool_size),
        pool_timeout=float(pool_timeout),
    )
    conn = DatabaseConnection(config)

    tokens = TokenCodec(secret)
    blobs = BlobPlacementRouter(upload_dir)
    users_repo = MySQLUserRepository(conn)

    return Container(
        guard=AccessGuard(tokens, enforce_roles=enforce_roles),
        blobs=blobs,
        auth_service=AuthService(users_repo, tokens),
        user_service=UserService(users_repo),
        employee_service=EmployeeService(MySQLEmployeeRepository(conn), blobs),
        customer_service=CustomerService(MySQLCustomerRepository(conn)),
        feedback_service=FeedbackService(MySQLFeedbackRepository(conn), blobs),
        attendance_service=AttendanceService(MySQLAttendanceRepository(conn)),
        ad_service=AdService(MySQLAdRepository(conn), blobs),
    )
