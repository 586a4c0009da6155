from __future__ import annotations

from typing import Mapping, Optional

from werkzeug.datastructures import FileStorage

from ..storage.blob_router import BlobPlacementRouter
from .model import CreateEmployeeRequest
from .repository import EmployeeRepository


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, blobs: BlobPlacementRouter):
        self._employees = employees
        self._blobs = blobs

    def list_employees(self):
        return self._employees.list_all()

    def create_employee(self, req: CreateEmployeeRequest, files: Mapping[str, Optional[FileStorage]]) -> None:
        uploads = {"photo": files.get("photo"), "resume": files.get("resume")}
        with self._blobs.staged(uploads) as stored:
            self._employees.create(req, photo=stored["photo"], resume=stored["resume"])
