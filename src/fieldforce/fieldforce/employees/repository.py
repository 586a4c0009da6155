from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import CreateEmployeeRequest


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[dict]:
        raise NotImplementedError

    def create(self, req: CreateEmployeeRequest, *, photo: Optional[str], resume: Optional[str]) -> None:
        raise NotImplementedError
