from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import CustomerRow


class CustomerRepository(Protocol):
    def list_assigned(self, employee_id: Optional[Any], *, limit: int) -> Sequence[dict]:
        """Customers assigned to ``employee_id``, or all customers when it is None."""
        raise NotImplementedError

    def set_assignment(self, customer_id: Any, employee_id: Optional[Any]) -> bool:
        raise NotImplementedError

    def insert_many(self, rows: Sequence[CustomerRow]) -> int:
        raise NotImplementedError
