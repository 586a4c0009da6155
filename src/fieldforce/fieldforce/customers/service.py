from __future__ import annotations

import csv
import io
import logging
from typing import List, Optional

from werkzeug.datastructures import FileStorage

from ..common.validators import is_blank
from ..core.constants import CUSTOMER_LIST_LIMIT
from ..core.exceptions import MissingData, ValidationError
from .model import AllocateRequest, CustomerQuery, CustomerRow, DeallocateRequest
from .repository import CustomerRepository

logger = logging.getLogger(__name__)


def parse_customer_csv(text: str) -> List[CustomerRow]:
    """Parse an import file: header row with a ``name`` column, optional
    ``phone``, ``address`` and ``assigned_to``.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    if not reader.fieldnames:
        raise MissingData("Empty CSV file")
    reader.fieldnames = [(h or "").strip().lower() for h in reader.fieldnames]
    if "name" not in reader.fieldnames:
        raise MissingData("CSV header must include a name column")

    rows: List[CustomerRow] = []
    for record in reader:
        if all(is_blank(v) for v in record.values() if not isinstance(v, list)):
            continue
        if is_blank(record.get("name")):
            raise MissingData(f"Missing name on line {reader.line_num}")
        rows.append(CustomerRow.from_csv(record))
    return rows


class CustomerService:
    def __init__(self, customers: CustomerRepository, *, list_limit: int = CUSTOMER_LIST_LIMIT):
        self._customers = customers
        self._list_limit = int(list_limit)

    def list_customers(self, query: CustomerQuery):
        return self._customers.list_assigned(query.employee_id, limit=self._list_limit)

    def allocate(self, req: AllocateRequest) -> None:
        self._customers.set_assignment(req.customer_id, req.employee_id)

    def deallocate(self, req: DeallocateRequest) -> None:
        self._customers.set_assignment(req.customer_id, None)

    def import_csv(self, file: Optional[FileStorage]) -> int:
        if file is None or not file.filename:
            raise MissingData("Missing CSV file")
        try:
            text = file.read().decode("utf-8-sig")
        except UnicodeDecodeError:
            raise ValidationError("CSV file must be UTF-8")

        rows = parse_customer_csv(text)
        if not rows:
            raise MissingData("CSV file has no customers")
        imported = self._customers.insert_many(rows)
        logger.info("imported %d customers from %s", imported, file.filename)
        return imported
