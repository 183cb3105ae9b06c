"""Data sources supplying employees and payroll entries to a pay run."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from payrun.calculators.types import Employee, PayrollEntry
from payrun.data.fixtures import fixture_employees, fixture_payroll_entries
from payrun.models import EmployeeRecord, PayrollEntryRecord

if TYPE_CHECKING:
    from payrun.config import Settings


class DuplicateEmployeeError(ValueError):
    """Raised when two employees share an employee id."""

    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Duplicate employee id {employee_id}")


def ensure_unique_employee_ids(employees: Iterable[Employee]) -> None:
    seen: set[int] = set()
    for employee in employees:
        if employee.employee_id in seen:
            raise DuplicateEmployeeError(employee.employee_id)
        seen.add(employee.employee_id)


class PayrollDataSource(Protocol):
    """Read access to the two ordered collections a pay run needs."""

    def get_employees(self) -> list[Employee]:
        ...

    def get_payroll_entries(self) -> list[PayrollEntry]:
        ...


class InMemoryDataSource:
    """Data source over in-memory collections."""

    def __init__(
        self,
        employees: Iterable[Employee],
        payroll_entries: Iterable[PayrollEntry],
    ):
        self._employees = tuple(employees)
        self._payroll_entries = tuple(payroll_entries)
        ensure_unique_employee_ids(self._employees)

    @classmethod
    def from_fixtures(cls, seed: int | None = None) -> InMemoryDataSource:
        """Build a source over the static fixtures."""
        return cls(fixture_employees(seed), fixture_payroll_entries())

    def get_employees(self) -> list[Employee]:
        return list(self._employees)

    def get_payroll_entries(self) -> list[PayrollEntry]:
        return list(self._payroll_entries)


class SqlDataSource:
    """Data source backed by the employee and payroll_entry tables.

    Employees come back in employee_id order and payroll entries in
    insertion order.
    """

    def __init__(self, session: Session):
        self.session = session

    def get_employees(self) -> list[Employee]:
        records = self.session.scalars(
            select(EmployeeRecord).order_by(EmployeeRecord.employee_id)
        ).all()
        return [r.to_domain() for r in records]

    def get_payroll_entries(self) -> list[PayrollEntry]:
        records = self.session.scalars(
            select(PayrollEntryRecord).order_by(PayrollEntryRecord.payroll_entry_id)
        ).all()
        return [r.to_domain() for r in records]

    def load(
        self,
        employees: Iterable[Employee],
        payroll_entries: Iterable[PayrollEntry],
    ) -> tuple[int, int]:
        """Insert employees and payroll entries. Returns the row counts."""
        employees = list(employees)
        ensure_unique_employee_ids(employees)
        entries = list(payroll_entries)

        self.session.add_all(EmployeeRecord.from_domain(e) for e in employees)
        # Employees first so payroll_entry foreign keys resolve
        self.session.flush()
        self.session.add_all(PayrollEntryRecord.from_domain(p) for p in entries)
        self.session.flush()
        return len(employees), len(entries)


@contextmanager
def open_data_source(settings: Settings) -> Iterator[PayrollDataSource]:
    """Open the data source selected by DATA_SOURCE."""
    if settings.data_source == "database":
        from payrun.database import get_session

        with get_session() as session:
            yield SqlDataSource(session)
    else:
        yield InMemoryDataSource.from_fixtures(settings.disposition_seed)
