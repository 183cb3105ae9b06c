"""Payroll calculation engine - pay run orchestrator."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from payrun.calculators.pay_calculator import PayrollCalculationError, calculate_pay
from payrun.calculators.pay_dates import is_pay_date
from payrun.calculators.types import Employee, PayrollEntry

if TYPE_CHECKING:
    from payrun.providers.base import DeliveryResult
    from payrun.services.dispatcher import PayDispatcher

logger = logging.getLogger(__name__)


@dataclass
class CalculationResult:
    """Result of calculating pay for one employee."""

    employee: Employee
    gross: Decimal | None
    errors: list[str] = field(default_factory=list)

    @property
    def employee_id(self) -> int:
        return self.employee.employee_id

    @property
    def success(self) -> bool:
        return len(self.errors) == 0


@dataclass
class PayRunResult:
    """Result of one pay run."""

    pay_date: date
    results: list[CalculationResult] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)  # not due pay on this date
    deliveries: list[DeliveryResult] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @property
    def payments(self) -> list[tuple[Employee, Decimal]]:
        """(employee, gross) pairs in employee order, failures excluded."""
        return [
            (r.employee, r.gross)
            for r in self.results
            if r.success and r.gross is not None
        ]

    @property
    def errors(self) -> dict[int, list[str]]:
        return {r.employee_id: r.errors for r in self.results if not r.success}

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def total_gross(self) -> Decimal:
        return sum((gross for _, gross in self.payments), Decimal("0"))

    @property
    def success(self) -> bool:
        return self.error_count == 0


class PayrollEngine:
    """Main pay run engine.

    Pipeline (stable order, input order preserved):
    1) Filter employees due pay on the date
    2) Calculate gross pay for each
    3) Dispatch each payment

    With fail_fast, the first calculation error aborts the run before
    anything is dispatched. Otherwise errors are isolated to their
    employee and collected on the result.
    """

    def __init__(self, fail_fast: bool = False):
        self.fail_fast = fail_fast

    @staticmethod
    def payable_employees(
        pay_date: date, employees: Iterable[Employee]
    ) -> list[Employee]:
        """Employees due pay on the date, in input order."""
        return [e for e in employees if is_pay_date(pay_date, e.employee_type)]

    def calculate(
        self,
        pay_date: date,
        employees: Sequence[Employee],
        payroll_entries: Iterable[PayrollEntry],
    ) -> PayRunResult:
        """Calculate pay for every employee due on the date, without dispatch."""
        entries = list(payroll_entries)
        result = PayRunResult(pay_date=pay_date)

        for employee in employees:
            if not is_pay_date(pay_date, employee.employee_type):
                logger.debug(
                    "Employee %s not due pay on %s", employee.employee_id, pay_date
                )
                result.skipped.append(employee.employee_id)
                continue

            try:
                gross = calculate_pay(entries, employee)
            except PayrollCalculationError as e:
                if self.fail_fast:
                    raise
                logger.error(
                    "Pay calculation failed for employee %s: %s",
                    employee.employee_id,
                    e,
                )
                result.results.append(
                    CalculationResult(employee=employee, gross=None, errors=[str(e)])
                )
                continue

            result.results.append(CalculationResult(employee=employee, gross=gross))

        return result

    def run_payroll(
        self,
        pay_date: date,
        employees: Sequence[Employee],
        payroll_entries: Iterable[PayrollEntry],
        dispatcher: PayDispatcher,
    ) -> PayRunResult:
        """Calculate and dispatch pay for every employee due on the date."""
        started = time.perf_counter()

        result = self.calculate(pay_date, employees, payroll_entries)
        for employee, gross in result.payments:
            result.deliveries.append(dispatcher.send_pay(employee, gross))

        result.elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "Pay run for %s: %d paid, %d skipped, %d failed",
            pay_date,
            len(result.deliveries),
            len(result.skipped),
            result.error_count,
        )
        return result
