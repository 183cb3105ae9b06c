"""Gross pay calculation per compensation variant."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from payrun.calculators.types import (
    CommissionedEmployee,
    Employee,
    HourlyEmployee,
    Hours,
    PayrollEntry,
    PayrollValue,
    SalariedEmployee,
    SalesReceipts,
)

STANDARD_HOURS = Decimal("40")
OVERTIME_MULTIPLIER = Decimal("1.5")


class PayrollCalculationError(Exception):
    """Base class for pay calculation failures."""


class PayrollValueMismatchError(PayrollCalculationError):
    """Raised when a payroll value does not fit the employee's plan."""

    def __init__(
        self,
        expected: str,
        actual: PayrollValue,
        employee_id: int | None = None,
    ):
        self.expected = expected
        self.actual = actual
        self.employee_id = employee_id
        msg = f"Expected {expected} payroll value, got {type(actual).__name__}"
        if employee_id is not None:
            msg += f" for employee {employee_id}"
        super().__init__(msg)


class CannotCalculateCommissionOnHoursError(PayrollValueMismatchError):
    """Commission requested against an hours entry."""

    def __init__(self, actual: PayrollValue, employee_id: int | None = None):
        super().__init__("SalesReceipts", actual, employee_id)


class CannotCalculateWageOnSalesReceiptsError(PayrollValueMismatchError):
    """Wage requested against a sales receipts entry."""

    def __init__(self, actual: PayrollValue, employee_id: int | None = None):
        super().__init__("Hours", actual, employee_id)


def calculate_commission(
    payroll_value: PayrollValue, commission_rate: Decimal
) -> Decimal:
    """Commission is the sales receipts total times the commission rate."""
    if isinstance(payroll_value, SalesReceipts):
        return payroll_value.amount * commission_rate
    raise CannotCalculateCommissionOnHoursError(payroll_value)


def calculate_wage(payroll_value: PayrollValue, hourly_rate: Decimal) -> Decimal:
    """Wage for hours worked, with hours beyond 40 paid at 1.5x the rate."""
    if not isinstance(payroll_value, Hours):
        raise CannotCalculateWageOnSalesReceiptsError(payroll_value)

    hours = Decimal(payroll_value.hours)
    if hours > STANDARD_HOURS:
        overtime = hours - STANDARD_HOURS
        return STANDARD_HOURS * hourly_rate + overtime * hourly_rate * OVERTIME_MULTIPLIER
    return hours * hourly_rate


def find_payroll_entry(
    payroll_entries: Iterable[PayrollEntry], employee_id: int
) -> PayrollEntry | None:
    """Return the first entry for the employee, if any.

    Duplicates are not aggregated; later entries are ignored.
    """
    return next(
        (entry for entry in payroll_entries if entry.employee_id == employee_id),
        None,
    )


def calculate_pay(
    payroll_entries: Iterable[PayrollEntry], employee: Employee
) -> Decimal:
    """Calculate gross pay for one employee.

    A missing payroll entry means no activity: zero sales receipts for
    commissioned employees and zero hours for hourly employees.

    Raises:
        PayrollValueMismatchError: If the matching entry carries the wrong
            kind of value for the employee's plan.
    """
    employee_type = employee.employee_type

    if isinstance(employee_type, SalariedEmployee):
        return employee_type.monthly_salary

    entry = find_payroll_entry(payroll_entries, employee.employee_id)

    if isinstance(employee_type, CommissionedEmployee):
        value = entry.payroll_value if entry else SalesReceipts(Decimal("0"))
        try:
            commission = calculate_commission(value, employee_type.commission_rate)
        except CannotCalculateCommissionOnHoursError as e:
            raise CannotCalculateCommissionOnHoursError(
                e.actual, employee.employee_id
            ) from e
        return employee_type.base_salary + commission

    if isinstance(employee_type, HourlyEmployee):
        value = entry.payroll_value if entry else Hours(0)
        try:
            return calculate_wage(value, employee_type.hourly_rate)
        except CannotCalculateWageOnSalesReceiptsError as e:
            raise CannotCalculateWageOnSalesReceiptsError(
                e.actual, employee.employee_id
            ) from e

    raise TypeError(f"Unknown employee type: {employee_type!r}")
