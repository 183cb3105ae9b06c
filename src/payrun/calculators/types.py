"""Type definitions for the pay run pipeline.

Compensation plans, payroll values and dispositions are closed unions of
frozen dataclasses. Consumers dispatch on the concrete class and raise
``TypeError`` for anything outside the union.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union


# ============================================================================
# Compensation variants
# ============================================================================


@dataclass(frozen=True)
class SalariedEmployee:
    """Paid a fixed amount on the last day of each month."""

    monthly_salary: Decimal


@dataclass(frozen=True)
class CommissionedEmployee:
    """Base salary plus a share of sales receipts, paid every other Friday."""

    base_salary: Decimal
    commission_rate: Decimal  # As decimal, e.g., 0.10 for 10%


@dataclass(frozen=True)
class HourlyEmployee:
    """Paid per hour worked every Friday, overtime past 40 hours."""

    hourly_rate: Decimal


EmployeeType = Union[SalariedEmployee, CommissionedEmployee, HourlyEmployee]


# ============================================================================
# Payroll values
# ============================================================================


@dataclass(frozen=True)
class Hours:
    """Hours worked in the period."""

    hours: int


@dataclass(frozen=True)
class SalesReceipts:
    """Total sales receipts in the period."""

    amount: Decimal


PayrollValue = Union[Hours, SalesReceipts]


@dataclass(frozen=True)
class PayrollEntry:
    """One period's variable-pay input for an employee."""

    employee_id: int
    payroll_value: PayrollValue


# ============================================================================
# Dispositions
# ============================================================================


@dataclass(frozen=True)
class MailedHome:
    address_line1: str
    address_line2: str
    city: str
    state: str
    zip_code: str


@dataclass(frozen=True)
class HeldAtPaymasterOffice:
    office_number: str


@dataclass(frozen=True)
class DirectDeposit:
    bank_name: str
    account_number: str
    routing_number: str


Disposition = Union[MailedHome, HeldAtPaymasterOffice, DirectDeposit]


@dataclass(frozen=True)
class Employee:
    """Employee record for the duration of one pay run."""

    employee_id: int
    employee_type: EmployeeType
    disposition: Disposition


def employee_type_name(employee_type: EmployeeType) -> str:
    """Return the stable string tag for a compensation variant."""
    if isinstance(employee_type, SalariedEmployee):
        return "salaried"
    if isinstance(employee_type, CommissionedEmployee):
        return "commissioned"
    if isinstance(employee_type, HourlyEmployee):
        return "hourly"
    raise TypeError(f"Unknown employee type: {employee_type!r}")


def disposition_name(disposition: Disposition) -> str:
    """Return the stable string tag for a disposition."""
    if isinstance(disposition, MailedHome):
        return "mailed_home"
    if isinstance(disposition, HeldAtPaymasterOffice):
        return "held_at_paymaster_office"
    if isinstance(disposition, DirectDeposit):
        return "direct_deposit"
    raise TypeError(f"Unknown disposition: {disposition!r}")
