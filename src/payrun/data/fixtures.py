"""Static employee and payroll fixtures for the current pay period.

Dispositions are drawn at random from three sample channels. Pass a
seeded ``random.Random`` for reproducible fixtures.
"""

from __future__ import annotations

import random
from decimal import Decimal

from payrun.calculators.types import (
    CommissionedEmployee,
    DirectDeposit,
    Disposition,
    Employee,
    EmployeeType,
    HeldAtPaymasterOffice,
    HourlyEmployee,
    Hours,
    MailedHome,
    PayrollEntry,
    SalariedEmployee,
    SalesReceipts,
)

SAMPLE_DISPOSITIONS: tuple[Disposition, ...] = (
    MailedHome(
        address_line1="123 Street",
        address_line2="Apt 4",
        city="Cape Town",
        state="WC",
        zip_code="8001",
    ),
    HeldAtPaymasterOffice(office_number="101"),
    DirectDeposit(
        bank_name="Bank of SA",
        account_number="123456789",
        routing_number="987654321",
    ),
)

EMPLOYEE_PLANS: tuple[tuple[int, EmployeeType], ...] = (
    (1, SalariedEmployee(monthly_salary=Decimal("50000"))),
    (2, CommissionedEmployee(base_salary=Decimal("25000"), commission_rate=Decimal("0.10"))),
    (3, HourlyEmployee(hourly_rate=Decimal("150"))),
    (4, HourlyEmployee(hourly_rate=Decimal("120"))),
    (5, HourlyEmployee(hourly_rate=Decimal("180"))),
    (6, HourlyEmployee(hourly_rate=Decimal("110"))),
)

PAYROLL_ENTRIES: tuple[PayrollEntry, ...] = (
    PayrollEntry(employee_id=3, payroll_value=Hours(46)),
    PayrollEntry(employee_id=2, payroll_value=SalesReceipts(Decimal("10000"))),
    PayrollEntry(employee_id=4, payroll_value=Hours(39)),
    PayrollEntry(employee_id=6, payroll_value=Hours(40)),
    PayrollEntry(employee_id=5, payroll_value=Hours(50)),
)


def random_disposition(rng: random.Random | None = None) -> Disposition:
    """Pick one of the sample dispositions."""
    rng = rng or random.Random()
    return SAMPLE_DISPOSITIONS[rng.randrange(len(SAMPLE_DISPOSITIONS))]


def fixture_employees(seed: int | None = None) -> list[Employee]:
    """Build the fixture employees, one random disposition each."""
    rng = random.Random(seed)
    return [
        Employee(
            employee_id=employee_id,
            employee_type=plan,
            disposition=random_disposition(rng),
        )
        for employee_id, plan in EMPLOYEE_PLANS
    ]


def fixture_payroll_entries() -> list[PayrollEntry]:
    return list(PAYROLL_ENTRIES)
