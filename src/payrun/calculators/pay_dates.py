"""Pay date rules per compensation variant."""

from __future__ import annotations

import calendar
from datetime import date

from payrun.calculators.types import (
    CommissionedEmployee,
    EmployeeType,
    HourlyEmployee,
    SalariedEmployee,
)

FRIDAY = 4  # date.weekday()


def day_number(value: date) -> int:
    """Days elapsed since 0001-01-01, which is day number 0."""
    return value.toordinal() - 1


def is_last_day_of_month(value: date) -> bool:
    """Check if the date is the last calendar day of its month."""
    _, days_in_month = calendar.monthrange(value.year, value.month)
    return value.day == days_in_month


def is_friday(value: date) -> bool:
    return value.weekday() == FRIDAY


def is_pay_date(value: date, employee_type: EmployeeType) -> bool:
    """Check whether an employee on this plan is due pay on the date.

    - Salaried: last day of the month
    - Commissioned: every other Friday, on even day numbers
    - Hourly: every Friday

    The commissioned cadence is anchored to the day-number epoch, so every
    commissioned employee shares the same Fridays.
    """
    if isinstance(employee_type, SalariedEmployee):
        return is_last_day_of_month(value)
    if isinstance(employee_type, CommissionedEmployee):
        return is_friday(value) and day_number(value) % 2 == 0
    if isinstance(employee_type, HourlyEmployee):
        return is_friday(value)
    raise TypeError(f"Unknown employee type: {employee_type!r}")
