"""Payroll calculation engine."""

from payrun.calculators.engine import CalculationResult, PayrollEngine, PayRunResult
from payrun.calculators.pay_calculator import (
    CannotCalculateCommissionOnHoursError,
    CannotCalculateWageOnSalesReceiptsError,
    PayrollCalculationError,
    PayrollValueMismatchError,
    calculate_commission,
    calculate_pay,
    calculate_wage,
    find_payroll_entry,
)
from payrun.calculators.pay_dates import is_pay_date

__all__ = [
    "PayrollEngine",
    "CalculationResult",
    "PayRunResult",
    "PayrollCalculationError",
    "PayrollValueMismatchError",
    "CannotCalculateCommissionOnHoursError",
    "CannotCalculateWageOnSalesReceiptsError",
    "calculate_commission",
    "calculate_pay",
    "calculate_wage",
    "find_payroll_entry",
    "is_pay_date",
]
