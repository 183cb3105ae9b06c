"""Pydantic schemas for API request/response models."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from payrun.calculators.engine import PayRunResult
from payrun.calculators.types import disposition_name, employee_type_name


class PayRunRequest(BaseModel):
    """Schema for requesting a pay run."""

    pay_date: date | None = Field(
        default=None, description="Date to run pay for; defaults to today"
    )


class PaymentResponse(BaseModel):
    """One employee's computed pay."""

    employee_id: int
    employee_type: str
    disposition: str
    gross: Decimal


class EmployeeErrorResponse(BaseModel):
    """An employee whose pay could not be calculated."""

    employee_id: int
    errors: list[str]


class PayRunResponse(BaseModel):
    """Schema for pay run / preview response."""

    pay_date: date
    dispatched: bool
    payments: list[PaymentResponse]
    errors: list[EmployeeErrorResponse]
    skipped: list[int]
    total_gross: Decimal
    elapsed_ms: float

    @classmethod
    def from_result(cls, result: PayRunResult, dispatched: bool) -> "PayRunResponse":
        return cls(
            pay_date=result.pay_date,
            dispatched=dispatched,
            payments=[
                PaymentResponse(
                    employee_id=employee.employee_id,
                    employee_type=employee_type_name(employee.employee_type),
                    disposition=disposition_name(employee.disposition),
                    gross=gross,
                )
                for employee, gross in result.payments
            ],
            errors=[
                EmployeeErrorResponse(employee_id=employee_id, errors=errors)
                for employee_id, errors in result.errors.items()
            ],
            skipped=result.skipped,
            total_gross=result.total_gross,
            elapsed_ms=result.elapsed_ms,
        )


class ErrorResponse(BaseModel):
    """Error response body."""

    detail: str
    code: str | None = None
