"""Employee model."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from payrun.calculators.types import (
    CommissionedEmployee,
    DirectDeposit,
    Disposition,
    Employee,
    EmployeeType,
    HeldAtPaymasterOffice,
    HourlyEmployee,
    MailedHome,
    SalariedEmployee,
    disposition_name,
    employee_type_name,
)
from payrun.models.base import Base, ExactDecimal, TimestampMixin


class EmployeeRecord(Base, TimestampMixin):
    """Employee row: compensation plan and disposition flattened to columns."""

    __tablename__ = "employee"
    __table_args__ = (
        CheckConstraint(
            "employee_type IN ('salaried', 'commissioned', 'hourly')",
            name="employee_type_check",
        ),
        CheckConstraint(
            "disposition IN ('mailed_home', 'held_at_paymaster_office', 'direct_deposit')",
            name="employee_disposition_check",
        ),
    )

    employee_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=False
    )
    employee_type: Mapped[str] = mapped_column(String, nullable=False)

    # Compensation (columns used depend on employee_type)
    monthly_salary: Mapped[Decimal | None] = mapped_column(ExactDecimal, nullable=True)
    base_salary: Mapped[Decimal | None] = mapped_column(ExactDecimal, nullable=True)
    commission_rate: Mapped[Decimal | None] = mapped_column(ExactDecimal, nullable=True)
    hourly_rate: Mapped[Decimal | None] = mapped_column(ExactDecimal, nullable=True)

    # Disposition (columns used depend on disposition)
    disposition: Mapped[str] = mapped_column(String, nullable=False)
    address_line1: Mapped[str | None] = mapped_column(String, nullable=True)
    address_line2: Mapped[str | None] = mapped_column(String, nullable=True)
    city: Mapped[str | None] = mapped_column(String, nullable=True)
    state: Mapped[str | None] = mapped_column(String, nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String, nullable=True)
    office_number: Mapped[str | None] = mapped_column(String, nullable=True)
    bank_name: Mapped[str | None] = mapped_column(String, nullable=True)
    account_number: Mapped[str | None] = mapped_column(String, nullable=True)
    routing_number: Mapped[str | None] = mapped_column(String, nullable=True)

    @classmethod
    def from_domain(cls, employee: Employee) -> EmployeeRecord:
        record = cls(
            employee_id=employee.employee_id,
            employee_type=employee_type_name(employee.employee_type),
            disposition=disposition_name(employee.disposition),
        )

        plan = employee.employee_type
        if isinstance(plan, SalariedEmployee):
            record.monthly_salary = plan.monthly_salary
        elif isinstance(plan, CommissionedEmployee):
            record.base_salary = plan.base_salary
            record.commission_rate = plan.commission_rate
        elif isinstance(plan, HourlyEmployee):
            record.hourly_rate = plan.hourly_rate

        disposition = employee.disposition
        if isinstance(disposition, MailedHome):
            record.address_line1 = disposition.address_line1
            record.address_line2 = disposition.address_line2
            record.city = disposition.city
            record.state = disposition.state
            record.zip_code = disposition.zip_code
        elif isinstance(disposition, HeldAtPaymasterOffice):
            record.office_number = disposition.office_number
        elif isinstance(disposition, DirectDeposit):
            record.bank_name = disposition.bank_name
            record.account_number = disposition.account_number
            record.routing_number = disposition.routing_number

        return record

    def to_domain(self) -> Employee:
        return Employee(
            employee_id=self.employee_id,
            employee_type=self._employee_type(),
            disposition=self._disposition(),
        )

    def _employee_type(self) -> EmployeeType:
        if self.employee_type == "salaried":
            return SalariedEmployee(monthly_salary=_required(self.monthly_salary, "monthly_salary"))
        if self.employee_type == "commissioned":
            return CommissionedEmployee(
                base_salary=_required(self.base_salary, "base_salary"),
                commission_rate=_required(self.commission_rate, "commission_rate"),
            )
        if self.employee_type == "hourly":
            return HourlyEmployee(hourly_rate=_required(self.hourly_rate, "hourly_rate"))
        raise ValueError(
            f"Employee {self.employee_id} has unknown type '{self.employee_type}'"
        )

    def _disposition(self) -> Disposition:
        if self.disposition == "mailed_home":
            return MailedHome(
                address_line1=self.address_line1 or "",
                address_line2=self.address_line2 or "",
                city=self.city or "",
                state=self.state or "",
                zip_code=self.zip_code or "",
            )
        if self.disposition == "held_at_paymaster_office":
            return HeldAtPaymasterOffice(office_number=self.office_number or "")
        if self.disposition == "direct_deposit":
            return DirectDeposit(
                bank_name=self.bank_name or "",
                account_number=self.account_number or "",
                routing_number=self.routing_number or "",
            )
        raise ValueError(
            f"Employee {self.employee_id} has unknown disposition '{self.disposition}'"
        )


def _required(value: Decimal | None, column: str) -> Decimal:
    if value is None:
        raise ValueError(f"Column '{column}' is required for this employee type")
    return value
