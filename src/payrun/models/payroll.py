"""Payroll entry model."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from payrun.calculators.types import Hours, PayrollEntry, SalesReceipts
from payrun.models.base import Base, ExactDecimal, TimestampMixin


class PayrollEntryRecord(Base, TimestampMixin):
    """Payroll entry row. Exactly one of hours / sales_receipts is set.

    Rows are read back in id order so first-match lookups stay stable.
    """

    __tablename__ = "payroll_entry"
    __table_args__ = (
        CheckConstraint(
            "(hours IS NOT NULL AND sales_receipts IS NULL) "
            "OR (hours IS NULL AND sales_receipts IS NOT NULL)",
            name="payroll_entry_value_check",
        ),
    )

    payroll_entry_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employee.employee_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    hours: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sales_receipts: Mapped[Decimal | None] = mapped_column(
        ExactDecimal, nullable=True
    )

    @classmethod
    def from_domain(cls, entry: PayrollEntry) -> PayrollEntryRecord:
        value = entry.payroll_value
        if isinstance(value, Hours):
            return cls(employee_id=entry.employee_id, hours=value.hours)
        if isinstance(value, SalesReceipts):
            return cls(employee_id=entry.employee_id, sales_receipts=value.amount)
        raise TypeError(f"Unknown payroll value: {value!r}")

    def to_domain(self) -> PayrollEntry:
        if self.hours is not None:
            return PayrollEntry(employee_id=self.employee_id, payroll_value=Hours(self.hours))
        if self.sales_receipts is not None:
            return PayrollEntry(
                employee_id=self.employee_id,
                payroll_value=SalesReceipts(self.sales_receipts),
            )
        raise ValueError(f"Payroll entry {self.payroll_entry_id} has no value")
