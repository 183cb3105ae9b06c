"""SQLAlchemy ORM models."""

from payrun.models.base import Base, ExactDecimal, TimestampMixin
from payrun.models.employee import EmployeeRecord
from payrun.models.payroll import PayrollEntryRecord

__all__ = [
    "Base",
    "ExactDecimal",
    "TimestampMixin",
    "EmployeeRecord",
    "PayrollEntryRecord",
]
