"""Pytest fixtures for payrun tests."""

from __future__ import annotations

import io
from collections.abc import Generator
from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from payrun.calculators.types import (
    CommissionedEmployee,
    DirectDeposit,
    Employee,
    HeldAtPaymasterOffice,
    HourlyEmployee,
    Hours,
    MailedHome,
    PayrollEntry,
    SalariedEmployee,
    SalesReceipts,
)
from payrun.models import Base
from payrun.providers.console_stub import ConsoleDeliveryProvider
from payrun.services.dispatcher import PayDispatcher

# Friday, last day of the month, and an even day number: everyone is due pay
ALL_PAYABLE_DATE = date(2025, 10, 31)
# Friday with an odd day number: hourly only
HOURLY_ONLY_FRIDAY = date(2026, 10, 23)
# Friday with an even day number: hourly and commissioned
COMMISSION_FRIDAY = date(2026, 10, 30)
# Saturday, last day of the month: salaried only
SALARIED_ONLY_DATE = date(2026, 10, 31)
# Monday mid-month: nobody
NO_PAY_DATE = date(2026, 10, 19)

MAILED = MailedHome(
    address_line1="123 Street",
    address_line2="Apt 4",
    city="Cape Town",
    state="WC",
    zip_code="8001",
)
HELD = HeldAtPaymasterOffice(office_number="101")
DEPOSIT = DirectDeposit(
    bank_name="Bank of SA",
    account_number="123456789",
    routing_number="987654321",
)


@pytest.fixture
def employees() -> list[Employee]:
    """The six fixture employees with fixed dispositions."""
    return [
        Employee(1, SalariedEmployee(Decimal("50000")), MAILED),
        Employee(2, CommissionedEmployee(Decimal("25000"), Decimal("0.10")), HELD),
        Employee(3, HourlyEmployee(Decimal("150")), DEPOSIT),
        Employee(4, HourlyEmployee(Decimal("120")), MAILED),
        Employee(5, HourlyEmployee(Decimal("180")), HELD),
        Employee(6, HourlyEmployee(Decimal("110")), DEPOSIT),
    ]


@pytest.fixture
def payroll_entries() -> list[PayrollEntry]:
    return [
        PayrollEntry(3, Hours(46)),
        PayrollEntry(2, SalesReceipts(Decimal("10000"))),
        PayrollEntry(4, Hours(39)),
        PayrollEntry(6, Hours(40)),
        PayrollEntry(5, Hours(50)),
    ]


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def provider(output: io.StringIO) -> ConsoleDeliveryProvider:
    return ConsoleDeliveryProvider(stream=output)


@pytest.fixture
def dispatcher(provider: ConsoleDeliveryProvider) -> PayDispatcher:
    return PayDispatcher(provider)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """In-memory SQLite session with the schema created."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()
