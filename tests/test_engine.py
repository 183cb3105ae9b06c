"""Unit tests for PayrollEngine."""

from decimal import Decimal

import pytest

from payrun.calculators.engine import CalculationResult, PayrollEngine, PayRunResult
from payrun.calculators.pay_calculator import CannotCalculateWageOnSalesReceiptsError
from payrun.calculators.types import Hours, PayrollEntry, SalesReceipts

from .conftest import (
    ALL_PAYABLE_DATE,
    COMMISSION_FRIDAY,
    HOURLY_ONLY_FRIDAY,
    NO_PAY_DATE,
    SALARIED_ONLY_DATE,
)


def _paid(result: PayRunResult) -> dict[int, Decimal]:
    return {employee.employee_id: gross for employee, gross in result.payments}


class TestPayableEmployees:
    """Test filtering by pay date."""

    def test_everyone_on_all_payable_date(self, employees):
        payable = PayrollEngine.payable_employees(ALL_PAYABLE_DATE, employees)
        assert [e.employee_id for e in payable] == [1, 2, 3, 4, 5, 6]

    def test_hourly_only_friday(self, employees):
        payable = PayrollEngine.payable_employees(HOURLY_ONLY_FRIDAY, employees)
        assert [e.employee_id for e in payable] == [3, 4, 5, 6]

    def test_commission_friday(self, employees):
        payable = PayrollEngine.payable_employees(COMMISSION_FRIDAY, employees)
        assert [e.employee_id for e in payable] == [2, 3, 4, 5, 6]

    def test_month_end_saturday(self, employees):
        payable = PayrollEngine.payable_employees(SALARIED_ONLY_DATE, employees)
        assert [e.employee_id for e in payable] == [1]

    def test_preserves_input_order(self, employees):
        reversed_employees = list(reversed(employees))
        payable = PayrollEngine.payable_employees(HOURLY_ONLY_FRIDAY, reversed_employees)
        assert [e.employee_id for e in payable] == [6, 5, 4, 3]


class TestCalculate:
    """Test calculation without dispatch."""

    def test_all_payable_amounts(self, employees, payroll_entries):
        result = PayrollEngine().calculate(ALL_PAYABLE_DATE, employees, payroll_entries)

        assert _paid(result) == {
            1: Decimal("50000"),
            2: Decimal("26000"),
            3: Decimal("7350"),
            4: Decimal("4680"),
            5: Decimal("9900"),
            6: Decimal("4400"),
        }
        assert result.total_gross == Decimal("102330")
        assert result.skipped == []
        assert result.success is True
        assert result.deliveries == []

    def test_skipped_employees_recorded(self, employees, payroll_entries):
        result = PayrollEngine().calculate(HOURLY_ONLY_FRIDAY, employees, payroll_entries)

        assert result.skipped == [1, 2]
        assert list(_paid(result)) == [3, 4, 5, 6]

    def test_nobody_due(self, employees, payroll_entries):
        result = PayrollEngine().calculate(NO_PAY_DATE, employees, payroll_entries)

        assert result.payments == []
        assert result.total_gross == Decimal("0")
        assert result.skipped == [1, 2, 3, 4, 5, 6]

    def test_accepts_one_shot_iterables(self, employees, payroll_entries):
        result = PayrollEngine().calculate(
            ALL_PAYABLE_DATE, employees, iter(payroll_entries)
        )
        assert _paid(result)[6] == Decimal("4400")


class TestErrorIsolation:
    """A bad payroll entry fails only its employee unless fail_fast is set."""

    @pytest.fixture
    def bad_entries(self):
        return [
            PayrollEntry(3, SalesReceipts(Decimal("500"))),
            PayrollEntry(2, SalesReceipts(Decimal("10000"))),
            PayrollEntry(4, Hours(39)),
        ]

    def test_error_collected(self, employees, bad_entries):
        result = PayrollEngine().calculate(ALL_PAYABLE_DATE, employees, bad_entries)

        assert result.success is False
        assert result.error_count == 1
        assert list(result.errors) == [3]
        assert "Hours" in result.errors[3][0]
        assert 3 not in _paid(result)
        assert _paid(result)[4] == Decimal("4680")

    def test_failed_result_has_no_gross(self, employees, bad_entries):
        result = PayrollEngine().calculate(ALL_PAYABLE_DATE, employees, bad_entries)
        failed = [r for r in result.results if not r.success]

        assert len(failed) == 1
        assert isinstance(failed[0], CalculationResult)
        assert failed[0].gross is None
        assert failed[0].employee_id == 3

    def test_fail_fast_raises(self, employees, bad_entries):
        with pytest.raises(CannotCalculateWageOnSalesReceiptsError):
            PayrollEngine(fail_fast=True).calculate(
                ALL_PAYABLE_DATE, employees, bad_entries
            )

    def test_fail_fast_dispatches_nothing(
        self, employees, bad_entries, dispatcher, provider
    ):
        with pytest.raises(CannotCalculateWageOnSalesReceiptsError):
            PayrollEngine(fail_fast=True).run_payroll(
                ALL_PAYABLE_DATE, employees, bad_entries, dispatcher
            )

        assert provider.delivered == []

    def test_mismatch_on_skipped_employee_is_ignored(self, employees, bad_entries):
        """Employee 3 is hourly; on a month-end Saturday only salaried pay."""
        result = PayrollEngine(fail_fast=True).calculate(
            SALARIED_ONLY_DATE, employees, bad_entries
        )
        assert list(_paid(result)) == [1]


class TestRunPayroll:
    """Test calculate-then-dispatch."""

    def test_dispatches_in_employee_order(
        self, employees, payroll_entries, dispatcher, provider
    ):
        result = PayrollEngine().run_payroll(
            COMMISSION_FRIDAY, employees, payroll_entries, dispatcher
        )

        assert [n.employee_id for n in provider.delivered] == [2, 3, 4, 5, 6]
        assert len(result.deliveries) == 5
        assert all(d.accepted for d in result.deliveries)
        assert result.elapsed_ms >= 0

    def test_failed_employees_not_dispatched(self, employees, dispatcher, provider):
        entries = [PayrollEntry(6, SalesReceipts(Decimal("1")))]

        result = PayrollEngine().run_payroll(
            HOURLY_ONLY_FRIDAY, employees, entries, dispatcher
        )

        assert [n.employee_id for n in provider.delivered] == [3, 4, 5]
        assert list(result.errors) == [6]

    def test_missing_entries_still_dispatch_zero(self, employees, dispatcher, provider):
        PayrollEngine().run_payroll(HOURLY_ONLY_FRIDAY, employees, [], dispatcher)

        assert [n.amount for n in provider.delivered] == [Decimal("0.00")] * 4
