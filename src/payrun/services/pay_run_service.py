"""Pay run service - ties data source, engine and dispatcher together."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

from payrun.calculators.engine import PayrollEngine, PayRunResult
from payrun.data.sources import PayrollDataSource
from payrun.services.dispatcher import PayDispatcher

logger = logging.getLogger(__name__)


class PayRunInProgressError(Exception):
    """Raised when a pay run is started while another one is running."""

    def __init__(self, pay_date: date):
        self.pay_date = pay_date
        super().__init__(f"A pay run is already in progress (requested for {pay_date})")


class PayRunService:
    """Service for executing pay runs.

    Operations:
    - preview: calculate pay for a date without dispatching
    - run: calculate and dispatch pay for a date

    Each call snapshots the data source once, and runs are
    non-reentrant: a second run while one is executing is rejected
    rather than queued.
    """

    def __init__(
        self,
        data_source: PayrollDataSource,
        dispatcher: PayDispatcher,
        engine: PayrollEngine | None = None,
        lock: threading.Lock | None = None,
    ):
        self.data_source = data_source
        self.dispatcher = dispatcher
        self.engine = engine or PayrollEngine()
        # A lock shared between instances serializes their runs
        self._lock = lock or threading.Lock()

    def preview(self, pay_date: date) -> PayRunResult:
        """Calculate pay for the date without sending anything."""
        with self._exclusive(pay_date):
            employees = self.data_source.get_employees()
            entries = self.data_source.get_payroll_entries()
            return self.engine.calculate(pay_date, employees, entries)

    def run(self, pay_date: date) -> PayRunResult:
        """Calculate and dispatch pay for the date."""
        with self._exclusive(pay_date):
            employees = self.data_source.get_employees()
            entries = self.data_source.get_payroll_entries()
            logger.info(
                "Starting pay run for %s over %d employees", pay_date, len(employees)
            )
            return self.engine.run_payroll(
                pay_date, employees, entries, self.dispatcher
            )

    @contextmanager
    def _exclusive(self, pay_date: date) -> Iterator[None]:
        if not self._lock.acquire(blocking=False):
            raise PayRunInProgressError(pay_date)
        try:
            yield
        finally:
            self._lock.release()
