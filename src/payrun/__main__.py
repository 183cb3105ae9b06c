"""Entry point: run today's pay run."""

from __future__ import annotations

import logging
import sys
import time
from datetime import date

from payrun.calculators.engine import PayrollEngine
from payrun.config import get_settings
from payrun.data.sources import open_data_source
from payrun.providers.console_stub import ConsoleDeliveryProvider
from payrun.services.dispatcher import PayDispatcher
from payrun.services.pay_run_service import PayRunService


def main() -> int:
    """Run the pay run for today. Returns 1 if any employee failed."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    started = time.perf_counter()
    pay_date = date.today()
    print(f"Performing pay run for {pay_date}...")

    with open_data_source(settings) as source:
        service = PayRunService(
            data_source=source,
            dispatcher=PayDispatcher(ConsoleDeliveryProvider()),
            engine=PayrollEngine(fail_fast=settings.fail_fast),
        )
        result = service.run(pay_date)

    elapsed_ms = int((time.perf_counter() - started) * 1000)
    print(f"*** Pay run completed in {elapsed_ms} ms***")

    for employee_id, errors in result.errors.items():
        print(f"Employee {employee_id} not paid: {'; '.join(errors)}", file=sys.stderr)

    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
