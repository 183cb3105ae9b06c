"""FastAPI dependencies for dependency injection."""

import threading
from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request

from payrun.calculators.engine import PayrollEngine
from payrun.config import Settings, get_settings
from payrun.data.sources import open_data_source
from payrun.services.dispatcher import PayDispatcher
from payrun.services.pay_run_service import PayRunService

# One pay run at a time across all requests
_run_lock = threading.Lock()


def get_app_settings() -> Settings:
    """Get settings dependency."""
    return get_settings()


AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_pay_run_service(
    request: Request, settings: AppSettings
) -> Generator[PayRunService, None, None]:
    """Build a pay run service over a freshly opened data source."""
    with open_data_source(settings) as source:
        yield PayRunService(
            data_source=source,
            dispatcher=PayDispatcher(request.app.state.delivery_provider),
            engine=PayrollEngine(fail_fast=settings.fail_fast),
            lock=_run_lock,
        )


# Type aliases for cleaner dependency injection
PayRunServiceDep = Annotated[PayRunService, Depends(get_pay_run_service)]
