"""Pay run services."""

from payrun.services.dispatcher import PayDispatcher
from payrun.services.pay_run_service import PayRunInProgressError, PayRunService

__all__ = [
    "PayDispatcher",
    "PayRunInProgressError",
    "PayRunService",
]
