"""API routes."""

from payrun.api.routes.pay_runs import router as pay_runs_router
from payrun.api.routes.health import router as health_router

__all__ = ["pay_runs_router", "health_router"]
