"""Pay run API endpoints."""

from datetime import date

from fastapi import APIRouter, HTTPException, status

from payrun.api.dependencies import PayRunServiceDep
from payrun.api.schemas import ErrorResponse, PayRunRequest, PayRunResponse
from payrun.services.pay_run_service import PayRunInProgressError

router = APIRouter(prefix="/pay-runs", tags=["pay-runs"])


def _pay_date(payload: PayRunRequest) -> date:
    return payload.pay_date or date.today()


@router.post(
    "/preview",
    response_model=PayRunResponse,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def preview_pay_run(
    service: PayRunServiceDep,
    payload: PayRunRequest,
) -> PayRunResponse:
    """Calculate pay for a date without dispatching it."""
    try:
        result = service.preview(_pay_date(payload))
    except PayRunInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return PayRunResponse.from_result(result, dispatched=False)


@router.post(
    "",
    response_model=PayRunResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def run_pay_run(
    service: PayRunServiceDep,
    payload: PayRunRequest,
) -> PayRunResponse:
    """Calculate and dispatch pay for a date."""
    try:
        result = service.run(_pay_date(payload))
    except PayRunInProgressError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return PayRunResponse.from_result(result, dispatched=True)
