"""Reproductive protocol routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from agrotempo.dependencies import get_reproduction_service
from agrotempo.schemas.reproduction import ReproductionApplyRequest, ReproductionApplyResponse
from agrotempo.services.reproduction_service import ReproductionService, gestation_policy, summarize_outcome

router = APIRouter(prefix="/reproduction", tags=["reproduction"])


def _map_error(exc: Exception) -> HTTPException:
	if isinstance(exc, ValueError):
		return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
	return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="reproduction engine failure")


@router.post("/apply", response_model=ReproductionApplyResponse)
async def apply_changes(
	payload: ReproductionApplyRequest,
	service: ReproductionService = Depends(get_reproduction_service),
) -> ReproductionApplyResponse:
	policy = gestation_policy(payload.policy)
	try:
		event = service.replay(payload.event, payload.changes, policy)
	except Exception as exc:
		raise _map_error(exc) from exc
	return ReproductionApplyResponse(event=event, policy=policy, outcome=summarize_outcome(event))
