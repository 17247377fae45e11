"""
GET /v1/history    -- Recent interactions, most recent first.
DELETE /v1/history -- Forget all of them and remove the stored snapshot.

The history is bounded: once it is full, each new analysis evicts the
oldest entry.
"""

from fastapi import APIRouter, Depends

from reasoning_api.deps import get_orchestrator
from reasoning_api.models.schemas import ClearHistoryResponse, HistoryResponse
from reasoning_api.reasoning.orchestrator import Orchestrator

router = APIRouter()


@router.get(
    "/v1/history",
    response_model=HistoryResponse,
    summary="List recent interactions",
    tags=["History"],
)
def get_history(orchestrator: Orchestrator = Depends(get_orchestrator)) -> HistoryResponse:
    items = orchestrator.history
    return HistoryResponse(items=items, count=len(items), capacity=orchestrator.capacity)


@router.delete(
    "/v1/history",
    response_model=ClearHistoryResponse,
    summary="Clear interaction history",
    description="Empties the history and deletes the persisted snapshot. This cannot be undone.",
    tags=["History"],
)
def clear_history(orchestrator: Orchestrator = Depends(get_orchestrator)) -> ClearHistoryResponse:
    removed = orchestrator.clear_history()
    return ClearHistoryResponse(removed=removed)
