"""
POST /v1/analyze -- Classify an input, answer it, and de-bias the answer.

This is the core endpoint. The client sends free text; the orchestrator
classifies it, synthesizes a templated response, scans that response for
absolute language and rewrites what it can.

The pipeline is synchronous (including the optional simulated delay), so
the handler is a plain `def` and runs in FastAPI's threadpool.
"""

import time

from fastapi import APIRouter, Depends, HTTPException

from reasoning_api.deps import get_orchestrator
from reasoning_api.errors import EmptyInputError
from reasoning_api.models.schemas import AnalyzeRequest, AnalyzeResponse
from reasoning_api.reasoning.bias_filter import bias_level
from reasoning_api.reasoning.orchestrator import Orchestrator

router = APIRouter()


@router.post(
    "/v1/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze an input",
    description=(
        "Classify the input (complexity, category, context, reasoning type), "
        "synthesize a balanced response, scan it for biased language and "
        "apply softer alternatives. The interaction is added to the history."
    ),
    tags=["Reasoning"],
)
def analyze(
    request: AnalyzeRequest,
    orchestrator: Orchestrator = Depends(get_orchestrator),
) -> AnalyzeResponse:
    start = time.time()

    try:
        result = orchestrator.process(request.input)
    except EmptyInputError as e:
        raise HTTPException(status_code=422, detail=e.message)

    latency_ms = int((time.time() - start) * 1000)

    return AnalyzeResponse(
        **result.model_dump(),
        bias_level=bias_level(result.bias_analysis.bias_score),
        latency_ms=latency_ms,
    )
