"""
Reasoning Assistant API -- Application entry point.

Run with:
    uvicorn reasoning_api.main:app --reload

Then open http://localhost:8000/docs for the interactive Swagger UI.

This file:
  1. Configures logging from REASONING_LOG_LEVEL
  2. Creates the FastAPI application
  3. Adds CORS middleware (permissive, the form front end may live anywhere)
  4. Mounts the route modules (analyze, history)
  5. Defines the health check endpoint
"""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from reasoning_api.config import load_settings
from reasoning_api.deps import get_orchestrator
from reasoning_api.reasoning.orchestrator import Orchestrator
from reasoning_api.routes import analyze, history

VERSION = "0.1.0"

logging.basicConfig(
    level=load_settings().log_level,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)

# ---------------------------------------------------------------------------
# Create the FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Reasoning Assistant API",
    version=VERSION,
    description=(
        "Heuristic reasoning helper. Classifies free-text input, synthesizes "
        "a balanced explanatory response, and rewrites absolute language "
        "in that response.\n\n"
        "---\n\n"
        "## Endpoints\n\n"
        "| Endpoint | Purpose |\n"
        "|----------|--------|\n"
        "| `POST /v1/analyze` | Classify an input and return a de-biased response |\n"
        "| `GET /v1/history` | List the most recent interactions |\n"
        "| `DELETE /v1/history` | Clear the interaction history |\n\n"
        "All analysis is deterministic keyword matching. There is no model behind it."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(analyze.router)
app.include_router(history.router)


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------

@app.get(
    "/v1/health",
    summary="Health check",
    description="Returns the current status of the API. Use this for uptime monitoring.",
    tags=["System"],
)
def health(orchestrator: Orchestrator = Depends(get_orchestrator)):
    return {
        "status": "healthy",
        "version": VERSION,
        "history_items": len(orchestrator.history),
        "history_capacity": orchestrator.capacity,
    }
