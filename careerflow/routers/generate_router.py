"""Generate router — /api endpoints for the CareerFlow client features."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from careerflow.agents.dispatcher import handle
from careerflow.config import get_settings
from careerflow.models.request_models import GenerationRequest
from careerflow.models.response_models import (
    ErrorResponse,
    GenerateResponse,
    HealthResponse,
    KindInfo,
    LogEntry,
)
from careerflow.prompts.registry import kind_catalogue

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])

MAX_LOG_ENTRIES = 200


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate(req: GenerationRequest):
    """Fill the prompt template for ``type``, call the model, return the text."""
    logger.info("Incoming generate request: type=%s", req.kind)
    result = await handle(req, settings=get_settings())
    if isinstance(result, ErrorResponse):
        return JSONResponse(status_code=500, content=result.model_dump())
    return result


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple liveness probe."""
    return HealthResponse()


@router.get("/kinds", response_model=list[KindInfo])
async def list_kinds() -> list[KindInfo]:
    """List every supported ``type`` with its context contract."""
    return kind_catalogue()


@router.get("/logs", response_model=list[LogEntry])
async def get_logs(limit: int = Query(20, ge=1, le=MAX_LOG_ENTRIES)) -> list[LogEntry]:
    """Return the most recent event-log entries (newest first)."""
    settings = get_settings()
    log_file = Path(settings.log_dir) / "events.jsonl"

    if not log_file.exists():
        return []

    with open(log_file, "r", encoding="utf-8") as f:
        lines = f.readlines()

    entries: list[LogEntry] = []
    for line in reversed(lines[-limit:]):
        try:
            entries.append(LogEntry(**json.loads(line)))
        except (json.JSONDecodeError, TypeError, ValueError):
            logger.debug("Skipping malformed log line: %s", line[:80])
    return entries
