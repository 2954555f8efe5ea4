"""Response models for the generation API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from careerflow.models.request_models import OutputShape, RequestKind


class GenerateResponse(BaseModel):
    """Successful result of POST /api/generate."""

    model_config = ConfigDict(populate_by_name=True)

    enhanced_text: str = Field(
        ...,
        alias="enhancedText",
        description="Normalized model output (plain text or JSON-ish text)",
    )


class ErrorResponse(BaseModel):
    """Uniform failure envelope, returned with HTTP 500."""

    error: str = Field(..., description="Human-readable failure message")


class HealthResponse(BaseModel):
    """Health-check response."""

    status: str = "ok"
    version: str = "1.0.0"


class KindInfo(BaseModel):
    """One entry of GET /api/kinds."""

    kind: RequestKind
    shape: OutputShape
    required_context: list[str] = Field(default_factory=list)
    optional_context: list[str] = Field(default_factory=list)


class LogEntry(BaseModel):
    """Single entry of the events.jsonl log."""

    timestamp: str = ""
    kind: str = ""
    status: str = ""
    text_length: int = 0
    output_length: int = 0
    error: Optional[str] = None
