"""Dispatch Handler — the single entry point for a generation request.

Flow:
1. Check the provider credential is configured
2. Resolve the prompt pair for the request kind (validates context)
3. Call the Completion Client once
4. Normalize the raw output for the kind's output shape
5. Wrap as {enhancedText}; any failure becomes {error}
6. Append one entry to the event log
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from careerflow.agents.completion_client import CompletionClient, ensure_configured
from careerflow.config import Settings, get_settings
from careerflow.errors import CareerFlowError
from careerflow.models.request_models import GenerationRequest, RequestKind
from careerflow.models.response_models import ErrorResponse, GenerateResponse
from careerflow.prompts.registry import resolve
from careerflow.tools.response_normalizer import normalize

logger = logging.getLogger(__name__)

NormalizedOutput = Union[GenerateResponse, ErrorResponse]


async def handle(
    request: GenerationRequest,
    *,
    settings: Settings | None = None,
    client: CompletionClient | None = None,
) -> NormalizedOutput:
    """Run one generation request end to end.

    Parameters
    ----------
    request  : kind, text and optional context
    settings : defaults to the cached application settings
    client   : completion client; built from ``settings`` when omitted

    Returns
    -------
    GenerateResponse on success, ErrorResponse on any failure. Never raises.
    """
    settings = settings or get_settings()

    try:
        # ── 1. Configuration ──────────────────────────────────────────────
        ensure_configured(settings)

        # ── 2. Template ───────────────────────────────────────────────────
        kind = RequestKind.parse(request.kind)
        prompts = resolve(kind, request.text, request.context)

        # ── 3. Provider call ──────────────────────────────────────────────
        completion_client = client or CompletionClient(settings)
        raw_text = await completion_client.complete(prompts)

        # ── 4. Normalization ──────────────────────────────────────────────
        result: NormalizedOutput = GenerateResponse(enhanced_text=normalize(kind, raw_text))
        logger.info("Generated %s (%d chars)", kind.value, len(result.enhanced_text))
    except CareerFlowError as exc:
        logger.error("Generation failed for type=%r: %s", request.kind, exc)
        result = ErrorResponse(error=str(exc))
    except Exception as exc:
        logger.exception("Unexpected error while generating type=%r", request.kind)
        result = ErrorResponse(error=str(exc) or exc.__class__.__name__)

    if settings.event_log_enabled:
        _log_event(settings, request, result)
    return result


# ── Logging helper ────────────────────────────────────────────────────────────

def _log_event(settings: Settings, request: GenerationRequest, result: NormalizedOutput) -> None:
    """Append a JSON line describing the outcome; user and model text are not stored."""
    ok = isinstance(result, GenerateResponse)
    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "kind": request.kind,
        "status": "ok" if ok else "error",
        "text_length": len(request.text),
        "output_length": len(result.enhanced_text) if ok else 0,
        "error": None if ok else result.error,
    }

    log_file = Path(settings.log_dir) / "events.jsonl"
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")
    except OSError as exc:
        logger.warning("Could not write event log %s: %s", log_file, exc)
