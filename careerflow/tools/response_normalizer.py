"""Response Normalizer Tool.

Best-effort cleanup of raw model output before it goes back to the caller:

1. Strip markdown code fences (```json and bare ```), then trim.
2. For kinds that promise a JSON array or object, keep only the span from
   the first opening bracket to the last matching closing bracket, so a
   payload wrapped in prose is still recoverable.

This is a heuristic, not a parser. Malformed JSON passes through untouched
and the caller's own JSON parsing reports it.
"""

from __future__ import annotations

import logging
from typing import Type, Union

from langchain_core.tools import BaseTool
from pydantic import BaseModel, Field

from careerflow.models.request_models import OutputShape, RequestKind
from careerflow.prompts.registry import output_shape

logger = logging.getLogger(__name__)

FENCE_MARKERS: tuple[str, ...] = ("```json", "```")

BRACKETS: dict[OutputShape, tuple[str, str]] = {
    OutputShape.ARRAY: ("[", "]"),
    OutputShape.OBJECT: ("{", "}"),
}


def strip_fences(text: str) -> str:
    """Remove every code-fence marker and surrounding whitespace."""
    for marker in FENCE_MARKERS:
        text = text.replace(marker, "")
    return text.strip()


def extract_bracketed(text: str, opening: str, closing: str) -> str:
    """Slice ``text`` from the first ``opening`` to the last ``closing``.

    Returns ``text`` unchanged when there is no opening bracket, or when no
    closing bracket follows it.
    """
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end < start:
        logger.info("No '%s...%s' span in output — passing text through", opening, closing)
        return text
    return text[start : end + 1]


def normalize(kind: Union[str, RequestKind], raw_text: str) -> str:
    """Clean ``raw_text`` according to the output shape of ``kind``."""
    kind = RequestKind.parse(kind)
    cleaned = strip_fences(raw_text or "")

    brackets = BRACKETS.get(output_shape(kind))
    if brackets is None:
        return cleaned

    return extract_bracketed(cleaned, *brackets)


# ── LangChain tool wrapper ────────────────────────────────────────────────────


class ResponseNormalizerInput(BaseModel):
    """Input schema for the Response Normalizer tool."""

    kind: str = Field(..., description="Generation kind the output belongs to")
    raw_text: str = Field(..., description="Raw text returned by the model")


class ResponseNormalizerTool(BaseTool):
    """Strips code fences and recovers JSON spans from model output."""

    name: str = "response_normalizer"
    description: str = (
        "Cleans raw model output for a generation kind: removes markdown code "
        "fences and, for JSON-shaped kinds, extracts the outermost bracketed span."
    )
    args_schema: Type[BaseModel] = ResponseNormalizerInput

    def _run(self, kind: str, raw_text: str) -> str:
        """Synchronous normalization."""
        return normalize(kind, raw_text)

    async def _arun(self, kind: str, raw_text: str) -> str:
        """Async wrapper — normalization is CPU-only so just delegates."""
        return normalize(kind, raw_text)
