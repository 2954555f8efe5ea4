"""Request models for the generation API."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from careerflow.errors import UnknownKindError


class RequestKind(str, Enum):
    """Supported generation kinds — one prompt template each."""

    QUIZ_GEN = "quiz_gen"
    INTERVIEW = "interview"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    FULL_RESUME = "full_resume"
    LINKEDIN_BIO = "linkedin_bio"
    LINKEDIN_POST = "linkedin_post"
    LINKEDIN_MESSAGE = "linkedin_message"
    CAREER_COACH = "career_coach"
    INTERVIEW_FEEDBACK = "interview_feedback"
    INTERVIEW_QUESTION = "interview_question"

    @classmethod
    def parse(cls, value: Union[str, "RequestKind"]) -> "RequestKind":
        """Return the member for ``value`` or raise ``UnknownKindError``."""
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(k.value for k in cls)
            raise UnknownKindError(
                f"Unknown request type '{value}'. Supported types: {valid}"
            ) from None


class OutputShape(str, Enum):
    """What the model is asked to return for a kind."""

    TEXT = "text"
    ARRAY = "array"
    OBJECT = "object"


ContextValue = Union[str, int, float, None]


class GenerationRequest(BaseModel):
    """Body of POST /api/generate."""

    model_config = ConfigDict(populate_by_name=True)

    kind: str = Field(
        ...,
        alias="type",
        description="Generation kind, e.g. 'summary' or 'quiz_gen'",
        examples=["summary"],
    )
    text: str = Field(
        default="",
        description="User-supplied text the template interpolates",
        examples=["Built 3 apps with React and Node."],
    )
    context: Optional[dict[str, ContextValue]] = Field(
        default=None,
        description="Kind-specific fields such as role, difficulty, topic, question",
        examples=[{"role": "backend", "difficulty": "Mid-Level"}],
    )
