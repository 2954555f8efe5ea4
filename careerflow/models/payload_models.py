"""Structured payloads for the JSON-shaped generation kinds.

The service itself only returns normalized text. Callers that need the
structured form (quiz player, resume builder, interview grader) parse it
with ``parse_payload``.
"""

from __future__ import annotations

import json
from typing import Any, Union

from pydantic import BaseModel, Field, ValidationError

from careerflow.errors import PayloadParseError
from careerflow.models.request_models import RequestKind


class QuizQuestion(BaseModel):
    """One multiple-choice question from ``quiz_gen``."""

    question: str
    options: list[str] = Field(..., min_length=2)
    correct: int = Field(..., ge=0, description="Index into options")
    explanation: str = ""


class ResumeExperience(BaseModel):
    role: str = ""
    company: str = ""
    date: str = ""
    points: list[str] = Field(default_factory=list)


class ResumeEducation(BaseModel):
    degree: str = ""
    school: str = ""
    date: str = ""
    desc: str = ""


class ResumeDocument(BaseModel):
    """Resume object produced by ``full_resume``.

    Field names follow the wire format consumed by the resume editor.
    """

    fullName: str = ""
    role: str = ""
    email: str = ""
    phone: str = ""
    summary: str = ""
    skills: list[str] = Field(default_factory=list)
    experience: list[ResumeExperience] = Field(default_factory=list)
    education: list[ResumeEducation] = Field(default_factory=list)


class InterviewFeedback(BaseModel):
    """Graded answer produced by ``interview_feedback``."""

    score: int = Field(..., ge=0, le=100)
    feedback: str = ""
    improvement: str = ""
    example: str = ""


Payload = Union[list[QuizQuestion], ResumeDocument, InterviewFeedback]


def parse_payload(kind: Union[str, RequestKind], text: str) -> Payload:
    """Parse normalized output for a JSON-shaped kind.

    Raises
    ------
    PayloadParseError  if the kind has no structured payload, the text is not
                       JSON, or the JSON does not match the payload model.
    """
    kind = RequestKind.parse(kind)
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PayloadParseError(
            f"Model output for '{kind.value}' is not valid JSON: {exc.msg}"
        ) from exc

    try:
        if kind is RequestKind.QUIZ_GEN:
            if not isinstance(data, list):
                raise PayloadParseError("Quiz output must be a JSON array")
            return [QuizQuestion.model_validate(item) for item in data]
        if kind is RequestKind.FULL_RESUME:
            return ResumeDocument.model_validate(data)
        if kind is RequestKind.INTERVIEW_FEEDBACK:
            return InterviewFeedback.model_validate(data)
    except ValidationError as exc:
        raise PayloadParseError(
            f"Model output for '{kind.value}' does not match the expected shape: "
            f"{exc.error_count()} error(s)"
        ) from exc

    raise PayloadParseError(f"'{kind.value}' returns plain text, not a structured payload")
