"""Template registry — maps each RequestKind to its system/user prompt pair."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from pydantic import BaseModel

from careerflow.errors import ContextValidationError
from careerflow.models.request_models import OutputShape, RequestKind
from careerflow.models.response_models import KindInfo
from careerflow.prompts import templates as t

logger = logging.getLogger(__name__)

UserPromptBuilder = Callable[[str, dict[str, str]], str]


class PromptPair(BaseModel):
    """System and user messages for one completion call."""

    system_prompt: str
    user_prompt: str


def _formatter(template: str) -> UserPromptBuilder:
    def build(text: str, fields: dict[str, str]) -> str:
        return template.format(text=text, **fields)

    return build


def _build_interview_question(text: str, fields: dict[str, str]) -> str:
    previous = fields.get("previousQuestion", "")
    line = t.PREVIOUS_QUESTION_LINE.format(previous_question=previous) if previous else ""
    return t.INTERVIEW_QUESTION_USER_TEMPLATE.format(
        role=fields["role"],
        difficulty=fields["difficulty"],
        topic=fields["topic"],
        previous_question_line=line,
    )


@dataclass(frozen=True)
class PromptTemplate:
    """Everything the service knows about one kind."""

    system_prompt: str
    build_user_prompt: UserPromptBuilder
    shape: OutputShape = OutputShape.TEXT
    required: tuple[str, ...] = ()
    optional: Mapping[str, str] = field(default_factory=dict)


TEMPLATES: dict[RequestKind, PromptTemplate] = {
    RequestKind.QUIZ_GEN: PromptTemplate(
        system_prompt=t.QUIZ_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.QUIZ_USER_TEMPLATE),
        shape=OutputShape.ARRAY,
        required=("topic", "difficulty"),
    ),
    RequestKind.INTERVIEW: PromptTemplate(
        system_prompt=t.INTERVIEW_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.INTERVIEW_USER_TEMPLATE),
        required=("role", "question"),
    ),
    RequestKind.SUMMARY: PromptTemplate(
        system_prompt=t.SUMMARY_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.SUMMARY_USER_TEMPLATE),
    ),
    RequestKind.EXPERIENCE: PromptTemplate(
        system_prompt=t.EXPERIENCE_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.EXPERIENCE_USER_TEMPLATE),
    ),
    RequestKind.FULL_RESUME: PromptTemplate(
        system_prompt=t.FULL_RESUME_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.FULL_RESUME_USER_TEMPLATE),
        shape=OutputShape.OBJECT,
    ),
    RequestKind.LINKEDIN_BIO: PromptTemplate(
        system_prompt=t.LINKEDIN_BIO_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.LINKEDIN_BIO_USER_TEMPLATE),
    ),
    RequestKind.LINKEDIN_POST: PromptTemplate(
        system_prompt=t.LINKEDIN_POST_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.LINKEDIN_POST_USER_TEMPLATE),
    ),
    RequestKind.LINKEDIN_MESSAGE: PromptTemplate(
        system_prompt=t.LINKEDIN_MESSAGE_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.LINKEDIN_MESSAGE_USER_TEMPLATE),
    ),
    RequestKind.CAREER_COACH: PromptTemplate(
        system_prompt=t.CAREER_COACH_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.CAREER_COACH_USER_TEMPLATE),
    ),
    RequestKind.INTERVIEW_FEEDBACK: PromptTemplate(
        system_prompt=t.INTERVIEW_FEEDBACK_SYSTEM_PROMPT,
        build_user_prompt=_formatter(t.INTERVIEW_FEEDBACK_USER_TEMPLATE),
        shape=OutputShape.OBJECT,
        required=("role", "question"),
    ),
    RequestKind.INTERVIEW_QUESTION: PromptTemplate(
        system_prompt=t.INTERVIEW_QUESTION_SYSTEM_PROMPT,
        build_user_prompt=_build_interview_question,
        required=("role", "difficulty"),
        optional={"topic": "General", "previousQuestion": ""},
    ),
}


# ── Public API ────────────────────────────────────────────────────────────────


def get_template(kind: Union[str, RequestKind]) -> PromptTemplate:
    """Return the template for ``kind``; raises ``UnknownKindError``."""
    return TEMPLATES[RequestKind.parse(kind)]


def output_shape(kind: Union[str, RequestKind]) -> OutputShape:
    """Return the output shape the template for ``kind`` asks for."""
    return get_template(kind).shape


def resolve(
    kind: Union[str, RequestKind],
    text: str,
    context: Optional[Mapping[str, Any]] = None,
) -> PromptPair:
    """Build the prompt pair for a request.

    Raises
    ------
    UnknownKindError        if ``kind`` is not a RequestKind value
    ContextValidationError  if a required context field is missing or blank
    """
    kind = RequestKind.parse(kind)
    template = TEMPLATES[kind]
    fields = _collect_fields(kind, template, context or {})

    return PromptPair(
        system_prompt=template.system_prompt,
        user_prompt=template.build_user_prompt(text, fields),
    )


def kind_catalogue() -> list[KindInfo]:
    """Describe every kind: its output shape and context contract."""
    return [
        KindInfo(
            kind=kind,
            shape=template.shape,
            required_context=list(template.required),
            optional_context=list(template.optional),
        )
        for kind, template in TEMPLATES.items()
    ]


# ── Helpers ───────────────────────────────────────────────────────────────────


def _collect_fields(
    kind: RequestKind,
    template: PromptTemplate,
    context: Mapping[str, Any],
) -> dict[str, str]:
    """Stringify the context values the template interpolates."""
    fields: dict[str, str] = {}
    missing: list[str] = []

    for name in template.required:
        value = _as_text(context.get(name))
        if not value:
            missing.append(name)
        else:
            fields[name] = value

    if missing:
        logger.warning("Rejecting %s request — missing context: %s", kind.value, missing)
        raise ContextValidationError(kind.value, missing)

    for name, default in template.optional.items():
        fields[name] = _as_text(context.get(name)) or default

    return fields


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()
