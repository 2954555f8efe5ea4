"""Completion Client — one chat-completion call per request.

Uses LangChain's ChatOpenAI against Groq's OpenAI-compatible endpoint.
Model, temperature and token budget are fixed; retries are disabled so a
failed call surfaces immediately.
"""

from __future__ import annotations

import logging

import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from careerflow.config import Settings, get_settings
from careerflow.errors import ConfigurationError, ProviderError
from careerflow.prompts.registry import PromptPair

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7
MAX_TOKENS = 1024


def ensure_configured(settings: Settings) -> None:
    """Raise ``ConfigurationError`` when the provider credential is missing."""
    if not settings.provider_configured:
        raise ConfigurationError(
            "Groq API key (GROQ_API_KEY) is not configured. "
            "Set it in .env or the environment."
        )


class CompletionClient:
    """Stateless wrapper around a single provider call."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        ensure_configured(settings)
        self._model = settings.groq_model
        self._llm = ChatOpenAI(
            model=settings.groq_model,
            api_key=settings.groq_api_key,
            base_url=settings.groq_base_url,
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
            max_retries=0,
        )

    # ── Public API ────────────────────────────────────────────────────────

    async def complete(self, prompts: PromptPair) -> str:
        """Send the system/user pair and return the first choice's text.

        Returns an empty string when the provider sends back no choices or
        no content.

        Raises
        ------
        ProviderError  on any network, auth, quota or response failure
        """
        messages = [
            SystemMessage(content=prompts.system_prompt),
            HumanMessage(content=prompts.user_prompt),
        ]

        try:
            result = await self._llm.agenerate([messages])
        except openai.OpenAIError as exc:
            logger.error("Provider call failed (model=%s): %s", self._model, exc)
            raise ProviderError(str(exc)) from exc

        generations = result.generations[0] if result.generations else []
        if not generations:
            logger.warning("Provider returned no choices (model=%s)", self._model)
            return ""

        content = generations[0].message.content
        if isinstance(content, list):
            # Content blocks — keep the text parts only
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        return content or ""
