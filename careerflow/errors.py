"""Exception hierarchy for the generation service.

Every error raised below the dispatch handler derives from
``CareerFlowError``; the handler converts them into ``{"error": ...}``.
"""

from __future__ import annotations


class CareerFlowError(Exception):
    """Base class for all service errors."""


class ConfigurationError(CareerFlowError):
    """A required setting (e.g. the provider API key) is missing."""


class ProviderError(CareerFlowError):
    """The chat-completion provider call failed.

    The message is the upstream error text, passed through verbatim.
    """


class UnknownKindError(CareerFlowError):
    """The request ``type`` is not one of the supported kinds."""


class ContextValidationError(CareerFlowError):
    """Required ``context`` fields for a kind are missing or blank."""

    def __init__(self, kind: str, missing: list[str]) -> None:
        self.kind = kind
        self.missing = missing
        super().__init__(
            f"Missing context field(s) for '{kind}': {', '.join(missing)}"
        )


class PayloadParseError(CareerFlowError):
    """Normalized model output could not be parsed into the kind's payload."""
