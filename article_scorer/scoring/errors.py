"""Error kinds produced by the scoring layer.

These are exception classes, but providers hand them back inside ``Err``
rather than raising them. Each kind carries the diagnostics an operator
needs: status code and body for transport failures, raw model text for
unparseable output, validation details for schema violations.
"""

from typing import Any


class ScoringError(Exception):
    """Base class for every scoring-layer failure."""


class TransportError(ScoringError):
    """Network failure or non-success status from a backend."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class EmptyResponseError(ScoringError):
    """Backend replied successfully but without usable text."""

    def __init__(self, message: str = "Backend returned an empty response"):
        super().__init__(message)


class MalformedJsonError(ScoringError):
    """Model output could not be parsed as JSON."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(f"{message}\n\nResponse: {raw_text}")
        self.raw_text = raw_text


class SchemaViolationError(ScoringError):
    """Parsed JSON does not match the ScoringResult shape or ranges."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


# ── Controller preconditions ──────────────────────────────


class MissingApiKeyError(ScoringError):
    """No API key is stored for the active provider."""


class NoModelSelectedError(ScoringError):
    """Scoring was requested before a model was selected."""


class EmptyArticleError(ScoringError):
    """Scoring was requested for blank article text."""


class ScoringInProgressError(ScoringError):
    """A scoring attempt is already dispatching for this session."""
