"""Rubric scoring of articles through interchangeable LLM backends.

Three providers (OpenRouter, Gemini, Cerebras) share one contract: list
models with a static fallback, and score an article into a validated
``ScoringResult``. Every boundary call returns ``Ok`` or ``Err``.

Usage:
    from article_scorer.scoring.controller import ScoringController
    from article_scorer.store import get_store

    controller = ScoringController(await get_store())
    outcome = await controller.score(article_text)
"""

from article_scorer.scoring.config import ScoringConfig
from article_scorer.scoring.errors import (
    EmptyResponseError,
    MalformedJsonError,
    SchemaViolationError,
    ScoringError,
    TransportError,
)
from article_scorer.scoring.parsing import parse_scoring_response
from article_scorer.scoring.result import Err, Ok, Result
from article_scorer.scoring.schemas import (
    ModelInfo,
    ProviderType,
    ScoringDetails,
    ScoringReasons,
    ScoringResult,
)

__all__ = [
    "EmptyResponseError",
    "Err",
    "MalformedJsonError",
    "ModelInfo",
    "Ok",
    "ProviderType",
    "Result",
    "SchemaViolationError",
    "ScoringConfig",
    "ScoringDetails",
    "ScoringError",
    "ScoringReasons",
    "ScoringResult",
    "TransportError",
    "parse_scoring_response",
]
