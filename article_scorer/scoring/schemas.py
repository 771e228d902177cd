"""Data models for the article scoring layer.

Defines the canonical ``ScoringResult`` every provider response is validated
into, the ``ModelInfo`` entries returned by model discovery, and the
``ProviderType`` tag that selects a backend.

Range constraints live on the fields themselves, so validating a parsed
response with ``ScoringResult.model_validate`` is the whole schema check.
The sum of the five sub-scores is deliberately not compared with ``total``:
models sometimes return inconsistent totals and those are accepted as-is.
"""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field, StrictStr


class ProviderType(str, Enum):
    """Selectable backend families."""

    OPENROUTER = "openrouter"
    GEMINI = "gemini"
    CEREBRAS = "cerebras"


class ScoringDetails(BaseModel):
    """Five-axis score breakdown.

    Each axis has its own ceiling:
    - humor: 0-50, strength of the humor for the article's genre
    - structure: 0-20, a consistent point of view running through the article
    - format: 0-10, section layout and templates
    - language: 0-10, readability, paragraphs and lists
    - completeness: 0-10, finished vs. room left for expansion
    """

    humor: float = Field(ge=0, le=50, strict=True)
    structure: float = Field(ge=0, le=20, strict=True)
    format: float = Field(ge=0, le=10, strict=True)
    language: float = Field(ge=0, le=10, strict=True)
    completeness: float = Field(ge=0, le=10, strict=True)


class ScoringReasons(BaseModel):
    """One free-text justification per axis in ``ScoringDetails``."""

    humor: StrictStr
    structure: StrictStr
    format: StrictStr
    language: StrictStr
    completeness: StrictStr


class ScoringResult(BaseModel):
    """Validated result of scoring one article.

    ``advice`` is expected when ``total`` is below 60 but its absence is not
    an error.
    """

    category: StrictStr = Field(description="Genre label(s), comma-joined")
    total: float = Field(ge=0, le=100, strict=True, description="Overall score out of 100")
    details: ScoringDetails
    reasons: ScoringReasons
    advice: StrictStr | None = Field(default=None, description="Improvement notes")


class ModelInfo(BaseModel):
    """A selectable model as shown to the user."""

    id: str = Field(description="Backend-specific model identifier")
    name: str = Field(description="Human-readable label")
    provider: ProviderType
    context_length: int | None = None
    pricing: str | None = Field(default=None, description="Formatted price per 1M tokens")


class ScoringAxis(NamedTuple):
    key: str
    label: str
    ceiling: int


SCORING_AXES: tuple[ScoringAxis, ...] = (
    ScoringAxis("humor", "ユーモア", 50),
    ScoringAxis("structure", "構成一貫性", 20),
    ScoringAxis("format", "記事フォーマット", 10),
    ScoringAxis("language", "文章の自然さ", 10),
    ScoringAxis("completeness", "完成度", 10),
)
