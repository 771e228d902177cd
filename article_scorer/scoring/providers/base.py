"""Capability interface shared by every scoring backend."""

from typing import Protocol

from article_scorer.scoring.errors import ScoringError
from article_scorer.scoring.result import Ok, Result
from article_scorer.scoring.schemas import ModelInfo, ProviderType, ScoringResult


class ProviderClient(Protocol):
    """One backend's model discovery and article scoring.

    ``list_models`` never fails outward: discovery problems are logged and
    replaced by the backend's static fallback list. ``score_article``
    failures are returned as ``Err`` and must reach the user.
    """

    provider: ProviderType

    async def list_models(self, api_key: str) -> Ok[list[ModelInfo]]:
        """Return selectable models, falling back to the static catalog."""
        ...

    async def score_article(
        self,
        api_key: str,
        model_id: str,
        article_text: str,
    ) -> Result[ScoringResult, ScoringError]:
        """Score one article with the given model."""
        ...
