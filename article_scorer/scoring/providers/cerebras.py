"""Cerebras-compatible scoring client.

REST client for the Cerebras inference API (https://inference-docs.cerebras.ai/).
Discovered models are named from the curated catalog labels where known,
otherwise as ``"{id} ({owned_by})"``.
"""

import logging
from typing import Any

from article_scorer.scoring.catalog import (
    CEREBRAS_MODEL_NAMES,
    CEREBRAS_PRIORITY,
    fallback_models,
    sort_by_priority,
)
from article_scorer.scoring.config import ScoringConfig
from article_scorer.scoring.errors import ScoringError
from article_scorer.scoring.http_client import HTTPClientError
from article_scorer.scoring.providers.chat_completions import (
    fetch_model_entries,
    score_with_chat_completion,
)
from article_scorer.scoring.result import Ok, Result
from article_scorer.scoring.schemas import ModelInfo, ProviderType, ScoringResult

logger = logging.getLogger(__name__)


def format_model_name(model_id: str, owned_by: str | None) -> str:
    """Readable label for a Cerebras model id."""
    if model_id in CEREBRAS_MODEL_NAMES:
        return CEREBRAS_MODEL_NAMES[model_id]
    return f"{model_id} ({owned_by or 'unknown'})"


def _to_model_info(entry: dict[str, Any]) -> ModelInfo:
    return ModelInfo(
        id=entry["id"],
        name=format_model_name(entry["id"], entry.get("owned_by")),
        provider=ProviderType.CEREBRAS,
    )


class CerebrasClient:
    """Scoring client for the Cerebras chat-completions API.

    Args:
        config: Scoring configuration. Defaults to ScoringConfig().
    """

    provider = ProviderType.CEREBRAS

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or ScoringConfig()

    async def list_models(self, api_key: str) -> Ok[list[ModelInfo]]:
        """List models via ``GET /models``, falling back to the static catalog."""
        try:
            entries = await fetch_model_entries(
                self._config.cerebras_api_base,
                api_key,
                timeout=self._config.request_timeout,
            )
        except (HTTPClientError, ValueError) as e:
            logger.warning("Cerebras: model listing failed, using static list: %s", e)
            return Ok(fallback_models(self.provider))

        if not entries:
            logger.warning("Cerebras: empty model list, using static list")
            return Ok(fallback_models(self.provider))

        models = [_to_model_info(entry) for entry in entries]
        return Ok(sort_by_priority(models, CEREBRAS_PRIORITY))

    async def score_article(
        self,
        api_key: str,
        model_id: str,
        article_text: str,
    ) -> Result[ScoringResult, ScoringError]:
        """Score an article via ``POST /chat/completions``."""
        logger.info("Cerebras: scoring %d chars with %s", len(article_text), model_id)
        return await score_with_chat_completion(
            self._config.cerebras_api_base,
            api_key,
            model_id,
            article_text,
            temperature=self._config.temperature,
            timeout=self._config.request_timeout,
            backend="Cerebras",
        )
