"""OpenRouter-compatible scoring client.

Talks to the OpenRouter REST API directly over httpx. Model discovery keeps
every listed model, attaches context length and a price label, and floats
the preferred GPT/Claude models to the top. Discovery problems degrade to
the static catalog; scoring problems are returned as errors.
"""

import logging
from typing import Any

from article_scorer.scoring.catalog import OPENROUTER_PRIORITY, fallback_models, sort_by_priority
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

# OpenRouter attributes requests to the calling app via this header
APP_TITLE_HEADERS = {"X-Title": "article-scorer"}


def format_model_pricing(pricing: dict[str, Any]) -> str | None:
    """Format per-token prompt/completion prices as dollars per 1M tokens.

    Returns None when either price is missing or not numeric.
    """
    try:
        prompt_price = float(pricing["prompt"]) * 1_000_000
        completion_price = float(pricing["completion"]) * 1_000_000
    except (KeyError, TypeError, ValueError):
        return None
    return f"${prompt_price:.2f}/{completion_price:.2f} per 1M tokens"


def _to_model_info(entry: dict[str, Any]) -> ModelInfo:
    name = entry.get("name")
    pricing = entry.get("pricing")
    context_length = entry.get("context_length")
    return ModelInfo(
        id=entry["id"],
        name=name if isinstance(name, str) and name else entry["id"],
        provider=ProviderType.OPENROUTER,
        context_length=context_length if isinstance(context_length, int) else None,
        pricing=format_model_pricing(pricing) if isinstance(pricing, dict) else None,
    )


class OpenRouterClient:
    """Scoring client for OpenRouter-compatible chat-completions APIs.

    Args:
        config: Scoring configuration. Defaults to ScoringConfig().
    """

    provider = ProviderType.OPENROUTER

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or ScoringConfig()

    async def list_models(self, api_key: str) -> Ok[list[ModelInfo]]:
        """List models via ``GET /models``, falling back to the static catalog."""
        try:
            entries = await fetch_model_entries(
                self._config.openrouter_api_base,
                api_key,
                timeout=self._config.request_timeout,
                headers=APP_TITLE_HEADERS,
            )
        except (HTTPClientError, ValueError) as e:
            logger.warning("OpenRouter: model listing failed, using static list: %s", e)
            return Ok(fallback_models(self.provider))

        if not entries:
            logger.warning("OpenRouter: empty model list, using static list")
            return Ok(fallback_models(self.provider))

        models = [_to_model_info(entry) for entry in entries]
        return Ok(sort_by_priority(models, OPENROUTER_PRIORITY))

    async def score_article(
        self,
        api_key: str,
        model_id: str,
        article_text: str,
    ) -> Result[ScoringResult, ScoringError]:
        """Score an article via ``POST /chat/completions``."""
        logger.info("OpenRouter: scoring %d chars with %s", len(article_text), model_id)
        return await score_with_chat_completion(
            self._config.openrouter_api_base,
            api_key,
            model_id,
            article_text,
            temperature=self._config.temperature,
            timeout=self._config.request_timeout,
            headers=APP_TITLE_HEADERS,
            backend="OpenRouter",
        )
