"""Gemini scoring client built on the google-genai SDK.

Listing and generation are delegated to the SDK's async surface
(``client.aio.models``). Only models advertising ``generateContent`` are
offered, newest version series first.
"""

import logging
from typing import Any, Callable

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from article_scorer.scoring.catalog import GEMINI_PRIORITY, fallback_models, sort_by_prefix_priority
from article_scorer.scoring.config import ScoringConfig
from article_scorer.scoring.errors import ScoringError, TransportError
from article_scorer.scoring.parsing import parse_scoring_response
from article_scorer.scoring.prompts import SCORING_PROMPT
from article_scorer.scoring.result import Err, Ok, Result
from article_scorer.scoring.schemas import ModelInfo, ProviderType, ScoringResult

logger = logging.getLogger(__name__)

GENERATE_CONTENT_ACTION = "generateContent"

ClientFactory = Callable[[str], Any]


class GeminiClient:
    """Scoring client for the Gemini API.

    A new SDK client is created per call because the API key is read from
    the settings store per operation.

    Args:
        config: Scoring configuration. Defaults to ScoringConfig().
        client_factory: Builds an SDK client from an API key. Defaults to
            ``genai.Client``.
    """

    provider = ProviderType.GEMINI

    def __init__(
        self,
        config: ScoringConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or ScoringConfig()
        self._client_factory = client_factory or self._default_client

    def _default_client(self, api_key: str) -> genai.Client:
        http_options = None
        if self._config.request_timeout is not None:
            # HttpOptions.timeout is in milliseconds
            http_options = genai_types.HttpOptions(
                timeout=int(self._config.request_timeout * 1000),
            )
        return genai.Client(api_key=api_key, http_options=http_options)

    async def list_models(self, api_key: str) -> Ok[list[ModelInfo]]:
        """List generateContent-capable models, falling back to the static catalog."""
        client = self._client_factory(api_key)
        models: list[ModelInfo] = []

        try:
            pager = await client.aio.models.list()
            async for model in pager:
                actions = model.supported_actions or []
                if GENERATE_CONTENT_ACTION not in actions:
                    continue
                models.append(
                    ModelInfo(
                        id=model.name or "",
                        name=model.display_name or model.name or "",
                        provider=self.provider,
                    )
                )
        except (
            genai_errors.APIError,
            genai_errors.UnknownApiResponseError,
            httpx.HTTPError,
        ) as e:
            logger.warning("Gemini: model listing failed, using static list: %s", e)
            return Ok(fallback_models(self.provider))

        if not models:
            logger.warning("Gemini: empty model list, using static list")
            return Ok(fallback_models(self.provider))

        return Ok(sort_by_prefix_priority(models, GEMINI_PRIORITY))

    async def score_article(
        self,
        api_key: str,
        model_id: str,
        article_text: str,
    ) -> Result[ScoringResult, ScoringError]:
        """Score an article with one ``generate_content`` call."""
        logger.info("Gemini: scoring %d chars with %s", len(article_text), model_id)
        client = self._client_factory(api_key)

        try:
            response = await client.aio.models.generate_content(
                model=model_id,
                contents=article_text,
                config=genai_types.GenerateContentConfig(
                    system_instruction=SCORING_PROMPT,
                    temperature=self._config.temperature,
                ),
            )
        except genai_errors.APIError as e:
            return Err(
                TransportError(
                    f"Gemini API error ({e.code}): {e.message}",
                    status_code=e.code,
                    response_body=str(e.details) if e.details else None,
                )
            )
        except genai_errors.UnknownApiResponseError as e:
            # Non-JSON body, e.g. an HTML page from a proxy
            return Err(
                TransportError(
                    f"Gemini returned an unreadable response: {e}",
                    response_body=str(e),
                )
            )
        except httpx.HTTPError as e:
            return Err(TransportError(f"Gemini API call failed: {e}"))

        return parse_scoring_response(response.text)
