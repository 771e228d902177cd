"""Pytest fixtures for scoring tests."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from article_scorer.scoring.config import ScoringConfig
from article_scorer.scoring.result import Ok
from article_scorer.scoring.schemas import ModelInfo, ProviderType, ScoringResult

OPENROUTER_BASE = "https://openrouter.test/api/v1"
CEREBRAS_BASE = "https://cerebras.test/v1"


@pytest.fixture
def scoring_config() -> ScoringConfig:
    """Test config pointing the REST backends at fake hosts."""
    return ScoringConfig(
        openrouter_api_base=OPENROUTER_BASE,
        cerebras_api_base=CEREBRAS_BASE,
        temperature=0.3,
        request_timeout=None,
    )


@pytest.fixture
def scoring_result(valid_result_payload: dict[str, Any]) -> ScoringResult:
    """Validated result matching the valid payload."""
    return ScoringResult.model_validate(valid_result_payload)


def _chat_completion(content: str | None) -> dict[str, Any]:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "test-model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def chat_completion():
    """Factory building a chat-completions envelope around message content."""
    return _chat_completion


def make_provider_client(provider: ProviderType, models: list[str] | None = None) -> MagicMock:
    """A ProviderClient double with async list_models/score_article."""
    client = MagicMock()
    client.provider = provider
    ids = models if models is not None else ["model-a", "model-b"]
    client.list_models = AsyncMock(
        return_value=Ok([ModelInfo(id=i, name=i.upper(), provider=provider) for i in ids])
    )
    client.score_article = AsyncMock()
    return client


@pytest.fixture
def mock_clients() -> dict[ProviderType, MagicMock]:
    """One mock client per provider tag."""
    return {
        ProviderType.OPENROUTER: make_provider_client(
            ProviderType.OPENROUTER, ["openai/gpt-4o", "openai/gpt-4o-mini"]
        ),
        ProviderType.GEMINI: make_provider_client(
            ProviderType.GEMINI, ["models/gemini-2.5-flash"]
        ),
        ProviderType.CEREBRAS: make_provider_client(
            ProviderType.CEREBRAS, ["llama-3.3-70b", "qwen-3-32b"]
        ),
    }
