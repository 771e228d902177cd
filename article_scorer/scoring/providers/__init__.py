"""Provider clients and the provider-tag registry.

Each backend is a standalone class satisfying ``ProviderClient``; the
controller picks one by the ``ProviderType`` stored in user settings.
"""

from article_scorer.scoring.config import ScoringConfig
from article_scorer.scoring.providers.base import ProviderClient
from article_scorer.scoring.providers.cerebras import CerebrasClient
from article_scorer.scoring.providers.gemini import GeminiClient
from article_scorer.scoring.providers.openrouter import OpenRouterClient
from article_scorer.scoring.schemas import ProviderType


def build_provider_clients(config: ScoringConfig | None = None) -> dict[ProviderType, ProviderClient]:
    """Create one client per provider tag, sharing a scoring config."""
    config = config or ScoringConfig()
    return {
        ProviderType.OPENROUTER: OpenRouterClient(config),
        ProviderType.GEMINI: GeminiClient(config),
        ProviderType.CEREBRAS: CerebrasClient(config),
    }


__all__ = [
    "CerebrasClient",
    "GeminiClient",
    "OpenRouterClient",
    "ProviderClient",
    "build_provider_clients",
]
