"""Static model catalogs and priority sorting for model discovery.

Each backend has a hand-maintained fallback list that is substituted when
live discovery fails or comes back empty, plus a priority list used to
float preferred models to the top of a discovered list. Both sorts are
stable: models matching no priority entry keep their discovery order and
follow every matched model.
"""

from typing import Callable, Sequence

from article_scorer.scoring.schemas import ModelInfo, ProviderType

# Exact-id priorities for the REST backends
OPENROUTER_PRIORITY: tuple[str, ...] = (
    "openai/gpt-4o",
    "openai/gpt-4o-mini",
    "anthropic/claude-3.5-sonnet",
)
CEREBRAS_PRIORITY: tuple[str, ...] = ("llama-3.3-70b", "qwen-3-32b", "llama3.1-8b")

# Version-series priorities for Gemini, matched as substrings of the model name
GEMINI_PRIORITY: tuple[str, ...] = ("gemini-2.5", "gemini-2.0", "gemini-1.5")

# Curated labels for Cerebras ids; also used to name discovered models
CEREBRAS_MODEL_NAMES: dict[str, str] = {
    "llama-3.3-70b": "Llama 3.3 70B (推奨)",
    "qwen-3-32b": "Qwen 3 32B",
    "llama3.1-8b": "Llama 3.1 8B (高速)",
    "gpt-oss-120b": "GPT OSS 120B",
    "qwen-3-235b-a22b-instruct-2507": "Qwen 3 235B (Preview)",
    "zai-glm-4.6": "Z.AI GLM 4.6 (Preview)",
}

_FALLBACK_MODELS: dict[ProviderType, tuple[tuple[str, str], ...]] = {
    ProviderType.OPENROUTER: (
        ("openai/gpt-4o", "OpenAI: GPT-4o"),
        ("openai/gpt-4o-mini", "OpenAI: GPT-4o-mini"),
        ("anthropic/claude-3.5-sonnet", "Anthropic: Claude 3.5 Sonnet"),
        ("google/gemini-2.0-flash-001", "Google: Gemini 2.0 Flash"),
        ("meta-llama/llama-3.3-70b-instruct", "Meta: Llama 3.3 70B Instruct"),
    ),
    ProviderType.GEMINI: (
        ("models/gemini-2.5-flash", "Gemini 2.5 Flash"),
        ("models/gemini-2.5-pro", "Gemini 2.5 Pro"),
        ("models/gemini-2.0-flash", "Gemini 2.0 Flash"),
        ("models/gemini-1.5-flash", "Gemini 1.5 Flash"),
    ),
    ProviderType.CEREBRAS: tuple(CEREBRAS_MODEL_NAMES.items()),
}


def fallback_models(provider: ProviderType) -> list[ModelInfo]:
    """Return a fresh copy of the static fallback list for a provider."""
    return [
        ModelInfo(id=model_id, name=name, provider=provider)
        for model_id, name in _FALLBACK_MODELS[provider]
    ]


def _stable_sort(
    models: Sequence[ModelInfo],
    priority: Sequence[str],
    matches: Callable[[str, str], bool],
) -> list[ModelInfo]:
    def rank(model: ModelInfo) -> int:
        for index, entry in enumerate(priority):
            if matches(model.id, entry):
                return index
        return len(priority)

    # sorted() is stable, so equal ranks keep discovery order
    return sorted(models, key=rank)


def sort_by_priority(models: Sequence[ModelInfo], priority: Sequence[str]) -> list[ModelInfo]:
    """Sort models whose id exactly equals a priority entry to the front."""
    return _stable_sort(models, priority, lambda model_id, entry: model_id == entry)


def sort_by_prefix_priority(
    models: Sequence[ModelInfo],
    priority: Sequence[str],
) -> list[ModelInfo]:
    """Sort models whose id contains a priority entry (e.g. a version series) to the front."""
    return _stable_sort(models, priority, lambda model_id, entry: entry in model_id)
