"""Orchestration of model discovery and scoring across providers.

The controller reads a fresh settings snapshot for every operation, picks
the provider client matching the stored provider tag, and forwards the
call. It never inspects exceptions from clients; it branches on the
``Ok``/``Err`` values they return.

Scoring attempts follow a small state machine:

    IDLE -> DISPATCHING -> SUCCEEDED | FAILED -> IDLE

and a call arriving while DISPATCHING is rejected without reaching the
backend.
"""

import enum
import logging
from dataclasses import dataclass

from article_scorer.scoring.config import ScoringConfig
from article_scorer.scoring.errors import (
    EmptyArticleError,
    MissingApiKeyError,
    NoModelSelectedError,
    ScoringError,
    ScoringInProgressError,
)
from article_scorer.scoring.providers import ProviderClient, build_provider_clients
from article_scorer.scoring.result import Err, Ok, Result
from article_scorer.scoring.schemas import ModelInfo, ProviderType, ScoringResult
from article_scorer.store.settings_store import SettingsStore, SettingsStoreError
from article_scorer.store.user_settings import (
    UserSettings,
    get_current_api_key,
    load_settings,
    save_settings,
)

logger = logging.getLogger(__name__)


class ScoringState(enum.Enum):
    """Phases of a single scoring attempt."""

    IDLE = "idle"
    DISPATCHING = "dispatching"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ModelSelection:
    """Models offered for the active provider and the one currently selected."""

    provider: ProviderType
    models: list[ModelInfo]
    selected_model: str | None


class ScoringController:
    """Provider dispatch, selection bookkeeping and the single-flight guard.

    Args:
        store: Settings store read per operation.
        clients: Provider tag to client mapping. Defaults to one client per
            provider built from ``config``.
        config: Scoring configuration used for the default clients.
    """

    def __init__(
        self,
        store: SettingsStore,
        clients: dict[ProviderType, ProviderClient] | None = None,
        config: ScoringConfig | None = None,
    ) -> None:
        self._store = store
        self._clients = clients or build_provider_clients(config)
        self._state = ScoringState.IDLE
        self._last_outcome: Result[ScoringResult, ScoringError] | None = None

    @property
    def state(self) -> ScoringState:
        """Current scoring state."""
        return self._state

    @property
    def is_scoring(self) -> bool:
        return self._state == ScoringState.DISPATCHING

    @property
    def last_outcome(self) -> Result[ScoringResult, ScoringError] | None:
        """Outcome of the most recent completed scoring attempt."""
        return self._last_outcome

    @property
    def last_state(self) -> ScoringState:
        """SUCCEEDED or FAILED for the last completed attempt, IDLE before any."""
        if self._last_outcome is None:
            return ScoringState.IDLE
        return ScoringState.SUCCEEDED if isinstance(self._last_outcome, Ok) else ScoringState.FAILED

    def client_for(self, provider: ProviderType) -> ProviderClient:
        """Return the client registered for a provider tag."""
        return self._clients[provider]

    async def _snapshot(self) -> UserSettings:
        return await load_settings(self._store)

    # ── Model discovery ──────────────────────────────────

    async def load_models(self) -> Result[ModelSelection, ScoringError]:
        """List models for the active provider and reconcile the selection.

        The stored selection is kept when it is still offered; otherwise the
        first model becomes the selection and is written back to the store.
        """
        settings = await self._snapshot()
        api_key = get_current_api_key(settings)
        if not api_key:
            return Err(MissingApiKeyError(f"No API key set for {settings.provider.value}"))

        client = self.client_for(settings.provider)
        models = (await client.list_models(api_key)).value

        selected = settings.selected_model
        if models and selected not in {model.id for model in models}:
            selected = models[0].id
            logger.info(
                "Selected model %r not offered by %s, defaulting to %s",
                settings.selected_model,
                settings.provider.value,
                selected,
            )
            await self._persist_selection(selected)

        return Ok(ModelSelection(provider=settings.provider, models=models, selected_model=selected))

    async def select_model(self, model_id: str) -> Result[None, SettingsStoreError]:
        """Persist the user's model choice."""
        return await save_settings(self._store, selected_model=model_id)

    async def _persist_selection(self, model_id: str) -> None:
        outcome = await save_settings(self._store, selected_model=model_id)
        if isinstance(outcome, Err):
            logger.warning("Could not persist default model %s: %s", model_id, outcome.error)

    # ── Scoring ──────────────────────────────────────────

    async def score(self, article_text: str) -> Result[ScoringResult, ScoringError]:
        """Score an article with the active provider and selected model.

        Returns:
            Ok(ScoringResult), or Err with a precondition error, a provider
            error, or ScoringInProgressError if an attempt is already running.
        """
        if self._state == ScoringState.DISPATCHING:
            return Err(ScoringInProgressError("A scoring request is already in progress"))

        self._state = ScoringState.DISPATCHING
        try:
            outcome = await self._dispatch(article_text)
        finally:
            self._state = ScoringState.IDLE

        self._last_outcome = outcome
        if isinstance(outcome, Err):
            logger.warning("Scoring failed: %s: %s", type(outcome.error).__name__, outcome.error)
        return outcome

    async def _dispatch(self, article_text: str) -> Result[ScoringResult, ScoringError]:
        if not article_text.strip():
            return Err(EmptyArticleError("Article text is empty"))

        settings = await self._snapshot()
        api_key = get_current_api_key(settings)
        if not api_key:
            return Err(MissingApiKeyError(f"No API key set for {settings.provider.value}"))
        if not settings.selected_model:
            return Err(NoModelSelectedError("No model selected"))

        client = self.client_for(settings.provider)
        return await client.score_article(api_key, settings.selected_model, article_text)
