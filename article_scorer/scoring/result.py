"""Tagged success/failure values returned across provider boundaries.

Providers and the controller return ``Ok`` or ``Err`` instead of raising, so
callers decide between fallback and propagation by inspecting the value:

    outcome = await client.score_article(api_key, model_id, text)
    if isinstance(outcome, Err):
        show_error(outcome.error)
    else:
        show_result(outcome.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the error that caused it."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
