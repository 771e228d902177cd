"""Data models for Wikipedia title lookups and generated templates."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from article_scorer.scoring.result import Err, Ok, Result

Language = Literal["ja", "en"]


class WikipediaLookupError(Exception):
    """A lookup against one language edition failed."""

    def __init__(self, message: str, lang: str, status_code: int | None = None):
        super().__init__(message)
        self.lang = lang
        self.status_code = status_code


class WikipediaCheckResult(BaseModel):
    """Existence of a title in one language edition."""

    exists: bool
    is_redirect: bool = False
    is_disambiguation: bool = False
    redirect_target: str | None = Field(default=None, description="Resolved title of a redirect")
    title: str

    @property
    def resolved_title(self) -> str:
        return self.redirect_target or self.title


class TemplateOutput(BaseModel):
    """A wiki template line the user can paste into an article."""

    name: str
    template: str
    description: str


@dataclass(frozen=True)
class TitleCheckReport:
    """Independent outcomes of the Japanese and English lookups."""

    title: str
    ja: Result[WikipediaCheckResult, WikipediaLookupError]
    en: Result[WikipediaCheckResult, WikipediaLookupError]

    @property
    def failed(self) -> bool:
        """True only when both editions failed."""
        return isinstance(self.ja, Err) and isinstance(self.en, Err)

    def result_or_missing(self, lang: Language) -> WikipediaCheckResult:
        """The lookup result, treating a failed lookup as a missing page."""
        outcome = self.ja if lang == "ja" else self.en
        if isinstance(outcome, Ok):
            return outcome.value
        return WikipediaCheckResult(exists=False, title=self.title)
