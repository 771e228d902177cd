"""Wikipedia title existence checks and wiki link templates."""

from article_scorer.wikipedia.checker import check_title, check_title_both
from article_scorer.wikipedia.config import WikipediaConfig
from article_scorer.wikipedia.schemas import (
    TemplateOutput,
    TitleCheckReport,
    WikipediaCheckResult,
    WikipediaLookupError,
)
from article_scorer.wikipedia.templates import generate_templates

__all__ = [
    "TemplateOutput",
    "TitleCheckReport",
    "WikipediaCheckResult",
    "WikipediaConfig",
    "WikipediaLookupError",
    "check_title",
    "check_title_both",
    "generate_templates",
]
