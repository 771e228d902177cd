"""Title existence checks against Japanese and English Wikipedia.

One MediaWiki ``action=query`` request per edition resolves redirects and
reports disambiguation pages. ``check_title_both`` runs the two editions
concurrently; each outcome stands on its own, so one edition failing does
not hide the other's answer.
"""

import asyncio
import logging
from typing import Any

from article_scorer.scoring.http_client import HTTPClient, HTTPClientError
from article_scorer.scoring.result import Err, Ok, Result
from article_scorer.wikipedia.config import WikipediaConfig
from article_scorer.wikipedia.schemas import (
    Language,
    TitleCheckReport,
    WikipediaCheckResult,
    WikipediaLookupError,
)

logger = logging.getLogger(__name__)


def build_query_params(title: str) -> dict[str, str]:
    """Query parameters for a redirect-resolving, disambiguation-aware lookup."""
    return {
        "action": "query",
        "titles": title,
        "redirects": "1",
        "prop": "pageprops",
        "ppprop": "disambiguation",
        "format": "json",
    }


def interpret_query_response(
    payload: Any,
    title: str,
    lang: Language,
) -> Result[WikipediaCheckResult, WikipediaLookupError]:
    """Turn a MediaWiki query response into a check result."""
    query = payload.get("query") if isinstance(payload, dict) else None
    pages = query.get("pages") if isinstance(query, dict) else None
    if not pages or not isinstance(pages, dict):
        return Err(WikipediaLookupError("Invalid API response: no pages", lang=lang))

    page_id, page = next(iter(pages.items()))
    if page_id == "-1" or "missing" in page:
        return Ok(WikipediaCheckResult(exists=False, title=title))

    is_disambiguation = "disambiguation" in (page.get("pageprops") or {})

    if query.get("redirects"):
        return Ok(
            WikipediaCheckResult(
                exists=True,
                is_redirect=True,
                is_disambiguation=is_disambiguation,
                redirect_target=page.get("title"),
                title=title,
            )
        )

    return Ok(
        WikipediaCheckResult(
            exists=True,
            is_disambiguation=is_disambiguation,
            title=page.get("title", title),
        )
    )


async def check_title(
    lang: Language,
    title: str,
    config: WikipediaConfig | None = None,
) -> Result[WikipediaCheckResult, WikipediaLookupError]:
    """Check whether a title exists in one language edition."""
    config = config or WikipediaConfig()

    try:
        async with HTTPClient(timeout=config.request_timeout) as client:
            response = await client.get(
                config.api_url(lang),
                params=build_query_params(title),
                headers={"User-Agent": config.user_agent},
            )
        payload = response.json()
    except HTTPClientError as e:
        logger.warning("Wikipedia (%s) lookup for %r failed: %s", lang, title, e)
        return Err(WikipediaLookupError(f"Wikipedia API error: {e}", lang=lang, status_code=e.status_code))
    except ValueError as e:
        logger.warning("Wikipedia (%s) returned non-JSON for %r: %s", lang, title, e)
        return Err(WikipediaLookupError(f"Wikipedia API returned invalid JSON: {e}", lang=lang))

    return interpret_query_response(payload, title, lang)


async def check_title_both(
    title: str,
    config: WikipediaConfig | None = None,
) -> TitleCheckReport:
    """Check the Japanese and English editions concurrently."""
    ja, en = await asyncio.gather(
        check_title("ja", title, config),
        check_title("en", title, config),
    )
    report = TitleCheckReport(title=title, ja=ja, en=en)
    if report.failed:
        logger.error("Both Wikipedia lookups failed for %r", title)
    return report
