"""Wire helpers for OpenAI-style REST backends.

Both the OpenRouter and Cerebras clients speak the same two endpoints:

    GET  {base}/models            -> {"data": [{"id", "owned_by", ...}]}
    POST {base}/chat/completions  -> {"choices": [{"message": {"content"}}]}

authenticated with ``Authorization: Bearer <key>``. These helpers own the
request construction and envelope handling; the clients own naming,
sorting and fallback.
"""

import logging
from typing import Any

from article_scorer.scoring.errors import ScoringError, TransportError
from article_scorer.scoring.http_client import HTTPClient, HTTPClientError
from article_scorer.scoring.parsing import parse_scoring_response
from article_scorer.scoring.prompts import SCORING_PROMPT
from article_scorer.scoring.result import Err, Result
from article_scorer.scoring.schemas import ScoringResult

logger = logging.getLogger(__name__)


def build_messages(article_text: str) -> list[dict[str, str]]:
    """Rubric as the system message, article as the user message."""
    return [
        {"role": "system", "content": SCORING_PROMPT},
        {"role": "user", "content": article_text},
    ]


async def fetch_model_entries(
    api_base: str,
    api_key: str,
    timeout: float | None = None,
    headers: dict[str, str] | None = None,
) -> list[dict[str, Any]]:
    """Fetch the raw ``data`` entries from ``GET {base}/models``.

    Entries that are not objects or lack a non-empty string ``id`` are dropped.

    Raises:
        HTTPClientError: On transport failure or non-2xx status.
        ValueError: If the body is not JSON or ``data`` is not a list.
    """
    async with HTTPClient(timeout=timeout) as client:
        response = await client.get(f"{api_base}/models", headers=headers, api_key=api_key)

    payload = response.json()
    data = payload.get("data") if isinstance(payload, dict) else None
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Unexpected models payload: data is {type(data).__name__}")
    entries = []
    for entry in data:
        if not isinstance(entry, dict):
            continue
        model_id = entry.get("id")
        if not isinstance(model_id, str) or not model_id:
            logger.debug("Skipping model entry without a string id: %r", entry)
            continue
        entries.append(entry)
    return entries


def extract_message_content(payload: Any) -> str | None:
    """Return ``choices[0].message.content`` or None if any level is missing."""
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not choices or not isinstance(choices, list):
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) else None


async def score_with_chat_completion(
    api_base: str,
    api_key: str,
    model_id: str,
    article_text: str,
    temperature: float,
    timeout: float | None = None,
    headers: dict[str, str] | None = None,
    backend: str = "backend",
) -> Result[ScoringResult, ScoringError]:
    """POST one chat completion and run the reply through the response pipeline."""
    body = {
        "model": model_id,
        "messages": build_messages(article_text),
        "temperature": temperature,
    }

    try:
        async with HTTPClient(timeout=timeout) as client:
            response = await client.post(
                f"{api_base}/chat/completions",
                headers=headers,
                json_body=body,
                api_key=api_key,
            )
    except HTTPClientError as e:
        if e.status_code is not None:
            message = f"{backend} API error ({e.status_code}): {e.response_body}"
        else:
            message = f"{backend} API call failed: {e}"
        return Err(TransportError(message, status_code=e.status_code, response_body=e.response_body))

    try:
        payload = response.json()
    except ValueError as e:
        logger.warning("%s returned a non-JSON envelope: %s", backend, e)
        return Err(
            TransportError(
                f"{backend} returned a non-JSON response: {e}",
                status_code=response.status_code,
                response_body=response.text,
            )
        )

    return parse_scoring_response(extract_message_content(payload))
