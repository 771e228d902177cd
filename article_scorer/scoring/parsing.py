"""Response-to-result pipeline shared by every provider.

Model output is free-form text that may be bare JSON or JSON wrapped in a
```json fenced block with prose around it. The pipeline extracts the
candidate, parses it, and validates it against ``ScoringResult``:

    text  ->  EmptyResponseError   (nothing to parse)
          ->  MalformedJsonError   (candidate is not JSON)
          ->  SchemaViolationError (JSON is not a valid ScoringResult)
          ->  Ok(ScoringResult)
"""

import json
import logging
import re

from pydantic import ValidationError

from article_scorer.scoring.errors import (
    EmptyResponseError,
    MalformedJsonError,
    ScoringError,
    SchemaViolationError,
)
from article_scorer.scoring.result import Err, Ok, Result
from article_scorer.scoring.schemas import ScoringResult

logger = logging.getLogger(__name__)

JSON_FENCE_PATTERN = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)


def extract_json_candidate(text: str) -> str:
    """Return the interior of the first ```json fence, or the whole text, trimmed."""
    match = JSON_FENCE_PATTERN.search(text)
    candidate = match.group(1) if match else text
    return candidate.strip()


def parse_scoring_response(text: str | None) -> Result[ScoringResult, ScoringError]:
    """Turn raw model output into a validated ScoringResult.

    Args:
        text: Raw text payload extracted from the backend's envelope.

    Returns:
        Ok(ScoringResult) or Err with EmptyResponseError, MalformedJsonError
        or SchemaViolationError.
    """
    if not text:
        return Err(EmptyResponseError())

    candidate = extract_json_candidate(text)
    try:
        data = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.warning("Model output is not valid JSON: %s", e)
        return Err(MalformedJsonError(f"JSON parse error: {e}", raw_text=text))

    try:
        result = ScoringResult.model_validate(data)
    except ValidationError as e:
        logger.warning("Model output failed schema validation: %d errors", e.error_count())
        return Err(
            SchemaViolationError(
                f"Schema validation error: {e}",
                errors=e.errors(include_url=False),
            )
        )

    return Ok(result)
