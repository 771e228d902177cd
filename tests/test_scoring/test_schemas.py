"""Tests for scoring result schema validation."""

import copy
from typing import Any

import pytest
from pydantic import ValidationError

from article_scorer.scoring.schemas import (
    SCORING_AXES,
    ModelInfo,
    ProviderType,
    ScoringDetails,
    ScoringResult,
)


class TestScoringResultValidation:
    """Tests for ScoringResult ranges and required fields."""

    def test_valid_payload(self, valid_result_payload: dict[str, Any]) -> None:
        result = ScoringResult.model_validate(valid_result_payload)

        assert result.category == "おバカ系,脱力系"
        assert result.total == 42
        assert result.details.humor == 20
        assert result.reasons.completeness == "加筆の余地が大きい"
        assert result.advice is not None

    def test_advice_is_optional(self, valid_result_payload: dict[str, Any]) -> None:
        del valid_result_payload["advice"]
        result = ScoringResult.model_validate(valid_result_payload)
        assert result.advice is None

    def test_total_and_details_sum_not_cross_checked(
        self, valid_result_payload: dict[str, Any],
    ) -> None:
        """Inconsistent totals from the model are accepted as-is."""
        valid_result_payload["total"] = 99
        result = ScoringResult.model_validate(valid_result_payload)
        assert result.total == 99

    @pytest.mark.parametrize("total", [0, 100, 59.5])
    def test_total_boundaries_accepted(
        self, valid_result_payload: dict[str, Any], total: float,
    ) -> None:
        valid_result_payload["total"] = total
        assert ScoringResult.model_validate(valid_result_payload).total == total

    @pytest.mark.parametrize("total", [-1, 101, 250])
    def test_total_out_of_range_rejected(
        self, valid_result_payload: dict[str, Any], total: int,
    ) -> None:
        valid_result_payload["total"] = total
        with pytest.raises(ValidationError):
            ScoringResult.model_validate(valid_result_payload)

    @pytest.mark.parametrize("axis", SCORING_AXES, ids=lambda a: a.key)
    def test_each_axis_ceiling_enforced(
        self, valid_result_payload: dict[str, Any], axis,
    ) -> None:
        at_ceiling = copy.deepcopy(valid_result_payload)
        at_ceiling["details"][axis.key] = axis.ceiling
        ScoringResult.model_validate(at_ceiling)

        over = copy.deepcopy(valid_result_payload)
        over["details"][axis.key] = axis.ceiling + 1
        with pytest.raises(ValidationError):
            ScoringResult.model_validate(over)

        negative = copy.deepcopy(valid_result_payload)
        negative["details"][axis.key] = -1
        with pytest.raises(ValidationError):
            ScoringResult.model_validate(negative)

    def test_missing_details_and_reasons_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ScoringResult.model_validate({"category": "x", "total": 50})

        missing = {error["loc"][0] for error in exc_info.value.errors()}
        assert missing == {"details", "reasons"}

    def test_missing_reason_rejected(self, valid_result_payload: dict[str, Any]) -> None:
        del valid_result_payload["reasons"]["humor"]
        with pytest.raises(ValidationError):
            ScoringResult.model_validate(valid_result_payload)

    def test_numeric_string_rejected(self, valid_result_payload: dict[str, Any]) -> None:
        valid_result_payload["total"] = "42"
        with pytest.raises(ValidationError):
            ScoringResult.model_validate(valid_result_payload)

    def test_boolean_score_rejected(self, valid_result_payload: dict[str, Any]) -> None:
        valid_result_payload["details"]["format"] = True
        with pytest.raises(ValidationError):
            ScoringResult.model_validate(valid_result_payload)

    def test_non_string_category_rejected(self, valid_result_payload: dict[str, Any]) -> None:
        valid_result_payload["category"] = ["おバカ系", "脱力系"]
        with pytest.raises(ValidationError):
            ScoringResult.model_validate(valid_result_payload)

    def test_extra_keys_ignored(self, valid_result_payload: dict[str, Any]) -> None:
        valid_result_payload["confidence"] = "high"
        result = ScoringResult.model_validate(valid_result_payload)
        assert not hasattr(result, "confidence")


class TestAxes:
    """Tests for the axis table used by renderers."""

    def test_axis_ceilings_match_schema(self) -> None:
        for axis in SCORING_AXES:
            field = ScoringDetails.model_fields[axis.key]
            ceilings = [m.le for m in field.metadata if hasattr(m, "le")]
            assert ceilings == [axis.ceiling]

    def test_ceilings_sum_to_100(self) -> None:
        assert sum(axis.ceiling for axis in SCORING_AXES) == 100


class TestModelInfo:
    """Tests for ModelInfo."""

    def test_optional_fields_default_none(self) -> None:
        info = ModelInfo(id="llama-3.3-70b", name="Llama", provider=ProviderType.CEREBRAS)
        assert info.context_length is None
        assert info.pricing is None

    def test_provider_accepts_tag_value(self) -> None:
        info = ModelInfo(id="x", name="x", provider="gemini")
        assert info.provider is ProviderType.GEMINI
