"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных (dump моделей)
- Детекция нарушений required полей и типов
- Детекция нарушений согласованности счётчиков
- Round-trip dict → Pydantic модель
"""

import random

import pytest
from jsonschema import ValidationError

from cointoss.contracts import (
    ChartFeedValidator,
    SchemaLoader,
    TossSeriesValidator,
    validate_chart_feed,
    validate_toss_series,
)
from cointoss.domain import TossSeries, create_coin, plot_feed, toss


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def series() -> TossSeries:
    coin = create_coin(["heads", "tails"], [0.6, 0.4])
    return toss(coin, 12, rng=random.Random(11))


@pytest.fixture
def valid_toss_series(series: TossSeries) -> dict:
    return series.model_dump(mode="json")


@pytest.fixture
def valid_chart_feed(series: TossSeries) -> dict:
    return plot_feed(series, "heads").to_contract()


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты для SchemaLoader"""

    @pytest.mark.parametrize("schema_name", ["toss_series", "chart_feed"])
    def test_load_schema(self, schema_name: str) -> None:
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["title"] == schema_name

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("toss_series") is loader.load_schema("toss_series")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_schema_dir(self, tmp_path) -> None:
        with pytest.raises(RuntimeError):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# TOSS SERIES CONTRACT TESTS
# =============================================================================


class TestTossSeriesContract:
    """Тесты для toss_series контракта"""

    def test_model_dump_valid(self, valid_toss_series: dict) -> None:
        validate_toss_series(valid_toss_series)
        assert TossSeriesValidator().is_valid(valid_toss_series)

    def test_dump_contains_derived_counts(self, valid_toss_series: dict) -> None:
        assert valid_toss_series["total"] == 12
        assert (
            valid_toss_series["heads_count"] + valid_toss_series["tails_count"] == 12
        )

    def test_round_trip(self, series: TossSeries, valid_toss_series: dict) -> None:
        """dict → TossSeries восстанавливает серию"""
        assert TossSeries.model_validate(valid_toss_series) == series

    @pytest.mark.parametrize("field", ["coin", "outcomes", "total"])
    def test_missing_required_field(self, valid_toss_series: dict, field: str) -> None:
        del valid_toss_series[field]
        with pytest.raises(ValidationError):
            validate_toss_series(valid_toss_series)

    def test_three_sides_invalid(self, valid_toss_series: dict) -> None:
        valid_toss_series["coin"]["sides"] = ["a", "b", "c"]
        assert not TossSeriesValidator().is_valid(valid_toss_series)

    def test_probability_out_of_range(self, valid_toss_series: dict) -> None:
        valid_toss_series["coin"]["probabilities"] = [1.5, -0.5]
        with pytest.raises(ValidationError):
            validate_toss_series(valid_toss_series)

    def test_total_mismatch(self, valid_toss_series: dict) -> None:
        valid_toss_series["total"] = 13
        with pytest.raises(ValidationError, match="len\\(outcomes\\)"):
            validate_toss_series(valid_toss_series)

    def test_counts_mismatch(self, valid_toss_series: dict) -> None:
        valid_toss_series["heads_count"] += 1
        assert not TossSeriesValidator().is_valid(valid_toss_series)

    def test_iter_errors(self, valid_toss_series: dict) -> None:
        valid_toss_series["total"] = "twelve"
        valid_toss_series["outcomes"] = "heads"
        errors = list(TossSeriesValidator().iter_errors(valid_toss_series))
        assert len(errors) == 2


# =============================================================================
# CHART FEED CONTRACT TESTS
# =============================================================================


class TestChartFeedContract:
    """Тесты для chart_feed контракта"""

    def test_feed_valid(self, valid_chart_feed: dict) -> None:
        validate_chart_feed(valid_chart_feed)
        assert ChartFeedValidator().is_valid(valid_chart_feed)

    def test_frequency_out_of_range(self, valid_chart_feed: dict) -> None:
        valid_chart_feed["points"][0] = [1, 1.5]
        with pytest.raises(ValidationError):
            validate_chart_feed(valid_chart_feed)

    def test_position_must_start_at_one(self, valid_chart_feed: dict) -> None:
        valid_chart_feed["points"][0] = [0, 0.5]
        assert not ChartFeedValidator().is_valid(valid_chart_feed)

    def test_y_range_fixed(self, valid_chart_feed: dict) -> None:
        valid_chart_feed["y_max"] = 2.0
        assert not ChartFeedValidator().is_valid(valid_chart_feed)

    def test_extra_field_rejected(self, valid_chart_feed: dict) -> None:
        valid_chart_feed["color"] = "red"
        assert not ChartFeedValidator().is_valid(valid_chart_feed)
