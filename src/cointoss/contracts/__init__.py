"""
Contract Validation Module

Валидация dict-контрактов cointoss (toss_series, chart_feed) через JSON Schema.
"""

from .validators import (
    ChartFeedValidator,
    ContractValidator,
    SchemaLoader,
    TossSeriesValidator,
    validate_chart_feed,
    validate_toss_series,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TossSeriesValidator",
    "ChartFeedValidator",
    # Functions
    "validate_toss_series",
    "validate_chart_feed",
]
