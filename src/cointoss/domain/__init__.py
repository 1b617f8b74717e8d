"""
Domain models и операции.

Содержит Coin, TossSeries, сэмплирование, кумулятивные частоты,
feed для графиков и generic capability-операции.
"""

from cointoss.domain.chart import (
    CHART_REFERENCE_LINE,
    CHART_X_LABEL,
    CHART_Y_MAX,
    CHART_Y_MIN,
    ChartFeed,
    plot_feed,
)
from cointoss.domain.coin import (
    DEFAULT_PROBABILITIES,
    DEFAULT_SIDES,
    Coin,
    are_valid_probabilities,
    check_probabilities,
    create_coin,
    normalize_sides,
)
from cointoss.domain.frequencies import RunningFrequencies
from cointoss.domain.protocols import (
    Describable,
    SideCounted,
    Summarizable,
    describe,
    heads_count,
    summarize,
    tails_count,
)
from cointoss.domain.sampler import (
    SamplerConfig,
    resolve_rng,
    sample,
    set_seed,
    validate_count,
)
from cointoss.domain.toss_series import (
    TossSeries,
    TossSummary,
    check_outcomes,
    element_at,
    extend,
    from_binary,
    is_toss_series,
    make_series,
    replace_at,
    running_frequencies,
    toss,
)

__all__ = [
    # Coin
    "DEFAULT_SIDES",
    "DEFAULT_PROBABILITIES",
    "Coin",
    "create_coin",
    "check_probabilities",
    "are_valid_probabilities",
    "normalize_sides",
    # Sampler
    "SamplerConfig",
    "sample",
    "set_seed",
    "resolve_rng",
    "validate_count",
    # TossSeries
    "TossSeries",
    "TossSummary",
    "check_outcomes",
    "make_series",
    "toss",
    "extend",
    "replace_at",
    "element_at",
    "from_binary",
    "is_toss_series",
    "running_frequencies",
    # Frequencies & chart feed
    "RunningFrequencies",
    "ChartFeed",
    "plot_feed",
    "CHART_Y_MIN",
    "CHART_Y_MAX",
    "CHART_REFERENCE_LINE",
    "CHART_X_LABEL",
    # Capabilities
    "Describable",
    "Summarizable",
    "SideCounted",
    "describe",
    "summarize",
    "heads_count",
    "tails_count",
]
