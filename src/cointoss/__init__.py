"""
cointoss — immutable модель монеты и серии подбрасываний.

Coin — двусторонняя монета с вероятностями сторон.
TossSeries — неизменяемая запись одного прогона сэмплирования + производные счётчики.
"""

from cointoss.domain import (
    Coin,
    RunningFrequencies,
    SamplerConfig,
    TossSeries,
    TossSummary,
    create_coin,
    describe,
    element_at,
    extend,
    from_binary,
    heads_count,
    is_toss_series,
    make_series,
    plot_feed,
    replace_at,
    running_frequencies,
    sample,
    set_seed,
    summarize,
    tails_count,
    toss,
)
from cointoss.errors import (
    CoinTossError,
    IndexOutOfBoundsError,
    InvalidCountError,
    InvalidProbabilityError,
    InvalidSideError,
    InvalidSidesError,
    InvalidValueError,
    UnsupportedTypeError,
)

__all__ = [
    # Models
    "Coin",
    "TossSeries",
    "TossSummary",
    "RunningFrequencies",
    "SamplerConfig",
    # Operations
    "create_coin",
    "sample",
    "set_seed",
    "toss",
    "make_series",
    "extend",
    "replace_at",
    "element_at",
    "from_binary",
    "is_toss_series",
    "running_frequencies",
    "plot_feed",
    # Generic operations
    "describe",
    "summarize",
    "heads_count",
    "tails_count",
    # Errors
    "CoinTossError",
    "InvalidSidesError",
    "InvalidProbabilityError",
    "InvalidCountError",
    "InvalidSideError",
    "InvalidValueError",
    "IndexOutOfBoundsError",
    "UnsupportedTypeError",
]
