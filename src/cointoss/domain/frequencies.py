"""
RunningFrequencies — кумулятивные частоты стороны

Ленивая, конечная, перезапускаемая последовательность длины total:
элемент i = (количество side среди первых i+1 исходов) / (i+1).

Каждый вызов __iter__ начинает вычисление заново.
"""

from collections.abc import Iterator


class RunningFrequencies:
    """Кумулятивные частоты стороны side в outcomes."""

    def __init__(self, outcomes: tuple[str, ...], side: str):
        self.outcomes = outcomes
        self.side = side

    def __iter__(self) -> Iterator[float]:
        hits = 0
        for position, outcome in enumerate(self.outcomes, start=1):
            if outcome == self.side:
                hits += 1
            yield hits / position

    def __len__(self) -> int:
        return len(self.outcomes)

    def points(self) -> Iterator[tuple[int, float]]:
        """Пары (position, running_frequency), position в 1..total."""
        return enumerate(self, start=1)

    def __repr__(self) -> str:
        return f"RunningFrequencies(side={self.side!r}, length={len(self)})"
