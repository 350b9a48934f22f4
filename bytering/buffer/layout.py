# FILE: bytering/buffer/layout.py
# ------------------------------------------------------------------------------
from dataclasses import dataclass


@dataclass(frozen=True)
class SplitSpan:
    """A transfer of ``first + second`` bytes starting at ``start``.

    ``first`` bytes live in ``[start, start + first)``; the remaining
    ``second`` bytes wrap around to ``[0, second)``.
    """
    start: int
    first: int
    second: int

    @property
    def length(self) -> int:
        return self.first + self.second

    @property
    def wraps(self) -> bool:
        return self.second > 0


def split_span(start: int, length: int, capacity: int) -> SplitSpan:
    bottom = capacity - start
    if length <= bottom:
        return SplitSpan(start, length, 0)
    return SplitSpan(start, bottom, length - bottom)
