"""Small numeric helpers shared by the engine modules."""

from __future__ import annotations

import math
from typing import Iterable, Optional


def mean(values: Iterable[float]) -> Optional[float]:
    """Arithmetic mean, or ``None`` for an empty input."""
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves towards +inf (``-2.5 -> -2``, ``2.5 -> 3``).

    Display percentages are rounded this way rather than with Python's
    banker's rounding so that e.g. a 92.5% balance shows as 93%.
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def percent(part: float, whole: float) -> float:
    return part / whole * 100
