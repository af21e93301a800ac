"""Derived-metric formulas and the concurrent fan-out helper."""

import asyncio
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from app.core.constants import METRIC_DECIMALS

_QUANTUM = Decimal(1).scaleb(-METRIC_DECIMALS)


def safe_ratio(numerator: int | float, denominator: int | float) -> float:
    """Divide, treating an empty denominator as a zero result.

    Args:
        numerator: Value being measured.
        denominator: Base it is measured against.

    Returns:
        numerator / denominator, or 0.0 when denominator is 0.
    """
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _half_up(value: float) -> Decimal:
    # Exact binary value of the float, so 0.125 rounds to 0.13 but 1.005 to 1.00
    return Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP)


def round_metric(value: float) -> float:
    """Round to two decimals, ties away from zero."""
    return float(_half_up(value))


def format_ratio(numerator: int | float, denominator: int | float) -> str:
    """Ratio rendered with two decimals, e.g. ``"0.50"``."""
    return str(_half_up(safe_ratio(numerator, denominator)))


def format_percentage(numerator: int | float, denominator: int | float) -> str:
    """Ratio as a percentage with two decimals, e.g. ``"25.00%"``."""
    return f"{_half_up(safe_ratio(numerator, denominator) * 100)}%"


async def gather_metrics(*calls: Callable[[], Any]) -> list[Any]:
    """Run blocking aggregate calls in worker threads and wait for all of them.

    Results come back in the order the calls were given. The first failure
    is raised to the caller; threads already running are left to finish.
    """
    return list(await asyncio.gather(*(asyncio.to_thread(call) for call in calls)))
