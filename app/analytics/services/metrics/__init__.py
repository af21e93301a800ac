"""Metric aggregation over the play-event store.

- base: ratio and percentage formulas, concurrent fan-out helper
- aggregator: read-only count and average queries per interval
"""

from app.analytics.services.metrics.aggregator import MetricAggregator
from app.analytics.services.metrics.base import (
    format_percentage,
    format_ratio,
    gather_metrics,
    round_metric,
    safe_ratio,
)

__all__ = [
    # Formulas
    "safe_ratio",
    "round_metric",
    "format_ratio",
    "format_percentage",
    "gather_metrics",
    # Queries
    "MetricAggregator",
]
