"""Numeric normalization, clock, transaction counting, and formatting helpers."""

import math
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Transaction


def clamp(value: float, lower: float, upper: float) -> float:
    """Bound ``value`` to ``[lower, upper]``. NaN collapses to ``lower``."""
    if math.isnan(value):
        return lower
    return max(lower, min(upper, value))


def normalize(value: float, minimum: float, maximum: float) -> float:
    """Map ``value`` linearly from ``[minimum, maximum]`` onto 0-100.

    Saturates outside the range rather than extrapolating.
    """
    if maximum <= minimum:
        raise ValueError(f"Invalid normalization range: [{minimum}, {maximum}]")
    return clamp(((value - minimum) / (maximum - minimum)) * 100, 0.0, 100.0)


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upward.
    return math.floor(value + 0.5)


def as_utc(moment: datetime) -> datetime:
    """Attach UTC to naive datetimes; convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def resolve_now(now: datetime | None = None) -> datetime:
    """Single reference timestamp for one evaluation."""
    return as_utc(now) if now is not None else datetime.now(UTC)


def count_since(transactions: Iterable["Transaction"], customer_id: str, since: datetime) -> int:
    """Count a customer's transactions at or after ``since`` (inclusive)."""
    return sum(1 for t in transactions if t.customer_id == customer_id and t.timestamp >= since)


def format_money(amount: float) -> str:
    return f"${amount:,.2f}"


def format_percent(ratio: float, decimals: int = 1) -> str:
    """0.6 -> '60.0%'."""
    return f"{ratio * 100:.{decimals}f}%"
