"""Settings of the wallet optimization (fusion) scheduler."""

from __future__ import annotations

from dataclasses import dataclass

MIN_THRESHOLD_ORDER = 0
MAX_THRESHOLD_ORDER = 4
MIN_MIXIN = 0
MAX_MIXIN = 5

MINUTE_MSECS = 1000 * 60
HOUR_MSECS = MINUTE_MSECS * 60
DEFAULT_INTERVAL = 30 * MINUTE_MSECS


@dataclass(frozen=True)
class OptimizationPeriod:
    """A choice of how often optimization runs."""

    label: str
    interval_ms: int


_PERIODS = (
    OptimizationPeriod("30 minutes", 30 * MINUTE_MSECS),
    OptimizationPeriod("1 hour", HOUR_MSECS),
    OptimizationPeriod("1.5 hours", HOUR_MSECS + 30 * MINUTE_MSECS),
    OptimizationPeriod("2 hours", 2 * HOUR_MSECS),
    OptimizationPeriod("2.5 hours", 2 * HOUR_MSECS + 30 * MINUTE_MSECS),
    OptimizationPeriod("3 hours", 3 * HOUR_MSECS),
    OptimizationPeriod("3.5 hours", 3 * HOUR_MSECS + 30 * MINUTE_MSECS),
    OptimizationPeriod("4 hours", 4 * HOUR_MSECS),
    OptimizationPeriod("4.5 hours", 4 * HOUR_MSECS + 30 * MINUTE_MSECS),
    OptimizationPeriod("5 hours", 5 * HOUR_MSECS),
    OptimizationPeriod("5.5 hours", 5 * HOUR_MSECS + 30 * MINUTE_MSECS),
    OptimizationPeriod("6 hours", 6 * HOUR_MSECS),
)


def optimization_periods() -> list[OptimizationPeriod]:
    """The selectable optimization periods, shortest first."""
    return list(_PERIODS)


def normalize_interval(interval: int) -> int:
    """The stored interval if it is one of the periods, else the 30 minute default."""
    if any(period.interval_ms == interval for period in _PERIODS):
        return interval
    return DEFAULT_INTERVAL


def threshold_options(ticker: str) -> list[tuple[str, int]]:
    """Threshold choices as (text, order of magnitude) pairs."""
    return [
        (f"{10 ** order} {ticker.upper()}", order)
        for order in range(MIN_THRESHOLD_ORDER, MAX_THRESHOLD_ORDER + 1)
    ]


def threshold_from_order(order: int, multiplier: int) -> int:
    """Threshold in atomic units for a coin count of ``10 ** order``."""
    return 10 ** order * multiplier


def order_from_threshold(threshold: int, multiplier: int) -> int:
    """Order of magnitude of a threshold in whole coins, kept within the slider range."""
    if multiplier <= 0:
        raise ValueError("currency multiplier must be positive")
    coins = threshold // multiplier
    order = len(str(coins)) - 1 if coins > 0 else MIN_THRESHOLD_ORDER
    return max(MIN_THRESHOLD_ORDER, min(MAX_THRESHOLD_ORDER, order))


def estimate_text(is_open: bool, estimate: int) -> str:
    """Description of how many outputs still wait for optimization."""
    if not is_open:
        return "Wallet is closed"
    if estimate == 0:
        return "Wallet is currently optimized for this target"
    return f"{estimate} outputs below selected target"