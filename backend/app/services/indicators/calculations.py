"""
Technical Indicator Calculations

Pure Python/NumPy implementations of technical indicators.
NO LLM INVOLVEMENT - All math is deterministic.

Output conventions differ per indicator and callers rely on them:
- sma: warm-up is dropped, len(result) == len(data) - period + 1
- ema: seeded with data[0], len(result) == len(data)
- rsi: starts at closes[period], len(result) == len(closes) - period
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class MACDSeries:
    """MACD line, signal line and histogram, aligned to the close array."""

    macd: np.ndarray
    signal: np.ndarray
    histogram: np.ndarray


@dataclass(frozen=True)
class MovingAverages:
    """SMA bundle. Lengths differ; only the last element of each is comparable."""

    sma20: np.ndarray
    sma50: np.ndarray
    sma200: np.ndarray


def _as_array(data) -> np.ndarray:
    return np.asarray(data, dtype=np.float64)


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(data, period: int) -> np.ndarray:
    """Simple Moving Average. Empty when there are fewer than `period` values."""
    data = _as_array(data)
    if len(data) < period:
        return np.empty(0)

    result = np.empty(len(data) - period + 1)
    for i in range(period - 1, len(data)):
        result[i - period + 1] = np.mean(data[i - period + 1 : i + 1])
    return result


def ema(data, period: int) -> np.ndarray:
    """
    Exponential Moving Average.

    Seeded with the first value (not an SMA of the first `period` values),
    so every input position has an output.
    """
    data = _as_array(data)
    if len(data) == 0:
        return np.empty(0)

    multiplier = 2 / (period + 1)
    result = np.empty(len(data))
    result[0] = data[0]

    for i in range(1, len(data)):
        result[i] = data[i] * multiplier + result[i - 1] * (1 - multiplier)

    return result


def moving_averages(closes) -> MovingAverages:
    """SMA 20/50/200 over the same closes."""
    closes = _as_array(closes)
    return MovingAverages(
        sma20=sma(closes, 20),
        sma50=sma(closes, 50),
        sma200=sma(closes, 200),
    )


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(closes, period: int = 14) -> np.ndarray:
    """
    Relative Strength Index with Wilder smoothing.

    A window with no losses has an infinite RS and reads 100; a window with
    neither gains nor losses reads NaN.
    """
    closes = _as_array(closes)
    if len(closes) <= period:
        return np.empty(0)

    # Price changes
    deltas = np.diff(closes)
    gains = np.where(deltas > 0, deltas, 0.0)
    losses = np.where(deltas < 0, -deltas, 0.0)

    # First average
    avg_gain = np.mean(gains[:period])
    avg_loss = np.mean(losses[:period])

    result = np.empty(len(closes) - period)

    # The first smoothing step reuses gains[period - 1], which is already in the seed
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(period, len(closes)):
            avg_gain = (avg_gain * (period - 1) + gains[i - 1]) / period
            avg_loss = (avg_loss * (period - 1) + losses[i - 1]) / period

            rs = np.float64(avg_gain) / np.float64(avg_loss)
            result[i - period] = 100 - (100 / (1 + rs))

    return result


def macd(
    closes,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDSeries:
    """MACD (Moving Average Convergence Divergence)."""
    closes = _as_array(closes)
    fast_ema = ema(closes, fast_period)
    slow_ema = ema(closes, slow_period)

    macd_line = fast_ema - slow_ema

    # Signal line is EMA of MACD line
    signal_line = ema(macd_line, signal_period)

    return MACDSeries(
        macd=macd_line,
        signal=signal_line,
        histogram=macd_line - signal_line,
    )
