"""
Unit tests for signal classification

Vote rules for RSI, MACD and SMA crossovers, and majority resolution.
"""

import math

import numpy as np
import pytest

from app.schemas.indicators import Signal, SignalVote
from app.services.indicators.calculations import MACDSeries, MovingAverages
from app.services.indicators.signals import (
    classify_moving_averages,
    classify_oscillators,
    combine_votes,
    compare,
    macd_vote,
    rsi_vote,
    tally,
)


def _macd(macd_value, signal_value):
    macd_line = np.array([0.0, macd_value])
    signal_line = np.array([0.0, signal_value])
    return MACDSeries(macd=macd_line, signal=signal_line, histogram=macd_line - signal_line)


def _ma(sma20, sma50, sma200):
    return MovingAverages(
        sma20=np.array([1.0, sma20]),
        sma50=np.array([sma50]),
        sma200=np.array([sma200]),
    )


@pytest.mark.unit
class TestMajority:
    """Test SignalVote.from_counts tie-breaking"""

    @pytest.mark.parametrize(
        "buy,sell,neutral,expected",
        [
            (3, 0, 0, Signal.BUY),
            (2, 1, 1, Signal.BUY),
            (0, 3, 2, Signal.SELL),
            (2, 2, 1, Signal.NEUTRAL),
            (1, 0, 1, Signal.NEUTRAL),
            (0, 1, 1, Signal.NEUTRAL),
            (0, 0, 5, Signal.NEUTRAL),
            (0, 0, 0, Signal.NEUTRAL),
        ],
    )
    def test_strict_majority(self, buy, sell, neutral, expected):
        vote = SignalVote.from_counts(buy, sell, neutral)

        assert vote.signal == expected
        assert vote.total == buy + sell + neutral

    def test_tally_counts_votes(self):
        vote = tally([Signal.BUY, Signal.SELL, Signal.BUY])

        assert (vote.buy, vote.sell, vote.neutral) == (2, 1, 0)
        assert vote.signal == Signal.BUY


@pytest.mark.unit
class TestIndicatorVotes:
    """Test single-indicator vote rules"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (85.0, Signal.SELL),
            (70.5, Signal.SELL),
            (70.0, Signal.NEUTRAL),
            (50.0, Signal.NEUTRAL),
            (30.0, Signal.NEUTRAL),
            (29.9, Signal.BUY),
            (100.0, Signal.SELL),
            (0.0, Signal.BUY),
        ],
    )
    def test_rsi_thresholds(self, value, expected):
        assert rsi_vote(value) == expected

    def test_rsi_nan_is_neutral(self):
        assert rsi_vote(math.nan) == Signal.NEUTRAL

    def test_macd_above_signal(self):
        assert macd_vote(1.0, 0.5, 0.5) == Signal.BUY

    def test_macd_below_signal(self):
        assert macd_vote(-1.0, -0.5, -0.5) == Signal.SELL

    def test_macd_histogram_disagrees(self):
        assert macd_vote(1.0, 0.5, -0.1) == Signal.NEUTRAL
        assert macd_vote(-1.0, -0.5, 0.1) == Signal.NEUTRAL

    def test_macd_on_signal_line(self):
        assert macd_vote(0.3, 0.3, 0.0) == Signal.NEUTRAL

    def test_compare(self):
        assert compare(2.0, 1.0) == Signal.BUY
        assert compare(1.0, 2.0) == Signal.SELL
        assert compare(1.0, 1.0) == Signal.NEUTRAL


@pytest.mark.unit
class TestGroupClassification:
    """Test oscillator and moving-average groups"""

    def test_oscillators_use_last_values(self):
        vote = classify_oscillators(np.array([10.0, 80.0]), _macd(-1.0, -0.5))

        assert (vote.buy, vote.sell, vote.neutral) == (0, 2, 0)
        assert vote.signal == Signal.SELL

    def test_oscillators_split(self):
        vote = classify_oscillators(np.array([20.0]), _macd(-1.0, -0.5))

        assert (vote.buy, vote.sell, vote.neutral) == (1, 1, 0)
        assert vote.signal == Signal.NEUTRAL

    def test_moving_averages_stacked_up(self):
        vote = classify_moving_averages(_ma(110.0, 105.0, 100.0))

        assert (vote.buy, vote.sell, vote.neutral) == (3, 0, 0)
        assert vote.signal == Signal.BUY

    def test_moving_averages_stacked_down(self):
        vote = classify_moving_averages(_ma(90.0, 95.0, 100.0))

        assert (vote.buy, vote.sell, vote.neutral) == (0, 3, 0)
        assert vote.signal == Signal.SELL

    def test_moving_averages_mixed(self):
        # 20 > 50, 50 < 200, 20 == 200
        vote = classify_moving_averages(_ma(100.0, 95.0, 100.0))

        assert (vote.buy, vote.sell, vote.neutral) == (1, 1, 1)
        assert vote.signal == Signal.NEUTRAL

    def test_combine_sums_counts(self):
        oscillators = SignalVote.from_counts(1, 1, 0)
        moving_averages = SignalVote.from_counts(3, 0, 0)

        summary = combine_votes(oscillators, moving_averages)

        assert (summary.buy, summary.sell, summary.neutral) == (4, 1, 0)
        assert summary.signal == Signal.BUY
        assert summary.total == 5
