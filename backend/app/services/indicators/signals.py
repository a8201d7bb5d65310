"""
Signal Classification

Turns the latest indicator readings into buy/sell/neutral votes and
reduces each group of votes to one SignalVote.
"""

import numpy as np

from app.schemas.indicators import Signal, SignalVote
from app.services.indicators.calculations import MACDSeries, MovingAverages

RSI_OVERBOUGHT = 70
RSI_OVERSOLD = 30


def tally(votes: list[Signal]) -> SignalVote:
    """Count votes and resolve the majority signal."""
    return SignalVote.from_counts(
        buy=votes.count(Signal.BUY),
        sell=votes.count(Signal.SELL),
        neutral=votes.count(Signal.NEUTRAL),
    )


def compare(first: float, second: float) -> Signal:
    """BUY if first is above second, SELL if below, NEUTRAL otherwise."""
    if first > second:
        return Signal.BUY
    if first < second:
        return Signal.SELL
    return Signal.NEUTRAL


def rsi_vote(value: float) -> Signal:
    """Overbought sells, oversold buys. NaN falls through to NEUTRAL."""
    if value > RSI_OVERBOUGHT:
        return Signal.SELL
    if value < RSI_OVERSOLD:
        return Signal.BUY
    return Signal.NEUTRAL


def macd_vote(macd_value: float, signal_value: float, histogram: float) -> Signal:
    """MACD must be on the same side of its signal line as the histogram."""
    if macd_value > signal_value and histogram > 0:
        return Signal.BUY
    if macd_value < signal_value and histogram < 0:
        return Signal.SELL
    return Signal.NEUTRAL


def classify_oscillators(rsi_series: np.ndarray, macd_series: MACDSeries) -> SignalVote:
    """Two votes: last RSI, last MACD/signal/histogram."""
    votes = [
        rsi_vote(rsi_series[-1]),
        macd_vote(
            macd_series.macd[-1],
            macd_series.signal[-1],
            macd_series.histogram[-1],
        ),
    ]
    return tally(votes)


def classify_moving_averages(ma: MovingAverages) -> SignalVote:
    """Three pairwise votes on the last SMA values: 20/50, 50/200, 20/200."""
    sma20 = ma.sma20[-1]
    sma50 = ma.sma50[-1]
    sma200 = ma.sma200[-1]

    votes = [
        compare(sma20, sma50),
        compare(sma50, sma200),
        compare(sma20, sma200),
    ]
    return tally(votes)


def combine_votes(oscillators: SignalVote, moving_averages: SignalVote) -> SignalVote:
    """Sum both tallies and resolve the summary signal."""
    return SignalVote.from_counts(
        buy=oscillators.buy + moving_averages.buy,
        sell=oscillators.sell + moving_averages.sell,
        neutral=oscillators.neutral + moving_averages.neutral,
    )
