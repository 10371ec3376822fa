"""Bill Williams oscillator and Relative Vigor Index calculations

All series functions take bars in chronological order and return one value
per bar, with None where there is not enough history yet.
"""

from typing import Callable, Optional, Sequence

from ..data.models import Bar

Series = list[Optional[float]]

AO_FAST_PERIOD = 5
AO_SLOW_PERIOD = 34
AC_SIGNAL_PERIOD = 5


def sma_series(values: Sequence[Optional[float]], period: int) -> Series:
    """
    Simple moving average over a series that may start with None values

    Args:
        values: Input series
        period: Averaging period

    Returns:
        SMA series aligned with the input
    """
    if period <= 0:
        raise ValueError("period must be positive")

    result: Series = []
    for i in range(len(values)):
        window = values[i - period + 1:i + 1] if i + 1 >= period else []
        if len(window) < period or any(v is None for v in window):
            result.append(None)
        else:
            result.append(sum(window) / period)  # type: ignore[arg-type]
    return result


def swma4(values: Sequence[Optional[float]], i: int) -> Optional[float]:
    """Symmetric 1-2-2-1 weighted average ending at index i"""
    if i < 3:
        return None
    window = (values[i], values[i - 1], values[i - 2], values[i - 3])
    if any(v is None for v in window):
        return None
    return (window[0] + 2 * window[1] + 2 * window[2] + window[3]) / 6.0  # type: ignore[operator]


def awesome_oscillator(bars: Sequence[Bar]) -> Series:
    """
    Awesome Oscillator

    AO = SMA(median price, 5) - SMA(median price, 34)
    """
    medians = [bar.median_price for bar in bars]
    fast = sma_series(medians, AO_FAST_PERIOD)
    slow = sma_series(medians, AO_SLOW_PERIOD)
    return [
        f - s if f is not None and s is not None else None
        for f, s in zip(fast, slow)
    ]


def accelerator_oscillator(bars: Sequence[Bar]) -> Series:
    """
    Accelerator/Decelerator Oscillator

    AC = AO - SMA(AO, 5)
    """
    ao = awesome_oscillator(bars)
    ao_sma = sma_series(ao, AC_SIGNAL_PERIOD)
    return [
        a - s if a is not None and s is not None else None
        for a, s in zip(ao, ao_sma)
    ]


def relative_vigor_index(bars: Sequence[Bar], period: int) -> tuple[Series, Series]:
    """
    Relative Vigor Index

    The close-open and high-low ranges are each smoothed with a symmetric
    1-2-2-1 weighting, summed over the period and divided. The signal line is
    the same weighting applied to the main line.

    Args:
        bars: Bars in chronological order
        period: Summation period

    Returns:
        (main, signal) series
    """
    if period <= 0:
        raise ValueError("period must be positive")

    close_open = [bar.close - bar.open for bar in bars]
    high_low = [bar.high - bar.low for bar in bars]
    numerators = [swma4(close_open, i) for i in range(len(bars))]
    denominators = [swma4(high_low, i) for i in range(len(bars))]

    main: Series = []
    for i in range(len(bars)):
        if i + 1 < period + 3:
            main.append(None)
            continue
        num = sum(numerators[i - period + 1:i + 1])  # type: ignore[arg-type]
        den = sum(denominators[i - period + 1:i + 1])  # type: ignore[arg-type]
        main.append(num / den if den != 0 else num)

    signal: Series = [swma4(main, i) for i in range(len(bars))]
    return main, signal


def _ac_lines(bars: Sequence[Bar], args: tuple) -> list[Series]:
    return [accelerator_oscillator(bars)]


def _ao_lines(bars: Sequence[Bar], args: tuple) -> list[Series]:
    return [awesome_oscillator(bars)]


def _rvi_lines(bars: Sequence[Bar], args: tuple) -> list[Series]:
    (period,) = args
    main, signal = relative_vigor_index(bars, int(period))
    return [main, signal]


# Indicator name -> function computing every output line from bars and args
INDICATOR_FORMULAS: dict[str, Callable[[Sequence[Bar], tuple], list[Series]]] = {
    "AC": _ac_lines,
    "AO": _ao_lines,
    "RVI": _rvi_lines,
}


def required_bars(name: str, args: tuple, shift: int) -> int:
    """Number of most recent bars needed to evaluate an indicator at a shift"""
    if name == "AO":
        warmup = AO_SLOW_PERIOD
    elif name == "AC":
        warmup = AO_SLOW_PERIOD + AC_SIGNAL_PERIOD - 1
    elif name == "RVI":
        warmup = int(args[0]) + 6
    else:
        raise KeyError(name)
    return warmup + shift
