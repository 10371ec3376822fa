#!/usr/bin/env python3
"""
Basic Usage Example - mtdata market data access layer

This script demonstrates the basic usage of mtdata with simulated market
data. It shows how to:
- Load per-symbol configuration
- Read quotes and unit conversions through SymbolInfo
- Record ticks into the tick history
- Read AC, AO and RVI values over both retrieval strategies

Run: python examples/basic_usage.py
"""

import math
from datetime import datetime, timedelta, timezone
from typing import List

from mtdata.config import ConfigLoader
from mtdata.data.models import Bar, OrderType, SymbolSpec, Timeframe
from mtdata.indicators import (
    AcceleratorOscillator,
    AwesomeOscillator,
    BufferRetrieval,
    DirectRetrieval,
    IndicatorContext,
    RelativeVigorIndex,
    RVILine,
)
from mtdata.logging import configure_logging
from mtdata.providers import InMemoryProvider
from mtdata.symbols import SymbolInfo


def create_sample_bars(count: int, start_price: float = 1.1000) -> List[Bar]:
    """Create hourly bars following a gentle sine wave."""
    start = datetime(2024, 1, 2, tzinfo=timezone.utc)
    bars = []
    for i in range(count):
        mid = start_price + 0.0050 * math.sin(i / 8.0)
        open_price = mid - 0.0004
        close_price = mid + 0.0004 * math.cos(i / 3.0)
        bars.append(Bar(
            ts=start + timedelta(hours=i),
            open=open_price,
            high=max(open_price, close_price) + 0.0006,
            low=min(open_price, close_price) - 0.0006,
            close=close_price,
            volume=1000.0 + i,
        ))
    return bars


def main():
    """Run the basic usage example."""
    print("mtdata - Basic Usage Example")
    print("=" * 50)

    # Merged configuration for the symbol (defaults < symbols.yaml < overrides)
    config = ConfigLoader.create().load("EURUSD")
    configure_logging(**config["logging"])
    print(f"Tick history block size: {config['tick_history']['block_size']}")

    provider = InMemoryProvider()
    provider.add_symbol(SymbolSpec(
        symbol="EURUSD", digits=5, point=0.00001, spread=12,
        trade_tick_size=0.00001, trade_stops_level=10,
    ))
    provider.set_bars("EURUSD", Timeframe.H1, create_sample_bars(120))

    # Quotes and conversions
    symbol = SymbolInfo("EURUSD", provider, config=config)
    for ask, bid in [(1.10012, 1.10000), (1.10020, 1.10006), (1.10031, 1.10019)]:
        provider.push_quote("EURUSD", ask=ask, bid=bid, volume=1)
        symbol.save_tick(symbol.get_tick())

    print(f"\nRecorded ticks: {len(symbol.ticks)}")
    print(f"Buy opens at {symbol.get_open_offer(OrderType.BUY)}, "
          f"closes at {symbol.get_close_offer(OrderType.BUY)}")
    print(symbol.to_string())

    # Indicators
    context = IndicatorContext.from_config("EURUSD", provider, config)
    ac = AcceleratorOscillator(context, config=config)
    ao = AwesomeOscillator(context, retrieval=DirectRetrieval())
    rvi = RelativeVigorIndex(context, config=config, retrieval=BufferRetrieval())

    print("\nIndicator values:")
    for shift in range(3):
        print(f"  shift {shift}: AC={ac.get_value(shift):.6f} "
              f"AO={ao.get_value(shift):.6f} "
              f"RVI={rvi.get_value(RVILine.MAIN, shift):.4f}/"
              f"{rvi.get_value(RVILine.SIGNAL, shift):.4f}")

    # Unavailable data degrades to the sentinel and a logged error
    deep = ao.get_value(500)
    print(f"\nAO at shift 500 (beyond history): {deep:g}")


if __name__ == "__main__":
    main()
