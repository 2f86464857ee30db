#!/usr/bin/env python3
"""
Generate realistic demo data for the last 3 months.
Simulates a user's trading activity (buys, partial sells) plus journal notes.

Usage: from project root:
  ./venv/bin/python scripts/generate_test_data.py [--data-dir DIR] [--email EMAIL]
"""

import argparse
import random
from datetime import date, datetime, timedelta
from decimal import Decimal
from pathlib import Path

from tradejournal.app_context import AppContext
from tradejournal.core.exceptions import AppError, ValidationError
from tradejournal.core.timezone import EASTERN_TZ
from tradejournal.domain.models import TradeSide
from tradejournal.services import TradeCreate

# Symbols with approximate starting prices
STOCKS = [
    ("AAPL", 180.0),
    ("MSFT", 420.0),
    ("GOOGL", 160.0),
    ("AMZN", 150.0),
    ("TSLA", 250.0),
    ("NVDA", 500.0),
    ("META", 350.0),
]

MAX_TRADES = 60

NOTES = [
    "Entered on the pullback to the 50-day.",
    "Earnings next week; sizing down.",
    "Trimmed into strength, keeping a core position.",
    "Thesis unchanged. Watching volume.",
]


def _market_time(day: date, rng: random.Random) -> datetime:
    return EASTERN_TZ.localize(datetime.combine(day, datetime.min.time()).replace(
        hour=rng.randint(9, 15), minute=rng.randint(0, 59)
    ))


def generate_realistic_data(ctx: AppContext, seed: int = 7) -> int:
    """Record trades and notes for the signed-in user. Returns the trade count."""
    rng = random.Random(seed)
    prices = {symbol: price for symbol, price in STOCKS}
    held: dict[str, Decimal] = {}

    today = date.today()
    current = today - timedelta(days=90)
    recorded = 0

    print(f"Generating trades from {current} to {today}")
    print("=" * 60)

    while current <= today and recorded < MAX_TRADES:
        if current.weekday() < 5 and rng.random() < 0.6:
            symbol, _ = rng.choice(STOCKS)
            # Random walk on the price
            prices[symbol] *= 1 + rng.uniform(-0.03, 0.03)
            price = Decimal(str(round(prices[symbol], 2)))

            owned = held.get(symbol, Decimal("0"))
            if owned > 0 and rng.random() < 0.35:
                side = TradeSide.SELL
                shares = Decimal(rng.randint(1, int(owned)))
            else:
                side = TradeSide.BUY
                shares = Decimal(rng.randint(1, 20))

            ctx.record_trade(TradeCreate(
                ticker=symbol,
                side=side,
                shares=shares,
                price=price,
                traded_at=_market_time(current, rng),
            ))
            held[symbol] = owned + shares if side == TradeSide.BUY else owned - shares
            recorded += 1
            print(f"✓ {current} {side.value:<4} {shares:>3} {symbol:<5} @ ${price:,.2f}")

            if rng.random() < 0.25:
                ctx.add_journal_entry(symbol, f"<p>{rng.choice(NOTES)}</p>")

        current += timedelta(days=1)

    return recorded


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--data-dir", type=Path, default=None)
    parser.add_argument("--email", default="demo@example.com")
    parser.add_argument("--password", default="demo-password")
    args = parser.parse_args()

    ctx = AppContext(data_dir=args.data_dir)
    ctx.initialize()
    try:
        try:
            ctx.sign_up(args.email, args.password)
            print(f"✓ Account '{args.email}' created")
        except ValidationError:
            ctx.sign_in(args.email, args.password)
            print(f"✓ Account '{args.email}' already exists")

        count = generate_realistic_data(ctx)
        state = ctx.state
        print("=" * 60)
        print(f"Recorded {count} trades, {len(state.journal_entries)} journal entries")
        print(f"Open positions: {', '.join(p.ticker for p in state.positions) or 'none'}")
        print(f"Realized P/L {state.realized.year}: ${state.realized.total:,.2f}")
    except AppError as exc:
        print(f"✗ {exc.code}: {exc.message}")
        raise SystemExit(1)
    finally:
        ctx.close()


if __name__ == "__main__":
    main()
