from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

MAX_SYMBOL_PAIR_LENGTH = 45
TRUNCATED_SYMBOL_PAIR_LENGTH = 42


def _parse_int(value: str) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _parse_decimal(value: str) -> Decimal | None:
    try:
        parsed = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not parsed.is_finite():
        return None
    return parsed


def infer_tick_spacing(tick_indices: Iterable[str]) -> int | None:
    """Smallest positive gap between initialized ticks, or None when unknown."""
    ticks = sorted(tick for tick in (_parse_int(raw) for raw in tick_indices) if tick is not None)
    if len(ticks) < 2:
        return None

    gaps = [abs(upper - lower) for lower, upper in zip(ticks, ticks[1:])]
    positive = [gap for gap in gaps if gap > 0]
    if not positive:
        return None
    return min(positive)


def format_fee_percent(fee_tier: str) -> str | None:
    basis_points = _parse_decimal(fee_tier)
    if basis_points is None:
        return None

    # Values past the context precision cannot be reduced or quantized.
    try:
        percent = basis_points / Decimal("100")
        if basis_points % Decimal("100") == 0:
            rendered = percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        else:
            rendered = percent.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return None
    return f"{rendered} %"


def truncate_symbol_pair(symbol0: str, symbol1: str) -> str:
    pair = f"{symbol0.strip()}/{symbol1.strip()}"
    if len(pair) > MAX_SYMBOL_PAIR_LENGTH:
        return pair[:TRUNCATED_SYMBOL_PAIR_LENGTH] + "..."
    return pair
