# utils/common.py
"""
Common Helpers - Lookups, Parsing and Formatting

- value_or_zero: the single accessor for sparse year/seller maps
- parse_currency_input / format_currency_input: pt-BR paste format ("47.895,31")
- format_brl / format_brl_abbr / format_percent: display formatting

Version: 1.0.0
"""

import math
import re
from typing import Any, Mapping, Optional

_NON_NUMERIC = re.compile(r'[^\d.]')


def to_amount(value: Any) -> float:
    """Coerce a stored or entered value to a float amount; anything unusable is 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(amount) or math.isinf(amount):
        return 0.0
    return amount


def value_or_zero(mapping: Optional[Mapping], key: Any) -> float:
    """Look up key in a sparse map; a missing map or missing key reads as 0."""
    if not mapping:
        return 0.0
    return to_amount(mapping.get(key))


def parse_currency_input(raw: Any) -> float:
    """
    Parse a currency amount typed or pasted in pt-BR notation.

    Thousands dots are dropped, the first comma becomes the decimal point and
    every other non-digit character is discarded. Unparseable input is 0.

    Examples:
        "47.895,31" -> 47895.31
        "R$ 1.200"  -> 1200.0
        "abc"       -> 0.0
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return to_amount(raw)

    clean = str(raw).replace('.', '').replace(',', '.', 1)
    clean = _NON_NUMERIC.sub('', clean)
    try:
        return to_amount(float(clean))
    except ValueError:
        return 0.0


def _swap_separators(text: str) -> str:
    return text.replace(',', '_').replace('.', ',').replace('_', '.')


def format_currency_input(amount: Any) -> str:
    """Render an amount in the notation accepted by parse_currency_input ('' for 0)."""
    value = to_amount(amount)
    if value == 0:
        return ""
    text = f"{value:,.2f}"
    if text.endswith(".00"):
        text = text[:-3]
    elif text.endswith("0"):
        text = text[:-1]
    return _swap_separators(text)


def format_brl(value: Any, decimals: int = 0) -> str:
    """R$ 1.234.567 (pt-BR grouping)."""
    amount = to_amount(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}R$ {_swap_separators(f'{abs(amount):,.{decimals}f}')}"


def format_brl_abbr(value: Any) -> str:
    amount = to_amount(value)
    if amount >= 1_000_000:
        return f"R$ {amount / 1_000_000:.1f}M"
    if amount >= 1_000:
        return f"R$ {amount / 1_000:.0f}k"
    return format_brl(amount)


def format_percent(value: Any, decimals: int = 1) -> str:
    return f"{to_amount(value):.{decimals}f}%"
