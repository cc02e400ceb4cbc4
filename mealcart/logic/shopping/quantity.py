"""Quantity classification for shopping list aggregation.

An ingredient amount either adds to a numeric per-unit total ("200" + "g")
or is kept as literal text ("适量", "2" without a unit, "少许勺").
"""
import re
from typing import NamedTuple, Optional

# Leading ASCII numeric prefix, trailing text is ignored: "1.5kg" -> 1.5, "适量" or "２００" -> no match
_NUMERIC_PREFIX = re.compile(r'^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))')


class AmountClass(NamedTuple):
    unit: Optional[str]
    quantity: Optional[float]
    text: Optional[str]

    @property
    def is_numeric(self) -> bool:
        return self.quantity is not None


def parse_amount(amount: str) -> Optional[float]:
    """Parse the leading number of ``amount``; None when there is none."""
    match = _NUMERIC_PREFIX.match(amount or '')
    if not match:
        return None
    return float(match.group(1).replace('Infinity', 'inf'))


def classify_amount(amount: str, unit: str) -> AmountClass:
    """Decide whether (amount, unit) is summed per unit or kept as free text."""
    amount = amount or ''
    unit_key = (unit or '').strip()
    quantity = parse_amount(amount)
    if quantity is not None and unit:
        return AmountClass(unit_key, quantity, None)
    text = f"{amount}{unit}" if unit else amount
    return AmountClass(None, None, text)


__all__ = ['AmountClass', 'classify_amount', 'parse_amount']
