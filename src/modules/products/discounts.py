"""Discount directives and the discount calculator.

An update payload may carry a directive such as ``"DISCOUNT:0.10"`` in its
``transientField``.  ``parse_discount_directive`` extracts the fraction and
``apply_discount`` subtracts that share of the price.

Parsing is lenient: anything that is not a well-formed directive means
"no discount" rather than an error.  The fraction range check, on the other
hand, is strict.

Prices are kept as ``Decimal`` throughout and the result is quantized to the
price column scale (two places) using ``ROUND_HALF_UP``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from modules.products.constants import PRICE_QUANTUM
from modules.products.exceptions import InvalidDiscount

DISCOUNT_KEYWORD = "DISCOUNT"
DIRECTIVE_SEPARATOR = ":"


def parse_discount_directive(text: Optional[str]) -> Optional[Decimal]:
    """Return the fraction carried by a ``DISCOUNT:<fraction>`` directive.

    The keyword is matched case-insensitively and surrounding whitespace is
    ignored; anything after a second separator is ignored too.  Returns
    ``None`` when ``text`` is empty or malformed (missing
    separator, other keyword, non-numeric or non-finite fraction).
    """
    if not text:
        return None
    parts = text.split(DIRECTIVE_SEPARATOR)
    if len(parts) < 2 or parts[0].strip().upper() != DISCOUNT_KEYWORD:
        return None
    try:
        fraction = Decimal(parts[1].strip())
    except InvalidOperation:
        return None
    if not fraction.is_finite():
        return None
    return fraction


def apply_discount(price: Decimal, fraction: Decimal) -> Decimal:
    """Return ``price - price * fraction``, rounded to cents.

    Raises:
        InvalidDiscount: if ``fraction`` is not within ``[0, 1]``.
    """
    if fraction is None or not fraction.is_finite() or not 0 <= fraction <= 1:
        raise InvalidDiscount(f"Discount must be between 0 and 1, got {fraction}.")
    discounted = price - price * fraction
    return discounted.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)
