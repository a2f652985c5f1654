# src/wallet_display/utils/formatter.py

import math
from decimal import Decimal

from loguru import logger as log

from wallet_display.core.enums import CurrencyFamily
from wallet_display.utils.constants import FAMILY_DIVISORS

# Renderings replaced by a bare "0" to match the web wallet
WEB_ZERO_TOKENS = ("0.0", "0.00")


# --- Helper Functions for Formatting ---
def to_natural_number(amount: Decimal | float | int) -> float:
    """
    Floors an amount at zero. Negative, NaN and infinite inputs all
    become 0.0 so a malformed balance never renders as negative.
    The result is a float, so Decimal inputs keep about 17 significant digits.
    """
    value = float(amount)
    if not math.isfinite(value) or value < 0:
        log.debug(f"Clamping non-displayable amount {amount!r} to zero")
        return 0.0
    return value if value > 0 else 0.0


def is_nan(amount: Decimal | float | int) -> bool:
    if isinstance(amount, Decimal):
        return amount.is_nan()
    return isinstance(amount, float) and math.isnan(amount)


def to_web_zero(formatted: str) -> str:
    """Replaces a literal '0.0' or '0.00' rendering with '0'."""
    if formatted in WEB_ZERO_TOKENS:
        return "0"
    return formatted


def with_unit(formatted: str, unit: str) -> str:
    return f"{formatted} {unit}"


def smallest_unit_to_natural(amount: int, family: CurrencyFamily) -> float:
    """
    Converts an integer count of smallest units (satoshi, wei) into a
    natural-unit float using the family's fixed divisor.
    """
    return amount / FAMILY_DIVISORS[family]
