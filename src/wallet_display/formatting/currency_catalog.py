# src/wallet_display/formatting/currency_catalog.py

# --- Built Ins  ---
from typing import Union

# --- Installed  ---
from babel import Locale, UnknownLocaleError
from babel.numbers import (
    UnknownCurrencyError,
    get_currency_precision,
    get_currency_symbol,
    validate_currency,
)
from loguru import logger as log

# --- Local  ---
from wallet_display.core.exceptions import LocaleUnavailable, UnknownCurrencyCode
from wallet_display.utils.asset_utils import normalize_currency_code

LocaleLike = Union[Locale, str]


def parse_locale(locale: LocaleLike) -> Locale:
    """
    Resolves a locale identifier ('en_US', 'de-CH') into a babel Locale.
    Raises LocaleUnavailable when CLDR has no data for it.
    """
    if isinstance(locale, Locale):
        return locale
    try:
        return Locale.parse(locale, sep="-" if "-" in locale else "_")
    except (UnknownLocaleError, ValueError, TypeError) as e:
        log.error(f"Cannot initialise number formatting for locale '{locale}': {e}")
        raise LocaleUnavailable(locale, str(e)) from e


def get_currency(currency_code: str) -> str:
    """
    Returns the canonical ISO 4217 code, raising UnknownCurrencyCode for
    anything outside the registry.
    """
    code = normalize_currency_code(currency_code)
    try:
        validate_currency(code)
    except UnknownCurrencyError as e:
        log.error(f"Rejected currency code '{currency_code}'")
        raise UnknownCurrencyCode(currency_code) from e
    return code


def get_symbol(currency_code: str, locale: LocaleLike) -> str:
    """Display glyph of the currency in the given locale ('$', '€', 'CHF')."""
    code = get_currency(currency_code)
    return get_currency_symbol(code, locale=parse_locale(locale))


def get_default_fraction_digits(currency_code: str) -> int:
    """ISO default fraction digits of the currency (2 for USD, 0 for JPY)."""
    return get_currency_precision(get_currency(currency_code))
