# src/wallet_display/utils/constants.py

from wallet_display.core.enums import CurrencyFamily


class SmallestUnitDivisors:
    """
    Power-of-ten divisors converting smallest units into natural units.
    """

    SATOSHI = 1e8
    WEI = 1e18


class FractionDigits:
    """
    Min/max fraction digit bounds of the cached format configurations.
    """

    FIAT = 2
    CRYPTO_MIN = 1
    MAX_BTC = 8
    MAX_ETH = 18
    MAX_ETH_SHORT = 8


FAMILY_DIVISORS: dict[CurrencyFamily, float] = {
    CurrencyFamily.EIGHT_DECIMAL: SmallestUnitDivisors.SATOSHI,
    CurrencyFamily.EIGHTEEN_DECIMAL: SmallestUnitDivisors.WEI,
}

FAMILY_MAX_FRACTION_DIGITS: dict[CurrencyFamily, int] = {
    CurrencyFamily.EIGHT_DECIMAL: FractionDigits.MAX_BTC,
    CurrencyFamily.EIGHTEEN_DECIMAL: FractionDigits.MAX_ETH,
}

LOCALE_ENV_VAR = "WALLET_DISPLAY_LOCALE"
FALLBACK_LOCALE = "en_US"
NAN_SYMBOL = "NaN"
