# src/wallet_display/core/enums.py

from enum import Enum


class CurrencyFamily(str, Enum):
    """
    Groups currencies that share the same smallest-unit scale and
    maximum fraction-digit bound.
    """

    EIGHT_DECIMAL = "eight_decimal"  # satoshi-denominated
    EIGHTEEN_DECIMAL = "eighteen_decimal"  # wei-denominated


class CryptoCurrency(str, Enum):
    """
    The canonical set of crypto currencies the wallet can display.
    The value is the ticker shown next to formatted amounts.
    """

    BTC = "BTC"
    BCH = "BCH"
    ETHER = "ETH"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def family(self) -> CurrencyFamily:
        if self is CryptoCurrency.ETHER:
            return CurrencyFamily.EIGHTEEN_DECIMAL
        return CurrencyFamily.EIGHT_DECIMAL
