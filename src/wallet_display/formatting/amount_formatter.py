# src/wallet_display/formatting/amount_formatter.py

# --- Built Ins  ---
import copy
from decimal import Decimal, localcontext
from typing import Optional, Union

# --- Installed  ---
from babel import Locale
from babel.numbers import NumberPattern, format_currency, parse_pattern
from loguru import logger as log

# --- Local  ---
from wallet_display.config.models import FormatConfig, FormatterSettings
from wallet_display.core.enums import CryptoCurrency, CurrencyFamily
from wallet_display.formatting.currency_catalog import (
    LocaleLike,
    get_currency,
    get_symbol,
    parse_locale,
)
from wallet_display.utils.asset_utils import resolve_crypto_currency
from wallet_display.utils.constants import (
    FAMILY_MAX_FRACTION_DIGITS,
    NAN_SYMBOL,
    FractionDigits,
)
from wallet_display.utils.formatter import (
    is_nan,
    smallest_unit_to_natural,
    to_natural_number,
    to_web_zero,
    with_unit,
)

Amount = Union[Decimal, float, int]
CurrencyLike = Union[CryptoCurrency, str]

DECIMAL_PRECISION = 64


class AmountFormatter:
    """
    Formats crypto and fiat amounts for clean UI display.

    The locale is captured once at construction. Four format configurations
    are built from it and cached together with their number patterns:
      - fiat: exactly 2 fraction digits
      - crypto long: 1 to 18 fraction digits (ether)
      - crypto long alt: 1 to 8 fraction digits (bitcoin, bitcoin cash)
      - crypto short: 1 to 8 fraction digits (abbreviated ether)

    Nothing is mutated after construction; fiat calls attach their currency
    to a transient copy of the fiat configuration, so an instance can be
    shared between threads.
    """

    def __init__(
        self,
        locale: Optional[LocaleLike] = None,
        settings: Optional[FormatterSettings] = None,
    ):
        if locale is None:
            locale = (settings or FormatterSettings.from_env()).resolve_locale()
        self._locale = parse_locale(locale)
        locale_id = str(self._locale)

        self.fiat_format = FormatConfig(
            minimum_fraction_digits=FractionDigits.FIAT,
            maximum_fraction_digits=FractionDigits.FIAT,
            locale=locale_id,
        )
        self.crypto_long_format = FormatConfig(
            minimum_fraction_digits=FractionDigits.CRYPTO_MIN,
            maximum_fraction_digits=FractionDigits.MAX_ETH,
            locale=locale_id,
        )
        self.crypto_long_alt_format = FormatConfig(
            minimum_fraction_digits=FractionDigits.CRYPTO_MIN,
            maximum_fraction_digits=FractionDigits.MAX_BTC,
            locale=locale_id,
        )
        self.crypto_short_format = FormatConfig(
            minimum_fraction_digits=FractionDigits.CRYPTO_MIN,
            maximum_fraction_digits=FractionDigits.MAX_ETH_SHORT,
            locale=locale_id,
        )

        self._patterns: dict[tuple[int, int], NumberPattern] = {}
        for config in (
            self.fiat_format,
            self.crypto_long_format,
            self.crypto_long_alt_format,
            self.crypto_short_format,
        ):
            self._pattern_for(config)

        log.debug(f"AmountFormatter initialised for locale '{locale_id}'")

    @property
    def locale(self) -> Locale:
        return self._locale

    def _pattern_for(self, config: FormatConfig) -> NumberPattern:
        """Locale decimal pattern with the configured fraction digits, cached."""
        pattern = self._patterns.get(config.fraction_digits)
        if pattern is None:
            pattern = copy.copy(parse_pattern(self._locale.decimal_formats[None]))
            pattern.frac_prec = config.fraction_digits
            self._patterns[config.fraction_digits] = pattern
        return pattern

    def _render(self, value: Amount, config: FormatConfig) -> str:
        pattern = self._pattern_for(config)
        # 18 fraction digits overflow the default 28-digit context
        with localcontext() as ctx:
            ctx.prec = DECIMAL_PRECISION
            return pattern.apply(value, self._locale)

    def _format_crypto(self, amount: Amount, config: FormatConfig) -> str:
        return to_web_zero(self._render(to_natural_number(amount), config))

    # --- Units & digit bounds ---

    def get_unit(self, currency: CurrencyLike) -> str:
        return resolve_crypto_currency(currency).symbol

    def get_max_fraction_digits(
        self, family: Union[CurrencyFamily, CurrencyLike]
    ) -> int:
        """Maximum fraction digits shown for a currency family (8 or 18)."""
        if not isinstance(family, CurrencyFamily):
            family = resolve_crypto_currency(family).family
        return FAMILY_MAX_FRACTION_DIGITS[family]

    def get_btc_unit(self) -> str:
        return CryptoCurrency.BTC.symbol

    def get_bch_unit(self) -> str:
        return CryptoCurrency.BCH.symbol

    def get_eth_unit(self) -> str:
        return CryptoCurrency.ETHER.symbol

    def get_btc_max_fraction_digits(self) -> int:
        return FractionDigits.MAX_BTC

    def get_bch_max_fraction_digits(self) -> int:
        return FractionDigits.MAX_BTC

    def get_eth_max_fraction_digits(self) -> int:
        return FractionDigits.MAX_ETH

    # --- Fiat ---

    def get_fiat_format(self, currency_code: str) -> FormatConfig:
        """
        Returns the fiat configuration with the given currency attached.
        Fraction digits stay fixed at 2 whatever the currency.

        Raises:
            UnknownCurrencyCode: if the code is not an ISO 4217 currency.
        """
        return self.fiat_format.with_currency(get_currency(currency_code))

    def format_fiat(self, amount: Amount, currency_code: str) -> str:
        """
        Formats a fiat amount with 2 fraction digits and the locale's
        separators, e.g. 1234.5 USD in en_US -> '1,234.50'. Negative amounts
        are kept and zero is rendered as '0.00'. NaN renders as 'NaN'.
        """
        config = self.get_fiat_format(currency_code)
        if is_nan(amount):
            return NAN_SYMBOL
        return self._render(amount, config)

    def format_fiat_with_symbol(
        self, amount: Amount, currency_code: str, locale: LocaleLike
    ) -> str:
        """
        Formats a fiat amount using the locale's currency pattern and the
        currency's locale-specific symbol, e.g. '$1,234.50' or '1.234,50 €'.
        Fraction digits come from the locale pattern, not the currency, so
        JPY in en_US renders as '¥1,234.50'.
        """
        code = get_currency(currency_code)
        return format_currency(
            amount, code, locale=parse_locale(locale), currency_digits=False
        )

    def get_fiat_symbol(self, currency_code: str, locale: LocaleLike) -> str:
        return get_symbol(currency_code, locale)

    # --- Crypto, natural units ---

    def format_crypto_long(self, amount: Amount) -> str:
        return self._format_crypto(amount, self.crypto_long_format)

    def format_crypto_long_with_unit(
        self, amount: Amount, currency: CurrencyLike = CryptoCurrency.ETHER
    ) -> str:
        return with_unit(self.format_crypto_long(amount), self.get_unit(currency))

    def format_crypto_long_alt(self, amount: Amount) -> str:
        return self._format_crypto(amount, self.crypto_long_alt_format)

    def format_crypto_long_alt_with_unit(
        self, amount: Amount, currency: CurrencyLike = CryptoCurrency.BTC
    ) -> str:
        return with_unit(self.format_crypto_long_alt(amount), self.get_unit(currency))

    def format_crypto_short(self, amount: Amount) -> str:
        return self._format_crypto(amount, self.crypto_short_format)

    def format_crypto_short_with_unit(
        self, amount: Amount, currency: CurrencyLike = CryptoCurrency.ETHER
    ) -> str:
        return with_unit(self.format_crypto_short(amount), self.get_unit(currency))

    # --- Crypto, smallest units ---

    def format_smallest_unit_long(
        self, amount: int, currency: CurrencyLike = CryptoCurrency.ETHER
    ) -> str:
        """
        Formats an integer count of satoshi or wei. The amount is divided by
        the family divisor (1e8 or 1e18) and rendered through the long
        format of that family.
        """
        family = resolve_crypto_currency(currency).family
        natural = smallest_unit_to_natural(amount, family)
        if family is CurrencyFamily.EIGHTEEN_DECIMAL:
            return self.format_crypto_long(natural)
        return self.format_crypto_long_alt(natural)

    def format_smallest_unit_long_with_unit(
        self, amount: int, currency: CurrencyLike = CryptoCurrency.ETHER
    ) -> str:
        return with_unit(
            self.format_smallest_unit_long(amount, currency), self.get_unit(currency)
        )

    # --- Per-currency shortcuts ---

    def format_btc(self, btc: Amount) -> str:
        return self.format_crypto_long_alt(btc)

    def format_bch(self, bch: Amount) -> str:
        return self.format_crypto_long_alt(bch)

    def format_eth(self, eth: Amount) -> str:
        return self.format_crypto_long(eth)

    def format_eth_short(self, eth: Amount) -> str:
        return self.format_crypto_short(eth)

    def format_satoshi(self, satoshi: int) -> str:
        return self.format_smallest_unit_long(satoshi, CryptoCurrency.BTC)

    def format_wei(self, wei: int) -> str:
        return self.format_smallest_unit_long(wei, CryptoCurrency.ETHER)

    def format_btc_with_unit(self, btc: Amount) -> str:
        return self.format_crypto_long_alt_with_unit(btc, CryptoCurrency.BTC)

    def format_bch_with_unit(self, bch: Amount) -> str:
        return self.format_crypto_long_alt_with_unit(bch, CryptoCurrency.BCH)

    def format_eth_with_unit(self, eth: Amount) -> str:
        return self.format_crypto_long_with_unit(eth, CryptoCurrency.ETHER)

    def format_eth_short_with_unit(self, eth: Amount) -> str:
        return self.format_crypto_short_with_unit(eth, CryptoCurrency.ETHER)

    def format_satoshi_with_unit(self, satoshi: int) -> str:
        return self.format_smallest_unit_long_with_unit(satoshi, CryptoCurrency.BTC)

    def format_wei_with_unit(self, wei: int) -> str:
        return self.format_smallest_unit_long_with_unit(wei, CryptoCurrency.ETHER)
