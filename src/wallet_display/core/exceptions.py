# src/wallet_display/core/exceptions.py


class LocaleUnavailable(Exception):
    """Raised when number formatting cannot be initialised for a locale."""

    def __init__(self, locale: object, reason: str = ""):
        self.locale = locale
        message = f"Locale '{locale}' is not available for number formatting"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnknownCurrencyCode(Exception):
    """Raised when a currency code is not part of the ISO 4217 registry."""

    def __init__(self, currency_code: str):
        self.currency_code = currency_code
        super().__init__(f"Unknown currency code: '{currency_code}'")
