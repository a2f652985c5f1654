# src/wallet_display/utils/asset_utils.py

from wallet_display.core.enums import CryptoCurrency

# Names accepted in addition to the ticker itself
CRYPTO_ALIASES = {
    "ETHER": CryptoCurrency.ETHER,
    "BITCOIN": CryptoCurrency.BTC,
    "BITCOINCASH": CryptoCurrency.BCH,
}


def normalize_currency_code(currency_code: str) -> str:
    """
    Sanitizes a fiat currency code to its canonical ISO 4217 form.

    Examples:
        - 'usd'    -> 'USD'
        - ' eur '  -> 'EUR'
    """
    return currency_code.strip().upper()


def resolve_crypto_currency(currency: CryptoCurrency | str) -> CryptoCurrency:
    """
    Maps a ticker or well-known name onto its CryptoCurrency member.

    Examples:
        - 'btc'   -> CryptoCurrency.BTC
        - 'ETH'   -> CryptoCurrency.ETHER
        - 'ether' -> CryptoCurrency.ETHER
    """
    if isinstance(currency, CryptoCurrency):
        return currency

    key = currency.strip().upper().replace(" ", "").replace("_", "")
    try:
        return CryptoCurrency(key)
    except ValueError:
        pass
    if key in CRYPTO_ALIASES:
        return CRYPTO_ALIASES[key]
    raise ValueError(f"Unsupported crypto currency: '{currency}'")
