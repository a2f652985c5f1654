# src/wallet_display/config/models.py

# --- Built Ins  ---
import os
from typing import Optional

# --- Installed  ---
import babel
from pydantic import BaseModel, ConfigDict, Field, model_validator

# --- Local  ---
from wallet_display.utils.constants import FALLBACK_LOCALE, LOCALE_ENV_VAR


class FormatConfig(BaseModel):
    """
    An immutable number-formatting specification: fraction digit bounds,
    the locale they apply to and, for fiat, the attached currency.
    """

    model_config = ConfigDict(frozen=True)

    minimum_fraction_digits: int = Field(..., ge=0)
    maximum_fraction_digits: int = Field(..., ge=0)
    locale: str
    currency: Optional[str] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "FormatConfig":
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            raise ValueError(
                "minimum_fraction_digits must not exceed maximum_fraction_digits"
            )
        return self

    @property
    def fraction_digits(self) -> tuple[int, int]:
        return self.minimum_fraction_digits, self.maximum_fraction_digits

    def with_currency(self, currency_code: str) -> "FormatConfig":
        """Returns a transient copy with the currency attached."""
        return self.model_copy(update={"currency": currency_code})


class FormatterSettings(BaseModel):
    # An explicit locale wins over the process default.
    locale: Optional[str] = None
    fallback_locale: str = Field(
        default=FALLBACK_LOCALE,
        description="Used when neither an explicit nor a process locale is set.",
    )

    @classmethod
    def from_env(cls) -> "FormatterSettings":
        return cls(locale=os.environ.get(LOCALE_ENV_VAR) or None)

    def resolve_locale(self) -> str:
        """
        Returns the locale identifier to format with: the configured one,
        else the process default reported by the environment, else the
        fallback.
        """
        if self.locale:
            return self.locale
        return babel.default_locale() or self.fallback_locale
