"""Site configuration: locale registry, site origin and display name.

The configuration is built once at process start by :func:`load_config` and
passed explicitly to every generator in :mod:`app.services`.  Nothing in the
services reads the environment directly.

Environment variables
---------------------
``SITE_URL``
    Absolute site origin, e.g. ``https://afrexia.com``.
``SITE_NAME``
    Display name used for ``og:site_name`` and Schema.org fallbacks.
``SITE_LOCALES``
    Comma-separated, ordered list of served locale codes.
``SITE_DEFAULT_LOCALE``
    Locale used for ``x-default`` alternates.
"""

import logging
import os
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when the site configuration is invalid.  Fatal at startup."""


class UnknownLocaleError(ValueError):
    """Raised when a caller passes a locale that the site does not serve."""


class Locale(str, Enum):
    FR = "fr"
    EN = "en"
    ES = "es"
    DE = "de"
    RU = "ru"

    def __str__(self) -> str:
        return self.value


# Open Graph ``og:locale`` tag for every known locale
OG_LOCALE_TAGS: Dict[Locale, str] = {
    Locale.FR: "fr_FR",
    Locale.EN: "en_US",
    Locale.ES: "es_ES",
    Locale.DE: "de_DE",
    Locale.RU: "ru_RU",
}

LOCALE_NAMES: Dict[Locale, str] = {
    Locale.FR: "Français",
    Locale.EN: "English",
    Locale.ES: "Español",
    Locale.DE: "Deutsch",
    Locale.RU: "Русский",
}

DEFAULT_SITE_URL = "https://afrexia.com"
DEFAULT_SITE_NAME = "Afrexia"
DEFAULT_LOCALES: Tuple[Locale, ...] = (Locale.FR, Locale.EN, Locale.ES, Locale.DE, Locale.RU)
DEFAULT_LOCALE = Locale.FR


class SiteConfig(BaseModel):
    """Immutable, validated site configuration."""

    model_config = ConfigDict(frozen=True)

    origin: str = DEFAULT_SITE_URL
    site_name: str = DEFAULT_SITE_NAME
    locales: Tuple[Locale, ...] = DEFAULT_LOCALES
    default_locale: Locale = DEFAULT_LOCALE
    default_og_image_path: str = "/assets/og-image.jpg"
    logo_path: str = "/assets/logo.png"
    keyword_separator: str = ", "

    @field_validator("origin")
    @classmethod
    def validate_origin(cls, value: str) -> str:
        # A single trailing slash is tolerated; anything past the host is not.
        origin = value.strip()
        if origin.endswith("/"):
            origin = origin[:-1]
        parsed = urlparse(origin)
        if parsed.scheme not in {"http", "https"}:
            raise ValueError(f"Site origin must use http or https, got {value!r}.")
        if not parsed.netloc:
            raise ValueError(f"Site origin must include a host, got {value!r}.")
        if parsed.path or parsed.query or parsed.fragment:
            raise ValueError(f"Site origin must not carry a path, query or fragment, got {value!r}.")
        return origin

    @field_validator("site_name")
    @classmethod
    def validate_site_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Site name must not be empty.")
        return value

    @model_validator(mode="after")
    def validate_registry(self) -> "SiteConfig":
        if not self.locales:
            raise ValueError("At least one locale must be configured.")
        if len(set(self.locales)) != len(self.locales):
            raise ValueError(f"Duplicate locales in registry: {list(map(str, self.locales))}.")
        if self.default_locale not in self.locales:
            raise ValueError(
                f"Default locale {self.default_locale.value!r} is not in the registry "
                f"{[locale.value for locale in self.locales]}."
            )
        missing = [locale.value for locale in self.locales if locale not in OG_LOCALE_TAGS]
        if missing:
            raise ValueError(f"No Open Graph locale tag for: {missing}.")
        return self

    @property
    def default_og_image_url(self) -> str:
        return f"{self.origin}{self.default_og_image_path}"

    @property
    def logo_url(self) -> str:
        return f"{self.origin}{self.logo_path}"


def build_config(**values) -> SiteConfig:
    """Construct a :class:`SiteConfig`, converting validation failures to
    :class:`ConfigurationError`."""
    try:
        return SiteConfig(**values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid site configuration: {exc}") from exc


def _parse_locale(code: str) -> Locale:
    try:
        return Locale(code.strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unknown locale code {code!r} in site configuration.") from None


def load_config(environ: Optional[Mapping[str, str]] = None) -> SiteConfig:
    """Build the site configuration from environment variables.

    Raises:
        ConfigurationError: if any value is missing or inconsistent.
    """
    env = os.environ if environ is None else environ

    raw_locales = env.get("SITE_LOCALES", "")
    if raw_locales.strip():
        locales = tuple(_parse_locale(code) for code in raw_locales.split(",") if code.strip())
    else:
        locales = DEFAULT_LOCALES

    raw_default = env.get("SITE_DEFAULT_LOCALE", "")
    default_locale = _parse_locale(raw_default) if raw_default.strip() else DEFAULT_LOCALE

    config = build_config(
        origin=env.get("SITE_URL", DEFAULT_SITE_URL),
        site_name=env.get("SITE_NAME", DEFAULT_SITE_NAME),
        locales=locales,
        default_locale=default_locale,
    )
    logger.info(
        "Site configuration loaded",
        extra={"origin": config.origin, "locales": [locale.value for locale in config.locales]},
    )
    return config


def resolve_locale(value, config: SiteConfig) -> Locale:
    """Return *value* as a registered :class:`Locale`.

    Raises:
        UnknownLocaleError: if *value* is not a locale served by *config*.
    """
    try:
        locale = Locale(value)
    except ValueError:
        raise UnknownLocaleError(f"Unknown locale {value!r}.") from None
    if locale not in config.locales:
        raise UnknownLocaleError(f"Locale {locale.value!r} is not served by this site.")
    return locale


def is_valid_locale(value: Optional[str], config: SiteConfig) -> bool:
    try:
        resolve_locale(value, config)
    except UnknownLocaleError:
        return False
    return True


def get_valid_locale(value: Optional[str], config: SiteConfig) -> Locale:
    """Lenient lookup: return *value* as a locale, or the default locale.

    An unrecognised, non-empty *value* is logged before falling back.
    """
    if value and is_valid_locale(value, config):
        return resolve_locale(value, config)
    if value:
        logger.warning(
            'Invalid locale "%s", falling back to default "%s"', value, config.default_locale.value
        )
    return config.default_locale
