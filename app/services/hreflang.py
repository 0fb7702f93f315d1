"""Hreflang alternate links for a page path."""

from typing import Dict, List

from app.config import SiteConfig
from app.models.metadata import HreflangTag
from app.services.urls import build_locale_url

X_DEFAULT = "x-default"


def alternate_languages(path: str, config: SiteConfig) -> Dict[str, str]:
    """Return ``{locale: url}`` for every served locale plus ``x-default``.

    Keys follow registry order; ``x-default`` is always last and equals the
    default locale's URL.
    """
    languages = {
        locale.value: build_locale_url(config.origin, locale, path) for locale in config.locales
    }
    languages[X_DEFAULT] = languages[config.default_locale.value]
    return languages


def generate_hreflang_tags(path: str, config: SiteConfig) -> List[HreflangTag]:
    """Return one :class:`HreflangTag` per served locale, then the ``x-default`` tag.

    The result always holds ``len(config.locales) + 1`` entries with distinct
    ``hreflang`` values.
    """
    return [
        HreflangTag(hreflang=hreflang, href=href)
        for hreflang, href in alternate_languages(path, config).items()
    ]
