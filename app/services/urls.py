"""Locale-scoped URL construction.

Every absolute URL produced by this service goes through
:func:`build_locale_url`, so two URLs for the same page differ only in their
locale segment.
"""

from app.config import Locale


def normalize_root(path: str) -> str:
    """Map the bare root path ``"/"`` to ``""``; other paths are unchanged."""
    return "" if path == "/" else path


def build_locale_url(origin: str, locale: Locale, path: str) -> str:
    """Return ``{origin}/{locale}{path}``.

    *path* must be empty or start with ``/``.  The root path ``"/"`` yields the
    same URL as ``""`` (no trailing slash after the locale segment).  The
    locale is not checked against the registry here.
    """
    return f"{origin}/{Locale(locale).value}{normalize_root(path)}"


def switch_locale_path(current_path: str, current_locale: Locale, target_locale: Locale) -> str:
    """Translate a site-relative path into the equivalent path for *target_locale*.

    ``/fr/products/cocoa`` with ``fr`` → ``en`` becomes ``/en/products/cocoa``.
    Only a leading ``/{current_locale}`` segment is replaced.
    """
    prefix = f"/{Locale(current_locale).value}"
    remainder = current_path
    if current_path == prefix or current_path.startswith(prefix + "/"):
        remainder = current_path[len(prefix):]
    return f"/{Locale(target_locale).value}{normalize_root(remainder)}"
