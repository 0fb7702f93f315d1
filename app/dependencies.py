from fastapi import HTTPException, Request

from app.config import Locale, SiteConfig, UnknownLocaleError, resolve_locale


def get_site_config(request: Request) -> SiteConfig:
    """Return the configuration loaded at startup (see :mod:`app.main`)."""
    return request.app.state.site_config


def require_locale(locale: str, config: SiteConfig) -> Locale:
    """Resolve a path-parameter locale, answering 404 for locales the site does not serve."""
    try:
        return resolve_locale(locale, config)
    except UnknownLocaleError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
