"""Crawler-facing site files (sitemap.xml, robots.txt) and the language switcher."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse, Response
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import SiteConfig, get_valid_locale
from app.dependencies import get_site_config, require_locale
from app.models.sitemap import SitemapRequest
from app.services.robots import generate_robots_txt
from app.services.sitemap import document_entries, render_sitemap_xml, static_entries
from app.services.urls import switch_locale_path

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.get("/sitemap.xml", summary="XML sitemap of the static pages in every locale")
@limiter.limit("30/minute")
async def sitemap(request: Request, config: SiteConfig = Depends(get_site_config)) -> Response:
    entries = static_entries(config)
    logger.info("Sitemap generated", extra={"entries": len(entries)})
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")


@router.post(
    "/sitemap.xml",
    summary="XML sitemap including CMS documents",
    description=(
        "Static pages in every locale, followed by the supplied products "
        "(under `/products`) and blog posts (under `/blog`). Documents are "
        "listed only for locales that have a slug."
    ),
)
@limiter.limit("30/minute")
async def sitemap_with_documents(
    request: Request,
    body: SitemapRequest,
    config: SiteConfig = Depends(get_site_config),
) -> Response:
    entries = static_entries(config)
    entries += document_entries(body.products, "/products", config)
    entries += document_entries(body.blog_posts, "/blog", config)
    logger.info(
        "Sitemap generated",
        extra={
            "entries": len(entries),
            "products": len(body.products),
            "blog_posts": len(body.blog_posts),
        },
    )
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")


@router.get("/robots.txt", response_class=PlainTextResponse, summary="robots.txt")
@limiter.limit("30/minute")
async def robots(request: Request, config: SiteConfig = Depends(get_site_config)) -> str:
    return generate_robots_txt(config)


@router.get("/locale-switch", summary="Equivalent path in another locale")
@limiter.limit("120/minute")
async def locale_switch(
    request: Request,
    path: str = Query(description="Current site-relative path, e.g. '/fr/products/cocoa'."),
    current: str = Query(description="Locale of the current page."),
    target: str = Query(description="Requested locale. Unknown codes fall back to the default locale."),
    config: SiteConfig = Depends(get_site_config),
) -> dict:
    current_locale = require_locale(current, config)
    target_locale = get_valid_locale(target, config)
    return {
        "locale": target_locale.value,
        "path": switch_locale_path(path, current_locale, target_locale),
    }
