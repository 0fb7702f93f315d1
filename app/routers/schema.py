"""Schema.org JSON-LD endpoints.

Each endpoint returns the JSON-LD object verbatim; embedding it in a
``<script type="application/ld+json">`` tag is up to the caller.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import SiteConfig
from app.dependencies import get_site_config, require_locale
from app.models.schema_data import (
    ArticleSchemaData,
    BreadcrumbItem,
    OrganizationData,
    ProductSchemaData,
)
from app.services.schema import (
    default_organization,
    generate_article_schema,
    generate_breadcrumb_schema,
    generate_organization_schema,
    generate_product_schema,
    generate_website_schema,
)

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter(prefix="/schema")


@router.post("/organization/{locale}", summary="Organization JSON-LD")
@limiter.limit("120/minute")
async def organization(
    request: Request,
    locale: str,
    body: Optional[OrganizationData] = None,
    config: SiteConfig = Depends(get_site_config),
) -> Dict[str, Any]:
    """Without a body, the site's own organisation record is used."""
    resolved = require_locale(locale, config)
    data = body if body is not None else default_organization(resolved, config)
    return generate_organization_schema(data, resolved, config)


@router.post("/product/{locale}/{slug}", summary="Product JSON-LD")
@limiter.limit("120/minute")
async def product(
    request: Request,
    locale: str,
    slug: str,
    body: ProductSchemaData,
    config: SiteConfig = Depends(get_site_config),
) -> Dict[str, Any]:
    resolved = require_locale(locale, config)
    logger.info("Product schema requested", extra={"locale": resolved.value, "slug": slug})
    return generate_product_schema(body, resolved, slug, config)


@router.post("/article/{locale}/{slug}", summary="Article JSON-LD")
@limiter.limit("120/minute")
async def article(
    request: Request,
    locale: str,
    slug: str,
    body: ArticleSchemaData,
    config: SiteConfig = Depends(get_site_config),
) -> Dict[str, Any]:
    resolved = require_locale(locale, config)
    logger.info("Article schema requested", extra={"locale": resolved.value, "slug": slug})
    return generate_article_schema(body, resolved, slug, config)


@router.post("/breadcrumb/{locale}", summary="BreadcrumbList JSON-LD")
@limiter.limit("120/minute")
async def breadcrumb(
    request: Request,
    locale: str,
    body: List[BreadcrumbItem],
    config: SiteConfig = Depends(get_site_config),
) -> Dict[str, Any]:
    resolved = require_locale(locale, config)
    return generate_breadcrumb_schema(body, resolved, config)


@router.get("/website/{locale}", summary="WebSite JSON-LD with search action")
@limiter.limit("120/minute")
async def website(
    request: Request,
    locale: str,
    config: SiteConfig = Depends(get_site_config),
) -> Dict[str, Any]:
    resolved = require_locale(locale, config)
    return generate_website_schema(resolved, config)
