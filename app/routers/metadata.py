import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.config import SiteConfig, UnknownLocaleError
from app.dependencies import get_site_config
from app.models.metadata import HreflangTag, MetadataRecord, MetaTagsConfig
from app.services.hreflang import generate_hreflang_tags
from app.services.metadata import generate_meta_tags

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/metadata",
    response_model=MetadataRecord,
    response_model_exclude_none=True,
    summary="Generate page metadata",
    description=(
        "Returns title, description, robots directive, canonical URL, hreflang "
        "alternates, Open Graph and Twitter Card metadata for one page in one locale."
    ),
)
@limiter.limit("120/minute")
async def metadata(
    request: Request,
    body: MetaTagsConfig,
    config: SiteConfig = Depends(get_site_config),
) -> MetadataRecord:
    logger.info("Metadata request received", extra={"locale": body.locale.value, "path": body.path})
    _check_path(body.path)
    try:
        return generate_meta_tags(body, config)
    except UnknownLocaleError as exc:
        logger.warning("Metadata requested for unserved locale: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc))


@router.get(
    "/hreflang",
    response_model=List[HreflangTag],
    summary="List hreflang alternates for a path",
)
@limiter.limit("120/minute")
async def hreflang(
    request: Request,
    path: str = Query(default="", description="Page path after the locale segment."),
    config: SiteConfig = Depends(get_site_config),
) -> List[HreflangTag]:
    _check_path(path)
    return generate_hreflang_tags(path, config)


def _check_path(path: str) -> None:
    """Reject paths that are neither empty nor rooted."""
    if path and not path.startswith("/"):
        raise HTTPException(status_code=400, detail="Path must be empty or start with '/'.")
