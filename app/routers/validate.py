import logging

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.models.validation import (
    CheckResult,
    HeadingModel,
    HtmlValidationRequest,
    HtmlValidationResponse,
)
from app.services.html_validator import (
    extract_headings,
    has_semantic_elements,
    validate_heading_hierarchy,
    validate_semantic_structure,
)

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
router = APIRouter()


@router.post(
    "/validate/html",
    response_model=HtmlValidationResponse,
    summary="Check heading hierarchy and landmark structure of rendered HTML",
)
@limiter.limit("30/minute")
async def validate_html(request: Request, body: HtmlValidationRequest) -> HtmlValidationResponse:
    headings = extract_headings(body.html)
    hierarchy = validate_heading_hierarchy(headings)
    structure = validate_semantic_structure(body.html)
    if not (hierarchy.valid and structure.valid):
        logger.info(
            "HTML validation failed",
            extra={"errors": hierarchy.errors + structure.errors},
        )
    return HtmlValidationResponse(
        headings=[HeadingModel(**h._asdict()) for h in headings],
        heading_hierarchy=CheckResult(valid=hierarchy.valid, errors=hierarchy.errors),
        semantic_structure=CheckResult(valid=structure.valid, errors=structure.errors),
        has_semantic_elements=has_semantic_elements(body.html),
    )
