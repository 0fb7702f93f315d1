from typing import List

from pydantic import BaseModel, Field


class HtmlValidationRequest(BaseModel):
    html: str = Field(description="Rendered page HTML.")


class HeadingModel(BaseModel):
    level: int
    text: str
    position: int


class CheckResult(BaseModel):
    valid: bool
    errors: List[str]


class HtmlValidationResponse(BaseModel):
    headings: List[HeadingModel]
    heading_hierarchy: CheckResult
    semantic_structure: CheckResult
    has_semantic_elements: bool
