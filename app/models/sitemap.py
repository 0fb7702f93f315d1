from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from app.models.metadata import HreflangTag

ChangeFrequency = Literal["always", "hourly", "daily", "weekly", "monthly", "yearly", "never"]


class StaticPage(BaseModel):
    path: str
    priority: float = Field(ge=0.0, le=1.0)
    change_frequency: ChangeFrequency


class SitemapDocument(BaseModel):
    """A CMS document (product, blog post) with one slug per locale."""

    slugs: Dict[str, str]
    """Locale code → slug.  Locales without a slug are not published."""
    updated_at: datetime


class SitemapEntry(BaseModel):
    url: str
    last_modified: Optional[datetime] = None
    change_frequency: ChangeFrequency
    priority: float
    alternates: List[HreflangTag] = Field(default_factory=list)


class SitemapRequest(BaseModel):
    """CMS documents to publish alongside the static pages."""

    products: List[SitemapDocument] = Field(default_factory=list)
    blog_posts: List[SitemapDocument] = Field(default_factory=list)
