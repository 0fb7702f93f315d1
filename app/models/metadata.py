from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.config import Locale


class _CamelModel(BaseModel):
    """Serialises with camelCase keys; accepts either spelling on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MetaTagsConfig(_CamelModel):
    """Per-page input for :func:`app.services.metadata.generate_meta_tags`."""

    title: str
    description: str
    locale: Locale
    path: str = Field(
        default="",
        description="Page path after the locale segment, e.g. '/products'. Empty for the home page.",
        examples=["", "/products", "/blog/sustainability"],
    )
    og_image: Optional[str] = None
    no_index: bool = False
    keywords: Optional[List[str]] = None


class HreflangTag(BaseModel):
    hreflang: str
    href: str


class Robots(_CamelModel):
    index: bool
    follow: bool


class Alternates(_CamelModel):
    canonical: str
    languages: Dict[str, str]
    """Locale code (plus ``"x-default"``) → absolute URL, in registry order."""


class OpenGraphImage(_CamelModel):
    url: str
    width: int = 1200
    height: int = 630
    alt: str


class OpenGraph(_CamelModel):
    title: str
    description: str
    url: str
    site_name: str
    locale: str
    type: Literal["website"] = "website"
    images: List[OpenGraphImage]


class TwitterCard(_CamelModel):
    card: Literal["summary_large_image"] = "summary_large_image"
    title: str
    description: str
    images: List[str]


class MetadataRecord(_CamelModel):
    """Complete head metadata for one page in one locale."""

    title: str
    description: str
    keywords: Optional[str] = None
    robots: Robots
    alternates: Alternates
    open_graph: OpenGraph
    twitter: TwitterCard
