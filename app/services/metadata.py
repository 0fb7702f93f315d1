"""Page metadata synthesis: title, robots, alternates, Open Graph and Twitter Card."""

from typing import Optional

from app.config import OG_LOCALE_TAGS, SiteConfig, resolve_locale
from app.models.metadata import (
    Alternates,
    MetadataRecord,
    MetaTagsConfig,
    OpenGraph,
    OpenGraphImage,
    Robots,
    TwitterCard,
)
from app.services.hreflang import alternate_languages
from app.services.urls import build_locale_url

OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630


def resolve_image(og_image: Optional[str], config: SiteConfig) -> str:
    """Return *og_image* when set and non-empty, otherwise the site's default share image."""
    if og_image:
        return og_image
    return config.default_og_image_url


def resolve_robots(no_index: bool) -> Robots:
    if no_index:
        return Robots(index=False, follow=False)
    return Robots(index=True, follow=True)


def generate_meta_tags(meta: MetaTagsConfig, config: SiteConfig) -> MetadataRecord:
    """Build the complete metadata record for one page in one locale.

    The result is a pure function of *meta* and *config*.

    Raises:
        UnknownLocaleError: if ``meta.locale`` is not served by *config*.
    """
    locale = resolve_locale(meta.locale, config)

    canonical_url = build_locale_url(config.origin, locale, meta.path)
    languages = alternate_languages(meta.path, config)
    image_url = resolve_image(meta.og_image, config)

    keywords = None
    if meta.keywords is not None:
        keywords = config.keyword_separator.join(meta.keywords)

    return MetadataRecord(
        title=meta.title,
        description=meta.description,
        keywords=keywords,
        robots=resolve_robots(meta.no_index),
        alternates=Alternates(canonical=canonical_url, languages=languages),
        open_graph=OpenGraph(
            title=meta.title,
            description=meta.description,
            url=canonical_url,
            site_name=config.site_name,
            locale=OG_LOCALE_TAGS[locale],
            images=[
                OpenGraphImage(
                    url=image_url,
                    width=OG_IMAGE_WIDTH,
                    height=OG_IMAGE_HEIGHT,
                    alt=meta.title,
                )
            ],
        ),
        twitter=TwitterCard(
            title=meta.title,
            description=meta.description,
            images=[image_url],
        ),
    )
