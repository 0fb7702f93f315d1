"""XML sitemap generation for every served locale."""

from typing import Iterable, List, Sequence

from lxml import etree

from app.config import SiteConfig
from app.models.sitemap import SitemapDocument, SitemapEntry, StaticPage
from app.services.hreflang import generate_hreflang_tags
from app.services.urls import build_locale_url

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"

_NSMAP = {None: SITEMAP_NS, "xhtml": XHTML_NS}

STATIC_PAGES: Sequence[StaticPage] = (
    StaticPage(path="", priority=1.0, change_frequency="daily"),
    StaticPage(path="/products", priority=0.9, change_frequency="daily"),
    StaticPage(path="/solutions", priority=0.8, change_frequency="monthly"),
    StaticPage(path="/quality", priority=0.8, change_frequency="monthly"),
    StaticPage(path="/traceability", priority=0.8, change_frequency="monthly"),
    StaticPage(path="/about", priority=0.7, change_frequency="monthly"),
    StaticPage(path="/resources", priority=0.7, change_frequency="weekly"),
    StaticPage(path="/blog", priority=0.8, change_frequency="daily"),
    StaticPage(path="/contact", priority=0.9, change_frequency="monthly"),
    StaticPage(path="/rfq", priority=0.9, change_frequency="monthly"),
)

_DOCUMENT_PRIORITY = 0.7
_DOCUMENT_CHANGE_FREQUENCY = "weekly"


def static_entries(
    config: SiteConfig, pages: Iterable[StaticPage] = STATIC_PAGES
) -> List[SitemapEntry]:
    """One entry per (page, locale), each carrying the page's hreflang alternates."""
    entries: List[SitemapEntry] = []
    for page in pages:
        alternates = generate_hreflang_tags(page.path, config)
        for locale in config.locales:
            entries.append(
                SitemapEntry(
                    url=build_locale_url(config.origin, locale, page.path),
                    change_frequency=page.change_frequency,
                    priority=page.priority,
                    alternates=alternates,
                )
            )
    return entries


def document_entries(
    documents: Iterable[SitemapDocument], base_path: str, config: SiteConfig
) -> List[SitemapEntry]:
    """Entries for CMS documents published under *base_path* (e.g. ``/products``).

    Slugs are localised, so no hreflang alternates are attached.
    """
    entries: List[SitemapEntry] = []
    for doc in documents:
        for locale in config.locales:
            slug = doc.slugs.get(locale.value)
            if not slug:
                continue
            entries.append(
                SitemapEntry(
                    url=build_locale_url(config.origin, locale, f"{base_path}/{slug}"),
                    last_modified=doc.updated_at,
                    change_frequency=_DOCUMENT_CHANGE_FREQUENCY,
                    priority=_DOCUMENT_PRIORITY,
                )
            )
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    """Serialise *entries* as a sitemaps.org ``<urlset>`` document."""
    urlset = etree.Element(f"{{{SITEMAP_NS}}}urlset", nsmap=_NSMAP)
    for entry in entries:
        url_el = etree.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
        etree.SubElement(url_el, f"{{{SITEMAP_NS}}}loc").text = entry.url
        if entry.last_modified is not None:
            etree.SubElement(url_el, f"{{{SITEMAP_NS}}}lastmod").text = (
                entry.last_modified.isoformat()
            )
        etree.SubElement(url_el, f"{{{SITEMAP_NS}}}changefreq").text = entry.change_frequency
        etree.SubElement(url_el, f"{{{SITEMAP_NS}}}priority").text = f"{entry.priority:.1f}"
        for tag in entry.alternates:
            etree.SubElement(
                url_el,
                f"{{{XHTML_NS}}}link",
                {"rel": "alternate", "hreflang": tag.hreflang, "href": tag.href},
            )

    body = etree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
