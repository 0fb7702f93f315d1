"""Schema.org JSON-LD generators.

Each generator is a pure function returning a plain ``dict`` ready for
``json.dumps``.  Optional sub-objects (``offers``, ``aggregateRating``,
``publisher``, ``address`` ...) are added only when the matching input field
is not ``None``; there are no placeholder objects.
"""

from typing import Any, Dict, List

from app.config import Locale, SiteConfig, resolve_locale
from app.models.schema_data import (
    ArticleSchemaData,
    BreadcrumbItem,
    ContactPointData,
    OrganizationData,
    PostalAddressData,
    ProductSchemaData,
)
from app.services.urls import build_locale_url

SCHEMA_CONTEXT = "https://schema.org"

# Localised organisation description used when no CMS record is available
_ORGANIZATION_DESCRIPTIONS: Dict[Locale, str] = {
    Locale.FR: "Exportateur de commodités agricoles africaines - Cacao, Café, Poivre, Bois, Maïs",
    Locale.EN: "African Agricultural Commodities Exporter - Cocoa, Coffee, Pepper, Wood, Corn",
    Locale.ES: "Exportador de materias primas agrícolas africanas - Cacao, Café, Pimienta, Madera, Maíz",
    Locale.DE: "Exporteur afrikanischer Agrarrohstoffe - Kakao, Kaffee, Pfeffer, Holz, Mais",
    Locale.RU: "Экспортер африканского сельскохозяйственного сырья - Какао, Кофе, Перец, Древесина, Кукуруза",
}


def _base(type_: str) -> Dict[str, Any]:
    return {"@context": SCHEMA_CONTEXT, "@type": type_}


def default_organization(locale: Locale, config: SiteConfig) -> OrganizationData:
    """Return the site's own organisation record for *locale*."""
    return OrganizationData(
        name=config.site_name,
        description=_ORGANIZATION_DESCRIPTIONS[Locale(locale)],
        address=PostalAddressData(address_country="CM", address_locality="Douala"),
        contact_point=ContactPointData(contact_type="sales", email="contact@afrexia.com"),
    )


def _postal_address(address: PostalAddressData) -> Dict[str, Any]:
    out: Dict[str, Any] = {"@type": "PostalAddress", "addressCountry": address.address_country}
    if address.address_locality is not None:
        out["addressLocality"] = address.address_locality
    if address.street_address is not None:
        out["streetAddress"] = address.street_address
    if address.postal_code is not None:
        out["postalCode"] = address.postal_code
    return out


def _contact_point(contact: ContactPointData) -> Dict[str, Any]:
    out: Dict[str, Any] = {"@type": "ContactPoint", "contactType": contact.contact_type}
    if contact.email is not None:
        out["email"] = contact.email
    if contact.telephone is not None:
        out["telephone"] = contact.telephone
    return out


def generate_organization_schema(
    data: OrganizationData, locale: Locale, config: SiteConfig
) -> Dict[str, Any]:
    """Organization JSON-LD for the localised home page."""
    locale = resolve_locale(locale, config)

    out = _base("Organization")
    out["name"] = data.name
    out["url"] = build_locale_url(config.origin, locale, "")
    out["logo"] = data.logo if data.logo is not None else config.logo_url
    out["description"] = data.description
    if data.address is not None:
        out["address"] = _postal_address(data.address)
    if data.contact_point is not None:
        out["contactPoint"] = _contact_point(data.contact_point)
    out["sameAs"] = list(data.same_as)
    return out


def generate_product_schema(
    data: ProductSchemaData, locale: Locale, slug: str, config: SiteConfig
) -> Dict[str, Any]:
    """Product JSON-LD for ``/{locale}/products/{slug}``.

    ``brand`` falls back to the site name.  ``offers`` and ``aggregateRating``
    appear only when supplied.
    """
    locale = resolve_locale(locale, config)

    out = _base("Product")
    out["name"] = data.name
    out["description"] = data.description
    out["image"] = list(data.image)
    out["brand"] = {
        "@type": "Brand",
        "name": data.brand if data.brand is not None else config.site_name,
    }
    out["category"] = data.category
    out["url"] = build_locale_url(config.origin, locale, f"/products/{slug}")

    if data.offers is not None:
        offers = data.offers
        offer: Dict[str, Any] = {"@type": "Offer"}
        if offers.price is not None:
            offer["price"] = offers.price
        offer["priceCurrency"] = offers.price_currency if offers.price_currency is not None else "USD"
        offer["availability"] = f"{SCHEMA_CONTEXT}/{offers.availability}"
        seller_name = None
        if offers.seller is not None:
            seller_name = offers.seller.name
        offer["seller"] = {
            "@type": "Organization",
            "name": seller_name if seller_name is not None else config.site_name,
        }
        out["offers"] = offer

    if data.aggregate_rating is not None:
        out["aggregateRating"] = {
            "@type": "AggregateRating",
            "ratingValue": data.aggregate_rating.rating_value,
            "reviewCount": data.aggregate_rating.review_count,
        }

    return out


def generate_article_schema(
    data: ArticleSchemaData, locale: Locale, slug: str, config: SiteConfig
) -> Dict[str, Any]:
    """Article JSON-LD for the blog post ``/{locale}/blog/{slug}``."""
    locale = resolve_locale(locale, config)

    author: Dict[str, Any] = {"@type": "Person", "name": data.author.name}
    if data.author.url is not None:
        author["url"] = data.author.url

    out = _base("Article")
    out["headline"] = data.title
    out["description"] = data.description
    out["image"] = data.image
    out["datePublished"] = data.date_published
    out["dateModified"] = (
        data.date_modified if data.date_modified is not None else data.date_published
    )
    out["author"] = author

    if data.publisher is not None:
        publisher = data.publisher
        out["publisher"] = {
            "@type": "Organization",
            "name": publisher.name if publisher.name is not None else config.site_name,
            "logo": {
                "@type": "ImageObject",
                "url": publisher.logo if publisher.logo is not None else config.logo_url,
            },
        }

    out["mainEntityOfPage"] = {
        "@type": "WebPage",
        "@id": build_locale_url(config.origin, locale, f"/blog/{slug}"),
    }
    return out


def generate_breadcrumb_schema(
    items: List[BreadcrumbItem], locale: Locale, config: SiteConfig
) -> Dict[str, Any]:
    """BreadcrumbList JSON-LD.  Positions run 1..n in input order."""
    locale = resolve_locale(locale, config)

    out = _base("BreadcrumbList")
    out["itemListElement"] = [
        {
            "@type": "ListItem",
            "position": position,
            "name": item.name,
            "item": build_locale_url(config.origin, locale, item.path),
        }
        for position, item in enumerate(items, start=1)
    ]
    return out


def generate_website_schema(locale: Locale, config: SiteConfig) -> Dict[str, Any]:
    """WebSite JSON-LD with a sitelinks search box action."""
    locale = resolve_locale(locale, config)

    out = _base("WebSite")
    out["name"] = config.site_name
    out["url"] = build_locale_url(config.origin, locale, "")
    out["potentialAction"] = {
        "@type": "SearchAction",
        "target": {
            "@type": "EntryPoint",
            "urlTemplate": build_locale_url(config.origin, locale, "/search")
            + "?q={search_term_string}",
        },
        "query-input": "required name=search_term_string",
    }
    return out
