"""Tests for the Schema.org JSON-LD generators in app.services.schema."""

import json

import pytest
from pydantic import ValidationError

from app.config import Locale, SiteConfig, UnknownLocaleError, build_config
from app.models.schema_data import (
    AggregateRatingData,
    ArticleSchemaData,
    AuthorData,
    BreadcrumbItem,
    OfferData,
    OrganizationData,
    ProductSchemaData,
    PublisherData,
    SellerData,
)
from app.services.schema import (
    default_organization,
    generate_article_schema,
    generate_breadcrumb_schema,
    generate_organization_schema,
    generate_product_schema,
    generate_website_schema,
)

_CONFIG = SiteConfig()


def _product(**overrides) -> ProductSchemaData:
    values = {
        "name": "Cocoa",
        "description": "Fermented, sun-dried cocoa beans.",
        "image": ["https://x/1.jpg"],
        "category": "Cocoa",
    }
    values.update(overrides)
    return ProductSchemaData(**values)


def _article(**overrides) -> ArticleSchemaData:
    values = {
        "title": "Harvest report",
        "description": "Notes from the main crop.",
        "image": "https://x/harvest.jpg",
        "date_published": "2024-03-01",
        "author": AuthorData(name="Awa Ndiaye"),
    }
    values.update(overrides)
    return ArticleSchemaData(**values)


class TestOrganizationSchema:
    def test_minimal_record(self):
        data = OrganizationData(name="Afrexia", description="Exporter")
        schema = generate_organization_schema(data, Locale.EN, _CONFIG)
        assert schema == {
            "@context": "https://schema.org",
            "@type": "Organization",
            "name": "Afrexia",
            "url": "https://afrexia.com/en",
            "logo": "https://afrexia.com/assets/logo.png",
            "description": "Exporter",
            "sameAs": [],
        }

    def test_default_organization_is_localised(self):
        fr = generate_organization_schema(default_organization(Locale.FR, _CONFIG), Locale.FR, _CONFIG)
        en = generate_organization_schema(default_organization(Locale.EN, _CONFIG), Locale.EN, _CONFIG)
        assert fr["description"].startswith("Exportateur")
        assert en["description"].startswith("African Agricultural")
        assert fr["address"] == {"@type": "PostalAddress", "addressCountry": "CM", "addressLocality": "Douala"}
        assert en["contactPoint"] == {
            "@type": "ContactPoint",
            "contactType": "sales",
            "email": "contact@afrexia.com",
        }

    @pytest.mark.parametrize("locale", list(Locale))
    def test_default_organization_exists_for_every_locale(self, locale):
        schema = generate_organization_schema(default_organization(locale, _CONFIG), locale, _CONFIG)
        assert schema["description"]
        assert schema["url"] == f"https://afrexia.com/{locale.value}"

    def test_custom_logo_and_same_as(self):
        data = OrganizationData(
            name="Afrexia",
            description="Exporter",
            logo="https://cdn.example.com/logo.svg",
            same_as=["https://www.linkedin.com/company/afrexia"],
        )
        schema = generate_organization_schema(data, Locale.DE, _CONFIG)
        assert schema["logo"] == "https://cdn.example.com/logo.svg"
        assert schema["sameAs"] == ["https://www.linkedin.com/company/afrexia"]

    def test_missing_name_is_a_contract_violation(self):
        with pytest.raises(ValidationError):
            OrganizationData(description="Exporter")


class TestProductSchema:
    def test_sample_scenario_without_offers(self):
        schema = generate_product_schema(_product(), "en", "premium-cocoa", _CONFIG)
        assert schema["url"] == "https://afrexia.com/en/products/premium-cocoa"
        assert "offers" not in schema
        assert "aggregateRating" not in schema

    def test_core_fields(self):
        schema = generate_product_schema(_product(), Locale.FR, "cacao", _CONFIG)
        assert schema["@context"] == "https://schema.org"
        assert schema["@type"] == "Product"
        assert schema["name"] == "Cocoa"
        assert schema["image"] == ["https://x/1.jpg"]
        assert schema["category"] == "Cocoa"

    def test_brand_falls_back_to_site_name(self):
        schema = generate_product_schema(_product(), Locale.EN, "cocoa", _CONFIG)
        assert schema["brand"] == {"@type": "Brand", "name": "Afrexia"}

    def test_explicit_brand(self):
        schema = generate_product_schema(_product(brand="Kribi Gold"), Locale.EN, "cocoa", _CONFIG)
        assert schema["brand"]["name"] == "Kribi Gold"

    def test_offer_included_when_supplied(self):
        offers = OfferData(
            availability="InStock",
            price="2450.00",
            price_currency="EUR",
            seller=SellerData(name="Afrexia SARL"),
        )
        schema = generate_product_schema(_product(offers=offers), Locale.EN, "cocoa", _CONFIG)
        assert schema["offers"] == {
            "@type": "Offer",
            "price": "2450.00",
            "priceCurrency": "EUR",
            "availability": "https://schema.org/InStock",
            "seller": {"@type": "Organization", "name": "Afrexia SARL"},
        }

    def test_offer_defaults(self):
        schema = generate_product_schema(
            _product(offers=OfferData(availability="PreOrder")), Locale.EN, "cocoa", _CONFIG
        )
        offer = schema["offers"]
        assert "price" not in offer
        assert offer["priceCurrency"] == "USD"
        assert offer["availability"] == "https://schema.org/PreOrder"
        assert offer["seller"]["name"] == "Afrexia"

    def test_zero_rating_is_kept(self):
        rating = AggregateRatingData(rating_value=0, review_count=0)
        schema = generate_product_schema(_product(aggregate_rating=rating), Locale.EN, "cocoa", _CONFIG)
        assert schema["aggregateRating"] == {
            "@type": "AggregateRating",
            "ratingValue": 0,
            "reviewCount": 0,
        }

    def test_unserved_locale_rejected(self):
        config = build_config(locales=(Locale.FR,), default_locale=Locale.FR)
        with pytest.raises(UnknownLocaleError):
            generate_product_schema(_product(), Locale.EN, "cocoa", config)

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            ProductSchemaData(name="Cocoa", description="...", image=[])


class TestArticleSchema:
    def test_core_fields(self):
        schema = generate_article_schema(_article(), Locale.EN, "harvest-report", _CONFIG)
        assert schema["@type"] == "Article"
        assert schema["headline"] == "Harvest report"
        assert schema["image"] == "https://x/harvest.jpg"
        assert schema["author"] == {"@type": "Person", "name": "Awa Ndiaye"}
        assert schema["mainEntityOfPage"] == {
            "@type": "WebPage",
            "@id": "https://afrexia.com/en/blog/harvest-report",
        }

    def test_date_modified_falls_back_to_published(self):
        schema = generate_article_schema(_article(), Locale.EN, "a", _CONFIG)
        assert schema["dateModified"] == "2024-03-01"

    def test_date_modified_when_supplied(self):
        schema = generate_article_schema(_article(date_modified="2024-04-10"), Locale.EN, "a", _CONFIG)
        assert schema["datePublished"] == "2024-03-01"
        assert schema["dateModified"] == "2024-04-10"

    def test_author_url(self):
        author = AuthorData(name="Awa Ndiaye", url="https://afrexia.com/en/team/awa")
        schema = generate_article_schema(_article(author=author), Locale.EN, "a", _CONFIG)
        assert schema["author"]["url"] == "https://afrexia.com/en/team/awa"

    def test_publisher_omitted_when_absent(self):
        schema = generate_article_schema(_article(), Locale.EN, "a", _CONFIG)
        assert "publisher" not in schema

    def test_publisher_fields_fall_back_to_site(self):
        schema = generate_article_schema(_article(publisher=PublisherData()), Locale.EN, "a", _CONFIG)
        assert schema["publisher"] == {
            "@type": "Organization",
            "name": "Afrexia",
            "logo": {"@type": "ImageObject", "url": "https://afrexia.com/assets/logo.png"},
        }

    def test_explicit_publisher(self):
        publisher = PublisherData(name="Cocoa Weekly", logo="https://cw.example/logo.png")
        schema = generate_article_schema(_article(publisher=publisher), Locale.ES, "a", _CONFIG)
        assert schema["publisher"]["name"] == "Cocoa Weekly"
        assert schema["publisher"]["logo"]["url"] == "https://cw.example/logo.png"

    def test_missing_author_rejected(self):
        with pytest.raises(ValidationError):
            ArticleSchemaData(title="t", description="d", image="i", date_published="2024-01-01")


class TestBreadcrumbSchema:
    _ITEMS = [
        BreadcrumbItem(name="Home", path=""),
        BreadcrumbItem(name="Products", path="/products"),
        BreadcrumbItem(name="Cocoa", path="/products/cocoa"),
    ]

    def test_positions_are_sequential(self):
        schema = generate_breadcrumb_schema(self._ITEMS, Locale.EN, _CONFIG)
        assert [e["position"] for e in schema["itemListElement"]] == [1, 2, 3]

    @pytest.mark.parametrize("locale", list(Locale))
    def test_item_urls_contain_locale_and_path(self, locale):
        schema = generate_breadcrumb_schema(self._ITEMS, locale, _CONFIG)
        for index, element in enumerate(schema["itemListElement"]):
            assert element["position"] == index + 1
            assert element["@type"] == "ListItem"
            assert f"/{locale.value}" in element["item"]
            assert element["item"].endswith(self._ITEMS[index].path)

    def test_input_order_preserved_without_filtering(self):
        items = [BreadcrumbItem(name="", path="/z"), BreadcrumbItem(name="A", path="/a")]
        elements = generate_breadcrumb_schema(items, Locale.FR, _CONFIG)["itemListElement"]
        assert [(e["position"], e["name"], e["item"]) for e in elements] == [
            (1, "", "https://afrexia.com/fr/z"),
            (2, "A", "https://afrexia.com/fr/a"),
        ]

    def test_long_list(self):
        items = [BreadcrumbItem(name=f"Level {i}", path=f"/l{i}") for i in range(25)]
        elements = generate_breadcrumb_schema(items, Locale.DE, _CONFIG)["itemListElement"]
        assert [e["position"] for e in elements] == list(range(1, 26))

    def test_empty_list(self):
        assert generate_breadcrumb_schema([], Locale.EN, _CONFIG)["itemListElement"] == []


class TestWebSiteSchema:
    def test_search_action(self):
        schema = generate_website_schema(Locale.RU, _CONFIG)
        assert schema == {
            "@context": "https://schema.org",
            "@type": "WebSite",
            "name": "Afrexia",
            "url": "https://afrexia.com/ru",
            "potentialAction": {
                "@type": "SearchAction",
                "target": {
                    "@type": "EntryPoint",
                    "urlTemplate": "https://afrexia.com/ru/search?q={search_term_string}",
                },
                "query-input": "required name=search_term_string",
            },
        }

    def test_json_serialisable(self):
        assert json.loads(json.dumps(generate_website_schema(Locale.EN, _CONFIG)))["@type"] == "WebSite"
