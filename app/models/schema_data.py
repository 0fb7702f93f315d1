"""Input records for the Schema.org JSON-LD generators.

Required fields have no default, so constructing a record without them raises
:class:`pydantic.ValidationError` at the call site.  Optional fields default to
``None`` and the generators omit the matching JSON-LD sub-object.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _SchemaInput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class PostalAddressData(_SchemaInput):
    address_country: str
    address_locality: Optional[str] = None
    street_address: Optional[str] = None
    postal_code: Optional[str] = None


class ContactPointData(_SchemaInput):
    contact_type: str
    email: Optional[str] = None
    telephone: Optional[str] = None


class OrganizationData(_SchemaInput):
    name: str
    description: str
    logo: Optional[str] = None
    address: Optional[PostalAddressData] = None
    contact_point: Optional[ContactPointData] = None
    same_as: List[str] = Field(default_factory=list)


class SellerData(_SchemaInput):
    name: Optional[str] = None


class OfferData(_SchemaInput):
    availability: str = Field(
        description="Schema.org ItemAvailability member, e.g. 'InStock' or 'PreOrder'.",
        examples=["InStock", "PreOrder"],
    )
    price: Optional[str] = None
    price_currency: Optional[str] = None
    seller: Optional[SellerData] = None


class AggregateRatingData(_SchemaInput):
    rating_value: float
    review_count: int


class ProductSchemaData(_SchemaInput):
    name: str
    description: str
    image: List[str]
    category: str
    brand: Optional[str] = None
    offers: Optional[OfferData] = None
    aggregate_rating: Optional[AggregateRatingData] = None


class AuthorData(_SchemaInput):
    name: str
    url: Optional[str] = None


class PublisherData(_SchemaInput):
    name: Optional[str] = None
    logo: Optional[str] = None


class ArticleSchemaData(_SchemaInput):
    title: str
    description: str
    image: str
    date_published: str
    date_modified: Optional[str] = None
    author: AuthorData
    publisher: Optional[PublisherData] = None


class BreadcrumbItem(_SchemaInput):
    name: str
    path: str
