"""Pydantic models for NWS text products."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from forecast.extractor import extract_section
from models.types import ProductID


class Product(BaseModel):
    """A single issued text product (listing entry or full detail)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: ProductID = Field(..., min_length=1)
    wmo_collective_id: str | None = Field(None, alias="wmoCollectiveId")
    issuing_office: str | None = Field(None, alias="issuingOffice")
    issuance_time: str | None = Field(None, alias="issuanceTime")
    product_code: str | None = Field(None, alias="productCode")
    product_name: str | None = Field(None, alias="productName")
    # Listing entries carry no text, only the detail endpoint does
    product_text: str = Field("", alias="productText")

    def get_discussion_section(self, section_name: str) -> str:
        """Extract one named section from this product's text."""
        return extract_section(self.product_text, section_name)


class ProductListing(BaseModel):
    """Product listing response, most recent product first."""

    model_config = ConfigDict(frozen=True)

    products: list[Product] = Field(
        default_factory=list,
        validation_alias=AliasChoices("@graph", "products"),
    )
