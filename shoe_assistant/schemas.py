from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


MATERIAL_SLOTS = ("upper", "lining", "insole", "outsole", "laces", "tongue")

CSV_COLUMNS = {
    "handle": "Handle",
    "title": "Title",
    "body": "Body (HTML)",
    "tags": "Tags",
    "vendor": "Vendor",
    "variant_price": "Variant Price",
    "image_src": "Image Src",
}


class ProductRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    handle: str = ""
    title: str = ""
    body: str = ""
    tags: str = ""
    vendor: str = ""
    variant_price: str = ""
    image_src: str = ""

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ProductRecord":
        values = {}
        for field_name, column in CSV_COLUMNS.items():
            value = row.get(column)
            values[field_name] = "" if value is None else str(value)
        return cls(**values)


class Materials(BaseModel):
    upper: Optional[str] = None
    lining: Optional[str] = None
    insole: Optional[str] = None
    outsole: Optional[str] = None
    laces: Optional[str] = None
    tongue: Optional[str] = None

    @field_validator(*MATERIAL_SLOTS, mode="before")
    @classmethod
    def _only_strings(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    def values_in_slot_order(self) -> list[Optional[str]]:
        return [getattr(self, slot) for slot in MATERIAL_SLOTS]


class CleaningRecommendation(BaseModel):
    affected_part: Optional[str] = Field(default=None, alias="affectedPart")
    recommendations: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("affected_part", mode="before")
    @classmethod
    def _part_as_string(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("recommendations", mode="before")
    @classmethod
    def _string_items(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]


class StructuredDescription(BaseModel):
    """Structured shoe description as returned by the vision model.

    Every field is optional. Keys outside the known ones (``generalCare`` and
    anything else the model adds) are kept so the full answer can be echoed
    back to the client.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    brand_and_model: Optional[str] = Field(default=None, alias="brandAndModel")
    materials: Optional[Materials] = None
    cleaning_recommendations: Optional[list[CleaningRecommendation]] = Field(
        default=None, alias="cleaningRecommendations"
    )
    recommended_tags: Optional[list[str]] = Field(default=None, alias="recommendedTags")

    @field_validator("brand_and_model", mode="before")
    @classmethod
    def _brand_as_string(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("materials", mode="before")
    @classmethod
    def _materials_mapping(cls, value: Any) -> Any:
        return value if isinstance(value, (dict, Materials)) else None

    @field_validator("cleaning_recommendations", mode="before")
    @classmethod
    def _recommendation_entries(cls, value: Any) -> Optional[list]:
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, (dict, CleaningRecommendation))]

    @field_validator("recommended_tags", mode="before")
    @classmethod
    def _string_tags(cls, value: Any) -> Optional[list[str]]:
        if not isinstance(value, list):
            return None
        return [item for item in value if isinstance(item, str)]


class ProductSummary(BaseModel):
    id: str
    title: str
    price: str
    image: str
    vendor: str
    url: str


class AnalyzeShoeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base64_image: Optional[str] = Field(default=None, alias="base64Image")
    problem_description: Optional[str] = Field(default=None, alias="problemDescription")
    affected_part: Optional[str] = Field(default=None, alias="affectedPart")
    brand: Optional[str] = None
    language: Optional[str] = "en"
