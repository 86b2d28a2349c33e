"""Product and category schemas.

Products travel through forms and the JSON API under their UI names
(``sizeRange``, ``pressureRating``...) and through the store under column
names (``size_range``, ``pressure_rating``...). ``PRODUCT_COLUMNS`` is the
single source of that translation.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# UI field name -> store column
PRODUCT_COLUMNS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "description": "description",
    "category": "category",
    "material": "material",
    "sizeRange": "size_range",
    "pressureRating": "pressure_rating",
    "temperatureRange": "temperature_range",
    "image": "image",
    "applications": "applications",
    "additionalSpecs": "additional_specs",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

REQUIRED_PRODUCT_FIELDS = (
    "name",
    "description",
    "category",
    "material",
    "sizeRange",
    "pressureRating",
    "temperatureRange",
)


def split_lines(text: Optional[str]) -> Optional[list[str]]:
    """Turn newline-delimited form text into a list, dropping blank lines."""
    if not text:
        return None
    items = [line.strip() for line in text.split("\n") if line.strip()]
    return items or None


def to_columns(fields: dict[str, Any]) -> dict[str, Any]:
    """Rename UI-named keys to store columns. Unknown keys are dropped."""
    return {PRODUCT_COLUMNS[k]: v for k, v in fields.items() if k in PRODUCT_COLUMNS}


def to_fields(row: dict[str, Any]) -> dict[str, Any]:
    """Rename store columns back to UI names."""
    reverse = {column: field for field, column in PRODUCT_COLUMNS.items()}
    return {reverse[k]: v for k, v in row.items() if k in reverse}


class ProductIn(BaseModel):
    """Validated product form/API input (add and update)."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    category: str
    material: str
    size_range: str = Field(alias="sizeRange")
    pressure_rating: str = Field(alias="pressureRating")
    temperature_range: str = Field(alias="temperatureRange")
    image: Optional[str] = None
    applications: Optional[list[str]] = None
    additional_specs: Optional[list[str]] = Field(default=None, alias="additionalSpecs")

    @field_validator(
        "name",
        "description",
        "category",
        "material",
        "size_range",
        "pressure_rating",
        "temperature_range",
    )
    @classmethod
    def _required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("required")
        return v

    @field_validator("image")
    @classmethod
    def _blank_image(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("applications", "additional_specs", mode="before")
    @classmethod
    def _lines(cls, v: Any) -> Any:
        if isinstance(v, str):
            return split_lines(v)
        if isinstance(v, list):
            return [str(item).strip() for item in v if str(item).strip()] or None
        return v

    @classmethod
    def from_form(cls, form: dict[str, Any]) -> "ProductIn":
        """Build from UI-named form data (applications/specs as textarea text)."""
        return cls.model_validate(form)

    def to_row(self) -> dict[str, Any]:
        """Store row keyed by column name."""
        return to_columns(self.model_dump(by_alias=True))


class Product(BaseModel):
    """Product as cached from the store; serializes under UI names."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    category: str
    material: str
    size_range: str = Field(alias="sizeRange")
    pressure_rating: str = Field(alias="pressureRating")
    temperature_range: str = Field(alias="temperatureRange")
    image: Optional[str] = None
    applications: Optional[list[str]] = None
    additional_specs: Optional[list[str]] = Field(default=None, alias="additionalSpecs")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Product":
        return cls.model_validate(to_fields(row))

    def to_form(self) -> dict[str, str]:
        """UI-named values for pre-filling the edit form."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "material": self.material,
            "sizeRange": self.size_range,
            "pressureRating": self.pressure_rating,
            "temperatureRange": self.temperature_range,
            "image": self.image or "",
            "applications": "\n".join(self.applications or []),
            "additionalSpecs": "\n".join(self.additional_specs or []),
        }


class Category(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
