from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, validator

# Column limits: price is DECIMAL(10, 2), image_path is VARCHAR(512)
MAX_PRICE = 100_000_000
MAX_IMAGE_PATH_LENGTH = 512


class BirdBase(BaseModel):
    """Fields shared by every bird payload."""
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    description: str = Field(..., description="Free text description")
    price: float = Field(..., ge=0, lt=MAX_PRICE, allow_inf_nan=False, description="Price")
    image_path: str = Field(
        ..., alias="imagePath", max_length=MAX_IMAGE_PATH_LENGTH, description="Relative image path"
    )

    class Config:
        populate_by_name = True

    @validator("name")
    def name_not_blank(cls, v: str) -> str:  # noqa: N805
        if not v.strip():
            raise ValueError("name must not be empty")
        return v

    @validator("price")
    def price_in_cents(cls, v: float) -> float:  # noqa: N805
        if round(v, 2) != v:
            raise ValueError("price must have at most 2 decimal places")
        return v


class BirdCreate(BirdBase):
    """Bird payload not yet persisted. A set id means upsert in the repository."""
    id: Optional[int] = Field(None, description="Ignored on create")


class Bird(BirdBase):
    """Persisted bird."""
    id: int = Field(..., description="Bird ID")
