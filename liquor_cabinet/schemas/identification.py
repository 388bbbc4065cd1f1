from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, Literal

from liquor_cabinet.models.bottle import BOTTLE_CATEGORIES


class IdentifyRequest(BaseModel):
    image: Optional[str] = Field(
        None, description="Data URI : data:<mime>;base64,<payload>"
    )


class BottleIdentification(BaseModel):
    """Proposition du modèle, non persistée tant que l'utilisateur ne confirme pas."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    brand: str
    product_name: str
    category: str
    sub_category: Optional[str] = None
    country_of_origin: Optional[str] = None
    region: Optional[str] = None
    abv: Optional[float] = None
    size_ml: Optional[float] = None
    description: Optional[str] = None
    tasting_notes: Optional[str] = None
    confidence: Literal["high", "medium", "low"]

    @field_validator("category")
    @classmethod
    def normalize_category(cls, v: str) -> str:
        v = v.strip().lower()
        return v if v in BOTTLE_CATEGORIES else "other"

    @field_validator("confidence", mode="before")
    @classmethod
    def normalize_confidence(cls, v):
        return v.strip().lower() if isinstance(v, str) else v
