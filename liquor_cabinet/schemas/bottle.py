from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, Literal
from datetime import datetime

from liquor_cabinet.models.bottle import BOTTLE_CATEGORIES


BottleCategory = Literal[
    "whisky",
    "gin",
    "rum",
    "vodka",
    "tequila",
    "brandy",
    "liqueur",
    "wine",
    "beer",
    "other",
]

EventType = Literal["added", "finished", "adjusted"]


def _normalize_category(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip().lower()
    if v not in BOTTLE_CATEGORIES:
        raise ValueError(
            f"Invalid category '{v}'. Expected one of: {', '.join(BOTTLE_CATEGORIES)}"
        )
    return v


class BottleBase(BaseModel):
    sub_category: Optional[str] = Field(None, max_length=100)
    country_of_origin: Optional[str] = Field(None, max_length=100)
    region: Optional[str] = Field(None, max_length=100)
    abv: Optional[float] = Field(None, ge=0, le=100)
    size_ml: Optional[float] = Field(None, gt=0)
    description: Optional[str] = None
    tasting_notes: Optional[str] = None
    notes: Optional[str] = None
    dan_murphys_url: Optional[str] = None
    image_url: Optional[str] = None


class BottleCreate(BottleBase):
    brand: str = Field(..., min_length=1, max_length=200)
    product_name: str = Field(..., min_length=1, max_length=200)
    category: str = Field(..., description="Catégorie de spiritueux")
    quantity: Optional[int] = Field(
        None, ge=0, description="Nombre de bouteilles ajoutées (1 par défaut)"
    )

    @field_validator("brand", "product_name")
    @classmethod
    def strip_names(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Ce champ ne peut pas être vide")
        return v

    @field_validator("category")
    @classmethod
    def validate_category(cls, v):
        return _normalize_category(v)


class BottleUpdate(BottleBase):
    """Mise à jour partielle : seuls les champs fournis sont appliqués."""

    brand: Optional[str] = Field(None, min_length=1, max_length=200)
    product_name: Optional[str] = Field(None, min_length=1, max_length=200)
    category: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)

    event_type: Optional[EventType] = None
    quantity_change: Optional[int] = None

    @field_validator("category")
    @classmethod
    def validate_category(cls, v):
        return _normalize_category(v)

    @model_validator(mode="after")
    def validate_event(self):
        if self.quantity_change is not None and self.event_type is None:
            raise ValueError("quantity_change requires event_type")
        return self

    def field_changes(self) -> dict:
        return self.model_dump(
            exclude_none=True, exclude={"event_type", "quantity_change"}
        )


class BottleResponse(BottleBase):
    id: int
    user_id: int
    brand: str
    product_name: str
    category: str
    quantity: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
