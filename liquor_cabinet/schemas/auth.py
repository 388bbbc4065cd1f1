from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


def _normalize_email(v: str) -> str:
    return v.strip().lower() if isinstance(v, str) else v


class Credentials(BaseModel):
    """Email insensible à la casse : une seule cave par adresse"""

    email: EmailStr
    password: str

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)


class RegisterRequest(Credentials):
    # bcrypt ignore au-delà de 72 octets
    password: str = Field(..., min_length=8, max_length=72)
    name: Optional[str] = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def blank_name_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return v.strip() or None


class LoginRequest(Credentials):
    pass


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    refresh_token: str
