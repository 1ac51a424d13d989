from pydantic import BaseModel, Field, field_validator, ValidationInfo
from typing import Optional
from datetime import datetime


def _clean_name(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("name must not be empty")
    return v


class Product(BaseModel):
    id: str
    name: str
    price: float
    description: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = {"frozen": True, "populate_by_name": True}  # immuable = safe


class ProductCreate(BaseModel):
    """Body of POST /products. id and timestamps are assigned server-side and ignored here."""
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, strict=True, allow_inf_nan=False)
    description: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: str) -> str:
        return _clean_name(v)


class ProductPatch(BaseModel):
    """
    Body of PUT/PATCH /products/{id}. Every field is optional; only the
    fields actually sent are applied. id, createdAt and updatedAt are
    never mutable and are dropped if sent.
    """
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0, strict=True, allow_inf_nan=False)
    description: Optional[str] = None

    model_config = {"extra": "ignore"}

    @field_validator("name", "price")
    @classmethod
    def _required_not_null(cls, v, info: ValidationInfo):
        # explicit null would erase a required field
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        return _clean_name(v)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
