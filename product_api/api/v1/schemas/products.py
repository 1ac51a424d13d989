# api/v1/schemas/products.py
from pydantic import BaseModel
from typing import List, Optional


class FieldErrorOut(BaseModel):
    loc: List[str | int]
    msg: str
    type: str


class ErrorResponse(BaseModel):
    message: str
    errors: Optional[List[FieldErrorOut]] = None


class DeleteResult(BaseModel):
    message: str
    id: str
