from typing import Any

from pydantic import BaseModel


class MissingList(BaseModel):
    country: str
    missing: list[str]


class MissingChange(BaseModel):
    # validated by the store so a bad value gets the same 400 as a missing one
    product: Any = None


class MissingChangeResult(BaseModel):
    country: str
    product: str
    success: bool = True
