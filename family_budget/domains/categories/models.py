# family_budget/domains/categories/models.py

from pydantic import BaseModel, Field
from typing import Optional

CATEGORY_TYPES = ("income", "expense")
DEFAULT_COLOR = "#6B7280"


class Category(BaseModel):
    id: int
    name: str
    type: str
    color: str = DEFAULT_COLOR
    description: str = ""


class CategoryCreate(BaseModel):
    name: str = Field(min_length=1, max_length=50)
    type: str
    color: Optional[str] = None
    description: str = Field(default="", max_length=200)


class CategoryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    type: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=200)
