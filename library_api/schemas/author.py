"""
Author Input Schemas
"""

from pydantic import BaseModel, Field


class AuthorCreate(BaseModel):
    """Schema for creating a new author."""

    name: str = Field(..., description="Author's full name", examples=["Jane Austen"])
    bio: str | None = Field(default=None, description="Author biography")
    birth_year: int | None = Field(default=None, examples=[1775])


class AuthorUpdate(BaseModel):
    """
    Schema for updating an author.

    Only fields present in `model_fields_set` are merged over the record.
    """

    name: str | None = None
    bio: str | None = None
    birth_year: int | None = None
