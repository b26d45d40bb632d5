"""
Book Input Schemas
"""

from pydantic import BaseModel, Field

from library_api.models.genre import Genre


class BookCreate(BaseModel):
    """
    Schema for creating a new book.

    `author_id` is kept as the raw GraphQL ID string; it is parsed when the
    author reference is checked.
    """

    title: str = Field(..., description="Book title", examples=["1984"])
    author_id: str = Field(..., description="ID of an existing author", examples=["3"])
    genre: Genre | None = None
    published_year: int | None = Field(default=None, examples=[1949])
    pages: int | None = Field(default=None, examples=[328])
    isbn: str | None = Field(default=None, examples=["978-0451524935"])
    summary: str | None = None


class BookUpdate(BaseModel):
    """
    Schema for updating a book.

    All fields are optional. Use `model_dump(exclude_unset=True)` to get
    only the fields the caller provided.
    """

    title: str | None = None
    author_id: str | None = None
    genre: Genre | None = None
    published_year: int | None = None
    pages: int | None = None
    isbn: str | None = None
    summary: str | None = None
    is_available: bool | None = None
