"""
Book Model

Represents a book held in the in-memory store.

The book references exactly one author through `author_id`. The display
string (`fullData` in GraphQL) is not stored; it is computed from the live
author record whenever it is read.
"""

from pydantic import BaseModel, ConfigDict, Field

from library_api.models.genre import Genre


class Book(BaseModel):
    """
    Book record.

    Example:
        book = Book(
            id=3,
            title="1984",
            author_id=3,
            genre=Genre.SCIENCE_FICTION,
            published_year=1949,
        )
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., description="Unique identifier, never reused until reset")
    title: str = Field(..., description="Book title, unique case-insensitively")
    author_id: int = Field(..., description="Identifier of the book's author")
    genre: Genre | None = Field(default=None, description="Genre of the book")
    published_year: int | None = Field(default=None, description="Year of publication")
    pages: int | None = Field(default=None, description="Number of pages")
    isbn: str | None = Field(default=None, description="ISBN-10 or ISBN-13")
    is_available: bool = Field(default=True, description="Whether the book can be lent")
    summary: str | None = Field(default=None, description="Short summary")

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}')>"
