"""
Author Model

Represents an author held in the in-memory store.

Records are Pydantic models so seed data and merged updates go through the
same type coercion as the mutation inputs.
"""

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """
    Author record.

    Relationships:
    - books: resolved at read time by filtering the book collection on
      `author_id`; nothing is stored on the author itself.

    Example:
        author = Author(id=3, name="George Orwell", birth_year=1903)
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(..., description="Unique identifier, never reused until reset")
    name: str = Field(..., description="Author's full name")
    bio: str | None = Field(default=None, description="Author biography")
    birth_year: int | None = Field(default=None, description="Year of birth")

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.name}')>"
