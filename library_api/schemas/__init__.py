"""
Pydantic Schemas Package

Input schemas for the mutation services.

The schemas only carry types: business checks (uniqueness, ISBN shape, year
range) are done by the services so that every failure surfaces as a coded
domain error rather than a generic Pydantic ValidationError.

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a new record
- XxxUpdate: Fields accepted when updating (all optional; only fields that
  were explicitly provided are merged)
"""

from library_api.schemas.author import AuthorCreate, AuthorUpdate
from library_api.schemas.book import BookCreate, BookUpdate

__all__ = [
    "AuthorCreate",
    "AuthorUpdate",
    "BookCreate",
    "BookUpdate",
]
