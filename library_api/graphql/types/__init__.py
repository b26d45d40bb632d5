"""
GraphQL Types Package

This package contains all GraphQL type definitions that map to the
in-memory records. Types are defined using Strawberry's decorator syntax.

Types defined here:
- Book: Book with its live author and computed display string
- Author: Author with their live list of books
- Genre: The fixed genre enumeration
- BookConnection / BookEdge / PageInfo: Cursor pagination envelope
- BookInput / BookUpdateInput / AuthorInput: Mutation inputs
"""

from library_api.graphql.types.author import AuthorInput, AuthorType, author_to_graphql
from library_api.graphql.types.book import (
    BookConnection,
    BookEdgeType,
    BookInput,
    BookType,
    BookUpdateInput,
    PageInfoType,
    book_to_graphql,
    page_to_graphql,
)
from library_api.graphql.types.genre import GenreEnum

__all__ = [
    # Book types
    "BookType",
    "BookConnection",
    "BookEdgeType",
    "PageInfoType",
    "BookInput",
    "BookUpdateInput",
    "book_to_graphql",
    "page_to_graphql",
    # Author types
    "AuthorType",
    "AuthorInput",
    "author_to_graphql",
    # Enums
    "GenreEnum",
]
