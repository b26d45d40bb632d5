"""
GraphQL Author Type

Defines the Author type and its input for GraphQL operations.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from library_api.graphql.context import GraphQLContext
from library_api.models import Author
from library_api.services import books as book_service

if TYPE_CHECKING:
    from library_api.graphql.types.book import BookType


@strawberry.type(name="Author")
class AuthorType:
    """
    GraphQL type representing a book author.

    `books` is resolved from the store at read time, so it always reflects
    the current book collection (author -> books -> author traversal works
    to any depth).
    """

    id: strawberry.ID
    name: str
    bio: str | None = None
    birth_year: int | None = None

    @strawberry.field(description="Books written by this author")
    def books(
        self, info: Info[GraphQLContext, None]
    ) -> list[Annotated["BookType", strawberry.lazy("library_api.graphql.types.book")]]:
        from library_api.graphql.types.book import book_to_graphql

        books = book_service.books_by_author(info.context.store, self.id)
        return [book_to_graphql(b) for b in books]


@strawberry.input(name="AuthorInput")
class AuthorInput:
    """
    Input type for creating/updating authors.

    Optional fields default to UNSET so an update only merges the fields
    the client actually sent.
    """

    name: str
    bio: str | None = strawberry.UNSET
    birth_year: int | None = strawberry.UNSET


def author_to_graphql(author: Author) -> AuthorType:
    """Convert an Author record to the GraphQL AuthorType."""
    return AuthorType(
        id=strawberry.ID(str(author.id)),
        name=author.name,
        bio=author.bio,
        birth_year=author.birth_year,
    )
