"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the GraphQL API.

Resolvers convert Strawberry inputs to the Pydantic schemas and call the
services. Services raise coded LibraryError subclasses; graphql-core copies
their `extensions` into the error entry of the response.
"""

from typing import Any

import strawberry
from strawberry.types import Info

from library_api.graphql.context import GraphQLContext
from library_api.graphql.types.author import AuthorInput, AuthorType, author_to_graphql
from library_api.graphql.types.book import (
    BookInput,
    BookType,
    BookUpdateInput,
    book_to_graphql,
)
from library_api.schemas import AuthorCreate, AuthorUpdate, BookCreate, BookUpdate
from library_api.services import authors as author_service
from library_api.services import books as book_service
from library_api.services import maintenance


def provided_fields(input: Any) -> dict[str, Any]:
    """Fields of a Strawberry input that the client actually sent."""
    return {
        name: value
        for name, value in vars(input).items()
        if value is not strawberry.UNSET
    }


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.
    """

    # =========================================================================
    # Book Mutations
    # =========================================================================

    @strawberry.mutation(description="Create a new book")
    def add_book(self, info: Info[GraphQLContext, None], input: BookInput) -> BookType:
        """
        Create a new book.

        New books are always available and get the next free ID.
        """
        data = BookCreate(**provided_fields(input))
        book = book_service.add_book(info.context.store, data)
        return book_to_graphql(book)

    @strawberry.mutation(description="Update an existing book")
    def update_book(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
        input: BookUpdateInput,
    ) -> BookType:
        """Merge the provided fields over an existing book."""
        data = BookUpdate(**provided_fields(input))
        book = book_service.update_book(info.context.store, id, data)
        return book_to_graphql(book)

    @strawberry.mutation(description="Delete a book")
    def delete_book(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> bool:
        """
        Delete a book.

        Returns True if deleted, False if no book had that ID.
        """
        return book_service.delete_book(info.context.store, id)

    @strawberry.mutation(description="Flip a book's availability")
    def toggle_book_availability(
        self, info: Info[GraphQLContext, None], id: strawberry.ID
    ) -> BookType:
        book = book_service.toggle_book_availability(info.context.store, id)
        return book_to_graphql(book)

    # =========================================================================
    # Author Mutations
    # =========================================================================

    @strawberry.mutation(description="Create a new author")
    def add_author(self, info: Info[GraphQLContext, None], input: AuthorInput) -> AuthorType:
        data = AuthorCreate(**provided_fields(input))
        author = author_service.add_author(info.context.store, data)
        return author_to_graphql(author)

    @strawberry.mutation(description="Update an existing author")
    def update_author(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
        input: AuthorInput,
    ) -> AuthorType:
        data = AuthorUpdate(**provided_fields(input))
        author = author_service.update_author(info.context.store, id, data)
        return author_to_graphql(author)

    @strawberry.mutation(description="Delete an author without books")
    def delete_author(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> bool:
        """
        Delete an author.

        Returns True if deleted, False if no author had that ID.
        Fails with DEPENDENCY_CONFLICT while the author still has books.
        """
        return author_service.delete_author(info.context.store, id)

    # =========================================================================
    # Utility Mutations
    # =========================================================================

    @strawberry.mutation(description="Restore the seed dataset")
    def reset_data(self, info: Info[GraphQLContext, None]) -> str:
        return maintenance.reset_data(info.context.store)
