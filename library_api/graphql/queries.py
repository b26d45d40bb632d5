"""
GraphQL Query Resolvers

Defines all read operations (queries) for the GraphQL API.
Each resolver takes the store from the context and delegates to the
services; none of them mutate state.
"""

import strawberry
from strawberry.types import Info

from library_api.graphql.context import GraphQLContext
from library_api.graphql.types.author import AuthorType, author_to_graphql
from library_api.graphql.types.book import (
    BookConnection,
    BookType,
    book_to_graphql,
    page_to_graphql,
)
from library_api.graphql.types.genre import GenreEnum
from library_api.services import authors as author_service
from library_api.services import books as book_service
from library_api.services.pagination import paginate_books


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that contains the
    GraphQL context with the application's store.
    """

    # =========================================================================
    # Book Queries
    # =========================================================================

    @strawberry.field(description="All books in insertion order")
    def books(self, info: Info[GraphQLContext, None]) -> list[BookType]:
        return [book_to_graphql(b) for b in book_service.list_books(info.context.store)]

    @strawberry.field(description="Number of books")
    def book_count(self, info: Info[GraphQLContext, None]) -> int:
        return book_service.count_books(info.context.store)

    @strawberry.field(description="Find a book by its exact title")
    def find_book(self, info: Info[GraphQLContext, None], title: str) -> BookType | None:
        book = book_service.find_book_by_title(info.context.store, title)
        return book_to_graphql(book) if book else None

    @strawberry.field(description="Get a single book by ID")
    def book_by_id(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> BookType | None:
        book = book_service.get_book(info.context.store, id)
        return book_to_graphql(book) if book else None

    # =========================================================================
    # Author Queries
    # =========================================================================

    @strawberry.field(description="All authors")
    def authors(self, info: Info[GraphQLContext, None]) -> list[AuthorType]:
        return [author_to_graphql(a) for a in author_service.list_authors(info.context.store)]

    @strawberry.field(description="Get a single author by ID")
    def author_by_id(
        self, info: Info[GraphQLContext, None], id: strawberry.ID
    ) -> AuthorType | None:
        author = author_service.get_author(info.context.store, id)
        return author_to_graphql(author) if author else None

    @strawberry.field(description="First author whose name contains the text (case-insensitive)")
    def author_by_name(self, info: Info[GraphQLContext, None], name: str) -> AuthorType | None:
        author = author_service.find_author_by_name(info.context.store, name)
        return author_to_graphql(author) if author else None

    # =========================================================================
    # Filters
    # =========================================================================

    @strawberry.field(description="Books of a genre")
    def books_by_genre(
        self, info: Info[GraphQLContext, None], genre: GenreEnum
    ) -> list[BookType]:
        return [book_to_graphql(b) for b in book_service.books_by_genre(info.context.store, genre)]

    @strawberry.field(description="Books written by an author")
    def books_by_author(
        self, info: Info[GraphQLContext, None], author_id: strawberry.ID
    ) -> list[BookType]:
        books = book_service.books_by_author(info.context.store, author_id)
        return [book_to_graphql(b) for b in books]

    @strawberry.field(description="Books published in a year")
    def books_by_year(self, info: Info[GraphQLContext, None], year: int) -> list[BookType]:
        return [book_to_graphql(b) for b in book_service.books_by_year(info.context.store, year)]

    @strawberry.field(description="Books currently available")
    def available_books(self, info: Info[GraphQLContext, None]) -> list[BookType]:
        return [book_to_graphql(b) for b in book_service.available_books(info.context.store)]

    # =========================================================================
    # Pagination & Search
    # =========================================================================

    @strawberry.field(description="Cursor-paginated book list")
    def books_paginated(
        self,
        info: Info[GraphQLContext, None],
        first: int | None = strawberry.UNSET,
        after: str | None = None,
        last: int | None = None,
        before: str | None = None,
    ) -> BookConnection:
        """
        Get a page of books.

        Args:
            first: Page size from the start of the window
                   (defaults to DEFAULT_PAGE_SIZE; null disables it)
            after: Cursor of the book before the page
            last: Page size from the end of the window
            before: Cursor of the book after the page

        Returns:
            Edges, page info and the total book count
        """
        if first is strawberry.UNSET:
            first = info.context.default_page_size

        page = paginate_books(
            info.context.store.books,
            first=first,
            after=after,
            last=last,
            before=before,
        )
        return page_to_graphql(page)

    @strawberry.field(description="Search titles and summaries, optionally within a genre")
    def search_books(
        self,
        info: Info[GraphQLContext, None],
        query: str,
        genre: GenreEnum | None = None,
    ) -> list[BookType]:
        books = book_service.search_books(info.context.store, query, genre)
        return [book_to_graphql(b) for b in books]
