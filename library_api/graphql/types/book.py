"""
GraphQL Book Type

Defines the Book type, its inputs and the pagination connection types.
"""

import strawberry
from strawberry.types import Info

from library_api.exceptions import NotFoundError
from library_api.graphql.context import GraphQLContext
from library_api.graphql.types.author import AuthorType, author_to_graphql
from library_api.graphql.types.genre import GenreEnum
from library_api.models import Book
from library_api.services.books import get_full_data
from library_api.services.pagination import BookPage


@strawberry.type(name="Book")
class BookType:
    """
    GraphQL type representing a book.

    `author` and `fullData` are resolved from the store at read time, so
    editing an author changes what their books report.
    """

    id: strawberry.ID
    title: str
    is_available: bool
    record: strawberry.Private[Book]
    genre: GenreEnum | None = None
    published_year: int | None = None
    pages: int | None = None
    isbn: str | None = None
    summary: str | None = None

    @strawberry.field(description="The author of this book")
    def author(self, info: Info[GraphQLContext, None]) -> AuthorType:
        author = info.context.store.get_author(self.record.author_id)
        if author is None:
            # Only reachable after updateBook pointed the book at a missing author
            raise NotFoundError("Author not found", field="authorId", value=str(self.record.author_id))
        return author_to_graphql(author)

    @strawberry.field(description="Computed display string: '<title> by <author> (<year>)'")
    def full_data(self, info: Info[GraphQLContext, None]) -> str:
        return get_full_data(info.context.store, self.record)


@strawberry.type(name="PageInfo")
class PageInfoType:
    has_next_page: bool
    has_previous_page: bool
    start_cursor: str | None = None
    end_cursor: str | None = None


@strawberry.type(name="BookEdge")
class BookEdgeType:
    """A book paired with its cursor (the book ID as a string)."""

    node: BookType
    cursor: str


@strawberry.type(name="BookConnection")
class BookConnection:
    """
    One page of books.

    Follows the Connection pattern for GraphQL pagination. `totalCount` is
    the size of the whole book list, not of the page.
    """

    edges: list[BookEdgeType]
    page_info: PageInfoType
    total_count: int


@strawberry.input(name="BookInput")
class BookInput:
    """
    Input type for creating a book.
    """

    title: str
    author_id: strawberry.ID
    genre: GenreEnum | None = strawberry.UNSET
    published_year: int | None = strawberry.UNSET
    pages: int | None = strawberry.UNSET
    isbn: str | None = strawberry.UNSET
    summary: str | None = strawberry.UNSET


@strawberry.input(name="BookUpdateInput")
class BookUpdateInput:
    """
    Input type for updating a book.
    All fields are optional; only the ones sent are merged.
    """

    title: str | None = strawberry.UNSET
    author_id: strawberry.ID | None = strawberry.UNSET
    genre: GenreEnum | None = strawberry.UNSET
    published_year: int | None = strawberry.UNSET
    pages: int | None = strawberry.UNSET
    isbn: str | None = strawberry.UNSET
    summary: str | None = strawberry.UNSET
    is_available: bool | None = strawberry.UNSET


def book_to_graphql(book: Book) -> BookType:
    """Convert a Book record to the GraphQL BookType."""
    return BookType(
        id=strawberry.ID(str(book.id)),
        title=book.title,
        is_available=book.is_available,
        record=book,
        genre=book.genre,
        published_year=book.published_year,
        pages=book.pages,
        isbn=book.isbn,
        summary=book.summary,
    )


def page_to_graphql(page: BookPage) -> BookConnection:
    """Convert a BookPage from the pagination service to a BookConnection."""
    return BookConnection(
        edges=[
            BookEdgeType(node=book_to_graphql(edge.node), cursor=edge.cursor)
            for edge in page.edges
        ],
        page_info=PageInfoType(
            has_next_page=page.page_info.has_next_page,
            has_previous_page=page.page_info.has_previous_page,
            start_cursor=page.page_info.start_cursor,
            end_cursor=page.page_info.end_cursor,
        ),
        total_count=page.total_count,
    )
