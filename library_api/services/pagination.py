"""
Pagination Service

Simplified cursor-based pagination over the book list.

A cursor is the book's ID as a string. The window is computed as a
half-open index range [start, end) over the list in insertion order:

1. start = 0, or one past the index of the book matching `after`
2. end = len(books), or the index of the book matching `before`
3. first narrows the window from the front: end = min(start + first, end)
4. last narrows it from the back: start = max(end - last, start)

A cursor that matches no book leaves its boundary at the default (the list
start for `after`, the list end for `before`).
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from library_api.exceptions import InvalidValueError
from library_api.models import Book

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 2


@dataclass
class BookEdge:
    """A book paired with its cursor."""

    node: Book
    cursor: str


@dataclass
class PageInfo:
    has_next_page: bool
    has_previous_page: bool
    start_cursor: str | None = None
    end_cursor: str | None = None


@dataclass
class BookPage:
    """One page of books with its navigation info."""

    edges: list[BookEdge] = field(default_factory=list)
    page_info: PageInfo = field(
        default_factory=lambda: PageInfo(has_next_page=False, has_previous_page=False)
    )
    total_count: int = 0


def to_cursor(book: Book) -> str:
    return str(book.id)


def _cursor_index(books: Sequence[Book], cursor: str) -> int | None:
    for index, book in enumerate(books):
        if to_cursor(book) == cursor:
            return index
    logger.warning(f"Pagination cursor '{cursor}' matches no book; using list boundary")
    return None


def paginate_books(
    books: Sequence[Book],
    first: int | None = DEFAULT_PAGE_SIZE,
    after: str | None = None,
    last: int | None = None,
    before: str | None = None,
) -> BookPage:
    """
    Slice `books` into a page.

    Args:
        books: Full book list in insertion order
        first: Maximum number of books counted from the window start
        after: Exclusive start cursor
        last: Maximum number of books counted from the window end
        before: Exclusive end cursor

    Returns:
        BookPage with edges, page info and the unfiltered total count

    Raises:
        InvalidValueError: If `first` or `last` is negative
    """
    if first is not None and first < 0:
        raise InvalidValueError("first must not be negative", field="first", value=first)
    if last is not None and last < 0:
        raise InvalidValueError("last must not be negative", field="last", value=last)

    total = len(books)
    start = 0
    end = total

    if after is not None:
        after_index = _cursor_index(books, after)
        if after_index is not None:
            start = after_index + 1

    if before is not None:
        before_index = _cursor_index(books, before)
        if before_index is not None:
            end = before_index

    if first is not None:
        end = min(start + first, end)

    if last is not None:
        start = max(end - last, start)

    window = books[start:end] if start < end else []
    edges = [BookEdge(node=book, cursor=to_cursor(book)) for book in window]

    return BookPage(
        edges=edges,
        page_info=PageInfo(
            has_next_page=end < total,
            has_previous_page=start > 0,
            start_cursor=edges[0].cursor if edges else None,
            end_cursor=edges[-1].cursor if edges else None,
        ),
        total_count=total,
    )
