"""
Books Service

Read and write operations on the book collection.

All functions take the store explicitly. Mutations follow a
validate-then-commit order: every check runs before the collection is
touched, so a raised error leaves the store exactly as it was.
"""

import logging

from library_api.exceptions import (
    ConflictError,
    InvalidFormatError,
    InvalidReferenceError,
    InvalidValueError,
    NotFoundError,
    OutOfRangeError,
)
from library_api.models import Author, Book, Genre
from library_api.schemas import BookCreate, BookUpdate
from library_api.services.validation import (
    is_title_taken,
    is_valid_isbn,
    is_valid_page_count,
    is_valid_year,
    parse_id,
)
from library_api.store import LibraryStore

logger = logging.getLogger(__name__)

# Fields that cannot be cleared with an explicit null on update
_REQUIRED_FIELDS = {"title", "author_id", "is_available"}


# =============================================================================
# Derived Fields
# =============================================================================


def format_book_data(book: Book, author: Author | None) -> str:
    """
    Build the display string for a book.

    Example:
        "1984 by George Orwell (1949)"
    """
    author_name = author.name if author and author.name else "Unknown Author"
    year = book.published_year or "Unknown Year"
    return f"{book.title} by {author_name} ({year})"


def get_full_data(store: LibraryStore, book: Book) -> str:
    """Display string using the author as currently stored."""
    return format_book_data(book, store.get_author(book.author_id))


# =============================================================================
# Queries
# =============================================================================


def list_books(store: LibraryStore) -> list[Book]:
    return list(store.books)


def count_books(store: LibraryStore) -> int:
    return len(store.books)


def find_book_by_title(store: LibraryStore, title: str) -> Book | None:
    """First book whose title matches exactly (case-sensitive)."""
    return next((book for book in store.books if book.title == title), None)


def get_book(store: LibraryStore, book_id: str | int) -> Book | None:
    return store.get_book(parse_id(book_id))


def books_by_genre(store: LibraryStore, genre: Genre) -> list[Book]:
    return [book for book in store.books if book.genre == genre]


def books_by_author(store: LibraryStore, author_id: str | int) -> list[Book]:
    parsed = parse_id(author_id)
    if parsed is None:
        return []
    return store.books_by_author(parsed)


def books_by_year(store: LibraryStore, year: int) -> list[Book]:
    return [book for book in store.books if book.published_year == year]


def available_books(store: LibraryStore) -> list[Book]:
    return [book for book in store.books if book.is_available]


def search_books(store: LibraryStore, query: str, genre: Genre | None = None) -> list[Book]:
    """
    Case-insensitive substring search over title and summary.

    Args:
        store: Library store
        query: Text to look for in the title or the summary
        genre: Optional genre every result must also match

    Returns:
        Matching books in insertion order
    """
    needle = query.lower()
    results = [
        book
        for book in store.books
        if needle in book.title.lower() or needle in (book.summary or "").lower()
    ]

    if genre is not None:
        results = [book for book in results if book.genre == genre]

    return results


# =============================================================================
# Mutations
# =============================================================================


def add_book(store: LibraryStore, data: BookCreate) -> Book:
    """
    Create a book.

    Checks run in a fixed order and the first failure is raised:
    title uniqueness, author reference, ISBN, publication year, pages.

    Raises:
        ConflictError: Title already used (case-insensitive)
        InvalidReferenceError: Author does not exist
        InvalidFormatError: ISBN is not 10 or 13 characters
        OutOfRangeError: Publication year outside 1..current year
        InvalidValueError: Page count not positive
    """
    if is_title_taken(store.books, data.title):
        raise ConflictError("Book title must be unique", field="title", value=data.title)

    author_id = parse_id(data.author_id)
    if store.get_author(author_id) is None:
        raise InvalidReferenceError("Author not found", field="authorId", value=data.author_id)

    if data.isbn is not None and not is_valid_isbn(data.isbn):
        raise InvalidFormatError("Invalid ISBN format", field="isbn", value=data.isbn)

    if data.published_year is not None and not is_valid_year(data.published_year):
        raise OutOfRangeError(
            "Invalid publication year", field="publishedYear", value=data.published_year
        )

    if not is_valid_page_count(data.pages):
        raise InvalidValueError("Pages must be a positive number", field="pages", value=data.pages)

    book = Book(
        id=store.next_book_id(),
        title=data.title,
        author_id=author_id,
        genre=data.genre,
        published_year=data.published_year,
        pages=data.pages,
        isbn=data.isbn,
        is_available=True,
        summary=data.summary,
    )
    store.books.append(book)

    logger.info(f"Added book {book.id}: '{book.title}'")
    return book


def update_book(store: LibraryStore, book_id: str | int, data: BookUpdate) -> Book:
    """
    Shallow-merge the provided fields over an existing book.

    The merged record is not re-validated: titles may collide and ISBNs
    may be malformed after an update.

    Raises:
        NotFoundError: No book with that ID
    """
    book = store.get_book(parse_id(book_id))
    if book is None:
        raise NotFoundError("Book not found")

    changes = data.model_dump(exclude_unset=True)
    for name in _REQUIRED_FIELDS:
        if name in changes and changes[name] is None:
            del changes[name]

    if "author_id" in changes:
        parsed = parse_id(changes["author_id"])
        if parsed is None:
            del changes["author_id"]
        else:
            changes["author_id"] = parsed

    updated = book.model_copy(update=changes)
    index = store.books.index(book)
    store.books[index] = updated

    logger.info(f"Updated book {updated.id}: {sorted(changes)}")
    return updated


def delete_book(store: LibraryStore, book_id: str | int) -> bool:
    """
    Remove a book.

    Returns:
        True if a book was removed, False if no book had that ID
    """
    book = store.get_book(parse_id(book_id))
    if book is None:
        return False

    store.books.remove(book)
    logger.info(f"Deleted book {book.id}: '{book.title}'")
    return True


def toggle_book_availability(store: LibraryStore, book_id: str | int) -> Book:
    """
    Flip a book's availability flag in place.

    Raises:
        NotFoundError: No book with that ID
    """
    book = store.get_book(parse_id(book_id))
    if book is None:
        raise NotFoundError("Book not found")

    book.is_available = not book.is_available
    logger.info(f"Book {book.id} is now {'available' if book.is_available else 'unavailable'}")
    return book
