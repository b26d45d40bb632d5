"""
Validation Service

Pure checks over raw input used by the mutation services.

None of these functions touch the store: the collection a uniqueness or
reference check runs against is passed in by the caller. Mutations run the
checks one at a time and stop at the first failure; the `collect_*`
functions run every check and return all failures, which is what the
store uses to vet a seed dataset before loading it.
"""

import re
from collections.abc import Iterable
from datetime import date
from typing import Any

from library_api.models import Author, Book

MIN_NAME_LENGTH = 2

_ISBN_SEPARATORS = re.compile(r"[-\s]")


def is_title_taken(books: Iterable[Book], title: str) -> bool:
    """Check whether any book already uses `title`, ignoring case."""
    wanted = title.lower()
    return any(book.title.lower() == wanted for book in books)


def is_name_taken(authors: Iterable[Author], name: str) -> bool:
    """Check whether any author already uses `name`, ignoring case."""
    wanted = name.lower()
    return any(author.name.lower() == wanted for author in authors)


def author_exists(authors: Iterable[Author], author_id: int | None) -> bool:
    """Check whether `author_id` resolves to an author in the collection."""
    if author_id is None:
        return False
    return any(author.id == author_id for author in authors)


def is_valid_isbn(isbn: str) -> bool:
    """
    Check the shape of an ISBN.

    Hyphens and whitespace are stripped; the remainder must be exactly 10
    or 13 characters long. The checksum digit is not verified.
    """
    cleaned = _ISBN_SEPARATORS.sub("", isbn)
    return len(cleaned) in (10, 13)


def is_valid_year(year: int, current_year: int | None = None) -> bool:
    """
    Check that `year` lies between 1 and the current calendar year.

    The current year is read at call time unless given explicitly.
    """
    if current_year is None:
        current_year = date.today().year
    return 1 <= year <= current_year


def is_valid_page_count(pages: int | None) -> bool:
    """A page count is valid when omitted or strictly positive."""
    return pages is None or pages > 0


def is_valid_name(name: str) -> bool:
    """An author name needs at least two characters once trimmed."""
    return len(name.strip()) >= MIN_NAME_LENGTH


def parse_id(raw_id: Any) -> int | None:
    """
    Parse a GraphQL ID into an integer.

    Returns None for values that are not integers, so a malformed ID is
    treated the same as an ID that matches nothing.
    """
    if isinstance(raw_id, bool):
        return None
    if isinstance(raw_id, int):
        return raw_id
    try:
        return int(str(raw_id).strip())
    except (TypeError, ValueError):
        return None


def collect_book_errors(book: dict[str, Any]) -> list[str]:
    """
    Run every book field check and return the failures.

    Args:
        book: Raw book fields (model field names)

    Returns:
        List of error messages; empty when the record is valid
    """
    errors = []

    title = book.get("title")
    if not title or not title.strip():
        errors.append("Title is required")

    if book.get("author_id") is None:
        errors.append("Author ID is required")

    year = book.get("published_year")
    if year is not None and not is_valid_year(year):
        errors.append("Invalid publication year")

    if not is_valid_page_count(book.get("pages")):
        errors.append("Pages must be positive")

    isbn = book.get("isbn")
    if isbn is not None and not is_valid_isbn(isbn):
        errors.append("Invalid ISBN format")

    return errors


def collect_author_errors(author: dict[str, Any]) -> list[str]:
    """
    Run every author field check and return the failures.

    Args:
        author: Raw author fields (model field names)

    Returns:
        List of error messages; empty when the record is valid
    """
    errors = []

    name = author.get("name")
    if not name or not is_valid_name(name):
        errors.append(f"Name must be at least {MIN_NAME_LENGTH} characters")

    birth_year = author.get("birth_year")
    if birth_year is not None and not is_valid_year(birth_year):
        errors.append("Invalid birth year")

    return errors
