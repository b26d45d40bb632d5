"""
In-Memory Store

Owns the author and book collections for one application instance.

Ownership Pattern
=================
The application factory creates exactly one LibraryStore and keeps it on
`app.state.store`. The GraphQL context getter hands it to every resolver,
and the services receive it as an explicit argument. There is no
module-level state, so each app (and each test) gets its own data.

Lists keep insertion order, which is the order queries and pagination
return books in.
"""

import logging

from library_api.models import Author, Book
from library_api.seed import get_seed_dataset
from library_api.services.validation import (
    author_exists,
    collect_author_errors,
    collect_book_errors,
)

logger = logging.getLogger(__name__)


class LibraryStore:
    """
    Mutable author/book collections plus the seed they were loaded from.

    Usage:
        store = LibraryStore("default")
        store.get_book(3)
        store.reset()
    """

    def __init__(self, seed_dataset: str = "default"):
        self.seed_dataset = seed_dataset
        self.authors: list[Author] = []
        self.books: list[Book] = []
        self.reset()

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------
    def get_author(self, author_id: int | None) -> Author | None:
        """Return the author with `author_id`, or None."""
        return next((a for a in self.authors if a.id == author_id), None)

    def get_book(self, book_id: int | None) -> Book | None:
        """Return the book with `book_id`, or None."""
        return next((b for b in self.books if b.id == book_id), None)

    def books_by_author(self, author_id: int) -> list[Book]:
        """Return every book referencing `author_id`, in insertion order."""
        return [book for book in self.books if book.author_id == author_id]

    # -------------------------------------------------------------------------
    # Identifiers
    # -------------------------------------------------------------------------
    def next_author_id(self) -> int:
        return max((a.id for a in self.authors), default=0) + 1

    def next_book_id(self) -> int:
        return max((b.id for b in self.books), default=0) + 1

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------
    def reset(self) -> tuple[int, int]:
        """
        Discard every record and reload the seed dataset.

        Fresh model instances are built from the seed on each call, so
        earlier mutations never leak back into the seed.

        Returns:
            (author count, book count) after the reload

        Raises:
            ValueError: If the seed dataset contains an invalid record
        """
        dataset = get_seed_dataset(self.seed_dataset)

        authors = []
        for raw in dataset["authors"]:
            errors = collect_author_errors(raw)
            if errors:
                raise ValueError(f"Invalid seed author {raw.get('id')}: {'; '.join(errors)}")
            authors.append(Author(**raw))

        books = []
        for raw in dataset["books"]:
            errors = collect_book_errors(raw)
            if not author_exists(authors, raw.get("author_id")):
                errors.append("Author not found")
            if errors:
                raise ValueError(f"Invalid seed book {raw.get('id')}: {'; '.join(errors)}")
            books.append(Book(**raw))

        # Mutate in place so existing references to the lists stay valid
        self.authors[:] = authors
        self.books[:] = books

        logger.info(
            f"Loaded seed dataset '{self.seed_dataset}': "
            f"{len(self.authors)} authors, {len(self.books)} books"
        )
        return len(self.authors), len(self.books)
