"""
Authors Service

Read and write operations on the author collection.
"""

import logging

from library_api.exceptions import (
    ConflictError,
    DependencyConflictError,
    InvalidValueError,
    NotFoundError,
    OutOfRangeError,
)
from library_api.models import Author
from library_api.schemas import AuthorCreate, AuthorUpdate
from library_api.services.validation import (
    MIN_NAME_LENGTH,
    is_name_taken,
    is_valid_name,
    is_valid_year,
    parse_id,
)
from library_api.store import LibraryStore

logger = logging.getLogger(__name__)


# =============================================================================
# Queries
# =============================================================================


def list_authors(store: LibraryStore) -> list[Author]:
    return list(store.authors)


def get_author(store: LibraryStore, author_id: str | int) -> Author | None:
    return store.get_author(parse_id(author_id))


def find_author_by_name(store: LibraryStore, name: str) -> Author | None:
    """First author whose name contains `name`, ignoring case."""
    needle = name.lower()
    return next((a for a in store.authors if needle in a.name.lower()), None)


# =============================================================================
# Mutations
# =============================================================================


def add_author(store: LibraryStore, data: AuthorCreate) -> Author:
    """
    Create an author.

    Checks run in order: name uniqueness, birth year, name length. The
    stored name is trimmed.

    Raises:
        ConflictError: Name already used (case-insensitive)
        OutOfRangeError: Birth year outside 1..current year
        InvalidValueError: Name shorter than two characters
    """
    if is_name_taken(store.authors, data.name):
        raise ConflictError("Author name must be unique", field="name", value=data.name)

    if data.birth_year is not None and not is_valid_year(data.birth_year):
        raise OutOfRangeError("Invalid birth year", field="birthYear", value=data.birth_year)

    if not is_valid_name(data.name):
        raise InvalidValueError(
            f"Author name must be at least {MIN_NAME_LENGTH} characters",
            field="name",
            value=data.name,
        )

    author = Author(
        id=store.next_author_id(),
        name=data.name.strip(),
        bio=data.bio,
        birth_year=data.birth_year,
    )
    store.authors.append(author)

    logger.info(f"Added author {author.id}: '{author.name}'")
    return author


def update_author(store: LibraryStore, author_id: str | int, data: AuthorUpdate) -> Author:
    """
    Shallow-merge the provided fields over an existing author.

    No uniqueness or format checks are re-run on the merged record.

    Raises:
        NotFoundError: No author with that ID
    """
    author = store.get_author(parse_id(author_id))
    if author is None:
        raise NotFoundError("Author not found")

    changes = data.model_dump(exclude_unset=True)
    if changes.get("name", "") is None:
        del changes["name"]

    updated = author.model_copy(update=changes)
    index = store.authors.index(author)
    store.authors[index] = updated

    logger.info(f"Updated author {updated.id}: {sorted(changes)}")
    return updated


def delete_author(store: LibraryStore, author_id: str | int) -> bool:
    """
    Remove an author who has no books.

    Returns:
        True if removed, False if no author had that ID

    Raises:
        DependencyConflictError: The author still has books
    """
    author = store.get_author(parse_id(author_id))
    if author is None:
        return False

    if store.books_by_author(author.id):
        logger.warning(f"Refusing to delete author {author.id}: books still reference it")
        raise DependencyConflictError(
            "Cannot delete author with existing books", field="id", value=str(author.id)
        )

    store.authors.remove(author)
    logger.info(f"Deleted author {author.id}: '{author.name}'")
    return True
