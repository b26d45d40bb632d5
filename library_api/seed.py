"""
Seed Datasets

The fixed datasets the store is loaded from at startup and restored to by
`resetData`.

Datasets:
- default: 5 authors and 5 classic novels, one book per author
- minimal: a single author with a single book
- diverse: the default set plus two extra authors and books

Records are kept as plain dictionaries; the store builds fresh model
instances from them on every load so mutations never leak into the seed.
"""

from typing import Any

SeedDataset = dict[str, list[dict[str, Any]]]


DEFAULT_AUTHORS: list[dict[str, Any]] = [
    {
        "id": 1,
        "name": "Kate Chopin",
        "bio": "American author known for her feminist writings",
        "birth_year": 1850,
    },
    {
        "id": 2,
        "name": "Paul Auster",
        "bio": "American writer known for postmodern fiction",
        "birth_year": 1947,
    },
    {
        "id": 3,
        "name": "George Orwell",
        "bio": "English novelist and essayist, famous for dystopian fiction",
        "birth_year": 1903,
    },
    {
        "id": 4,
        "name": "Harper Lee",
        "bio": "American novelist known for To Kill a Mockingbird",
        "birth_year": 1926,
    },
    {
        "id": 5,
        "name": "F. Scott Fitzgerald",
        "bio": "American novelist of the Jazz Age",
        "birth_year": 1896,
    },
]

DEFAULT_BOOKS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "The Awakening",
        "author_id": 1,
        "genre": "FICTION",
        "published_year": 1899,
        "pages": 183,
        "isbn": "978-0486277868",
        "is_available": True,
        "summary": "A pioneering work of feminist literature that explores "
                   "a woman's struggle for independence.",
    },
    {
        "id": 2,
        "title": "City of Glass",
        "author_id": 2,
        "genre": "MYSTERY",
        "published_year": 1985,
        "pages": 158,
        "isbn": "978-0140097313",
        "is_available": True,
        "summary": "A postmodern detective story that blurs the lines "
                   "between reality and fiction.",
    },
    {
        "id": 3,
        "title": "1984",
        "author_id": 3,
        "genre": "SCIENCE_FICTION",
        "published_year": 1949,
        "pages": 328,
        "isbn": "978-0451524935",
        "is_available": False,
        "summary": "A dystopian vision of a totalitarian future where "
                   "Big Brother watches everyone.",
    },
    {
        "id": 4,
        "title": "To Kill a Mockingbird",
        "author_id": 4,
        "genre": "FICTION",
        "published_year": 1960,
        "pages": 376,
        "isbn": "978-0061120084",
        "is_available": True,
        "summary": "A story of racial injustice and childhood innocence "
                   "in the American South.",
    },
    {
        "id": 5,
        "title": "The Great Gatsby",
        "author_id": 5,
        "genre": "FICTION",
        "published_year": 1925,
        "pages": 180,
        "isbn": "978-0743273565",
        "is_available": True,
        "summary": "A critique of the American Dream set in the Roaring Twenties.",
    },
]


SEED_DATASETS: dict[str, SeedDataset] = {
    "default": {
        "authors": DEFAULT_AUTHORS,
        "books": DEFAULT_BOOKS,
    },
    "minimal": {
        "authors": [
            {
                "id": 1,
                "name": "Test Author",
                "bio": "For learning purposes",
                "birth_year": 2000,
            },
        ],
        "books": [
            {
                "id": 1,
                "title": "Test Book",
                "author_id": 1,
                "genre": "FICTION",
                "published_year": 2020,
                "pages": 100,
                "isbn": "978-0000000000",
                "is_available": True,
                "summary": "A simple book for testing GraphQL queries.",
            },
        ],
    },
    "diverse": {
        "authors": [
            *DEFAULT_AUTHORS,
            {"id": 6, "name": "Agatha Christie", "bio": "British mystery writer", "birth_year": 1890},
            {"id": 7, "name": "Isaac Asimov", "bio": "American science fiction writer", "birth_year": 1920},
        ],
        "books": [
            *DEFAULT_BOOKS,
            {
                "id": 6,
                "title": "Murder on the Orient Express",
                "author_id": 6,
                "genre": "MYSTERY",
                "published_year": 1934,
                "pages": 256,
                "isbn": "978-0062693662",
                "is_available": True,
                "summary": "A classic murder mystery on a luxury train.",
            },
            {
                "id": 7,
                "title": "Foundation",
                "author_id": 7,
                "genre": "SCIENCE_FICTION",
                "published_year": 1951,
                "pages": 244,
                "isbn": "978-0553293357",
                "is_available": True,
                "summary": "A galactic empire in decline and the science of psychohistory.",
            },
        ],
    },
}


def get_seed_dataset(name: str = "default") -> SeedDataset:
    """
    Look up a seed dataset by name.

    Raises:
        KeyError: If no dataset has that name
    """
    try:
        return SEED_DATASETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown seed dataset '{name}'. Available: {', '.join(SEED_DATASETS)}"
        ) from None
