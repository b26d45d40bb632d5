"""
Models Package

In-memory records for the library dataset.

Model Relationships:
- Author <- Book: One-to-Many by back-reference (a book stores the id of
                  its single author; an author's books are found by filtering)

Import all models here to:
1. Make them available as: from library_api.models import Book, Author, Genre
2. Provide a single import point for the application
"""

from library_api.models.genre import Genre
from library_api.models.author import Author
from library_api.models.book import Book

__all__ = [
    "Author",
    "Book",
    "Genre",
]
