"""
Genre Enumeration

The fixed set of genres a book can be filed under. The member names are
the literals exposed by the GraphQL `Genre` enum.
"""

from enum import Enum


class Genre(str, Enum):
    """Book genre."""

    FICTION = "FICTION"
    NON_FICTION = "NON_FICTION"
    MYSTERY = "MYSTERY"
    ROMANCE = "ROMANCE"
    SCIENCE_FICTION = "SCIENCE_FICTION"
    FANTASY = "FANTASY"
    BIOGRAPHY = "BIOGRAPHY"
    HISTORY = "HISTORY"
