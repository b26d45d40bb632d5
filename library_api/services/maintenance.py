"""
Maintenance Service

Operations on the store as a whole.
"""

import logging

from library_api.store import LibraryStore

logger = logging.getLogger(__name__)


def reset_data(store: LibraryStore) -> str:
    """
    Discard every mutation and restore the seed dataset.

    IDs are restored as well, so IDs handed out since the last reset will
    be reused.

    Returns:
        Human-readable summary of what was restored
    """
    logger.info(f"Resetting store to seed dataset '{store.seed_dataset}'")
    authors, books = store.reset()
    return f"Data reset successfully! Restored {authors} authors and {books} books."
