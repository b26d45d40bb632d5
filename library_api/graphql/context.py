"""
GraphQL Context

Provides request context to all GraphQL resolvers:
- The application's in-memory store
- The default page size for booksPaginated

The context is created fresh for each GraphQL request and passed
to all resolvers via the `info` parameter. The store itself is not
per-request: it is the one owned by the application instance.
"""

from fastapi import Request
from strawberry.fastapi import BaseContext

from library_api.config import get_settings
from library_api.store import LibraryStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        store: The application's LibraryStore
        default_page_size: Page size used when `first` is omitted
    """

    def __init__(self, store: LibraryStore, default_page_size: int = 2):
        super().__init__()
        self.store = store
        self.default_page_size = default_page_size


async def get_context(request: Request) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    This function is called by Strawberry for every GraphQL request. The
    store is read from `app.state`, where the application factory put it.

    Args:
        request: FastAPI request object

    Returns:
        GraphQLContext wrapping the application's store
    """
    settings = get_settings()
    return GraphQLContext(
        store=request.app.state.store,
        default_page_size=settings.default_page_size,
    )
