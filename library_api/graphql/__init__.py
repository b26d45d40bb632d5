"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Features:
- Book and author queries, filters and search
- CRUD mutations with coded validation errors
- Cursor-based pagination (booksPaginated)
- Live relationship resolution (Book.author, Author.books, Book.fullData)

Usage:
    The GraphQL endpoint is available at /graphql with an
    interactive IDE for development.

Example Query:
    query {
        booksPaginated(first: 2) {
            edges { cursor node { title fullData } }
            pageInfo { hasNextPage endCursor }
            totalCount
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from library_api.config import get_settings
from library_api.graphql.context import get_context
from library_api.graphql.mutations import Mutation
from library_api.graphql.queries import Query

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    settings = get_settings()
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        # Options: "graphiql", "apollo-sandbox", or None to disable
        graphql_ide=settings.graphql_ide,
    )


__all__ = ["schema", "create_graphql_router"]
