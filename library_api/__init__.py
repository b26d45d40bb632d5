"""
Library GraphQL API Package

An in-memory GraphQL API over a small book/author dataset.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- store.py: In-memory store owning the author and book collections
- seed.py: Seed datasets restored on reset
- exceptions.py: Coded domain errors surfaced through GraphQL
- main.py: FastAPI application factory and configuration
- models/: Author and Book records
- schemas/: Pydantic input schemas for mutations
- services/: Business logic (validation, pagination, CRUD)
- graphql/: Strawberry schema, types and resolvers
"""

__version__ = "0.1.0"
