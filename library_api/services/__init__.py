"""
Services Package

This package contains business logic services that are:
- Separate from GraphQL handling (resolvers)
- Reusable across different parts of the application
- Easier to test in isolation

Current services:
- validation.py: Pure field and uniqueness checks
- pagination.py: Cursor-based pagination over the book list
- books.py: Book queries and mutations
- authors.py: Author queries and mutations
- maintenance.py: Store-wide operations (reset)
"""
