"""
Test Suite for the Library GraphQL API

Test Organization:
- conftest.py: Shared fixtures (fresh store, test client)
- test_validation.py: Pure field and uniqueness checks
- test_pagination.py: Cursor window computation
- test_store.py: Seed loading and reset
- test_books.py: Book service queries and mutations
- test_authors.py: Author service queries and mutations
- test_graphql.py: End-to-end GraphQL queries and mutations
- test_app.py: Root and health endpoints, configuration

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_graphql.py

    # Run with verbose output
    pytest -v
"""
