"""
GraphQL API Tests

Tests for the GraphQL endpoint including:
- Query tests (books, authors, filters, search)
- Pagination tests
- Mutation tests (CRUD operations, validation errors)
- Relationship and computed field tests
"""

from datetime import date

from fastapi.testclient import TestClient

from library_api.store import LibraryStore

# =============================================================================
# Helper Functions
# =============================================================================


def graphql_query(client: TestClient, query: str, variables: dict = None) -> dict:
    """Execute a GraphQL query and return the response."""
    payload = {"query": query}
    if variables:
        payload["variables"] = variables

    response = client.post("/graphql", json=payload)
    return response.json()


def error_extensions(result: dict) -> dict:
    """Extensions of the first error in a GraphQL response."""
    assert "errors" in result, result
    return result["errors"][0]["extensions"]


ADD_BOOK = """
mutation($input: BookInput!) {
    addBook(input: $input) {
        id
        title
        isAvailable
        genre
        author { id name }
    }
}
"""

BOOKS_PAGINATED = """
query($first: Int, $after: String, $last: Int, $before: String) {
    booksPaginated(first: $first, after: $after, last: $last, before: $before) {
        edges { cursor node { id title } }
        pageInfo { hasNextPage hasPreviousPage startCursor endCursor }
        totalCount
    }
}
"""


# =============================================================================
# Query Tests
# =============================================================================


class TestBookQueries:
    """Tests for the book queries."""

    def test_list_books(self, client: TestClient):
        result = graphql_query(client, "query { books { id title } bookCount }")

        assert "errors" not in result
        assert [b["id"] for b in result["data"]["books"]] == ["1", "2", "3", "4", "5"]
        assert result["data"]["bookCount"] == 5

    def test_find_book(self, client: TestClient):
        query = """
        query($title: String!) {
            findBook(title: $title) { id publishedYear isbn summary }
        }
        """
        result = graphql_query(client, query, {"title": "1984"})

        assert result["data"]["findBook"]["id"] == "3"
        assert result["data"]["findBook"]["publishedYear"] == 1949
        assert result["data"]["findBook"]["isbn"] == "978-0451524935"

    def test_find_book_not_found(self, client: TestClient):
        result = graphql_query(client, 'query { findBook(title: "Dune") { id } }')

        assert "errors" not in result
        assert result["data"]["findBook"] is None

    def test_book_by_id(self, client: TestClient):
        result = graphql_query(client, 'query { bookById(id: "2") { title genre isAvailable } }')

        assert result["data"]["bookById"] == {
            "title": "City of Glass",
            "genre": "MYSTERY",
            "isAvailable": True,
        }

    def test_book_by_id_not_found(self, client: TestClient):
        result = graphql_query(client, 'query { bookById(id: "9999") { id } }')

        assert "errors" not in result
        assert result["data"]["bookById"] is None

    def test_books_by_genre(self, client: TestClient):
        result = graphql_query(client, "query { booksByGenre(genre: FICTION) { id } }")

        assert [b["id"] for b in result["data"]["booksByGenre"]] == ["1", "4", "5"]

    def test_books_by_author_and_year(self, client: TestClient):
        query = """
        query {
            booksByAuthor(authorId: "4") { title }
            booksByYear(year: 1925) { title }
        }
        """
        result = graphql_query(client, query)

        assert result["data"]["booksByAuthor"] == [{"title": "To Kill a Mockingbird"}]
        assert result["data"]["booksByYear"] == [{"title": "The Great Gatsby"}]

    def test_available_books(self, client: TestClient):
        result = graphql_query(client, "query { availableBooks { id } }")

        assert [b["id"] for b in result["data"]["availableBooks"]] == ["1", "2", "4", "5"]

    def test_search_books(self, client: TestClient):
        query = """
        query($query: String!, $genre: Genre) {
            searchBooks(query: $query, genre: $genre) { title }
        }
        """
        everything = graphql_query(client, query, {"query": "AMERICAN"})
        fiction_only = graphql_query(client, query, {"query": "the", "genre": "SCIENCE_FICTION"})

        assert [b["title"] for b in everything["data"]["searchBooks"]] == [
            "To Kill a Mockingbird",
            "The Great Gatsby",
        ]
        assert [b["title"] for b in fiction_only["data"]["searchBooks"]] == ["1984"]

    def test_unknown_genre_rejected_by_schema(self, client: TestClient):
        result = graphql_query(client, "query { booksByGenre(genre: POETRY) { id } }")

        assert "errors" in result


class TestAuthorQueries:
    """Tests for the author queries."""

    def test_list_authors(self, client: TestClient):
        result = graphql_query(client, "query { authors { id name birthYear } }")

        assert len(result["data"]["authors"]) == 5
        assert result["data"]["authors"][0] == {"id": "1", "name": "Kate Chopin", "birthYear": 1850}

    def test_author_by_id(self, client: TestClient):
        result = graphql_query(client, 'query { authorById(id: "3") { name bio } }')

        assert result["data"]["authorById"]["name"] == "George Orwell"

    def test_author_by_name_partial(self, client: TestClient):
        result = graphql_query(client, 'query { authorByName(name: "fitz") { id } }')

        assert result["data"]["authorByName"] == {"id": "5"}

    def test_author_by_name_not_found(self, client: TestClient):
        result = graphql_query(client, 'query { authorByName(name: "Tolkien") { id } }')

        assert result["data"]["authorByName"] is None


class TestRelationships:
    """Tests for resolved relationships and computed fields."""

    def test_full_data(self, client: TestClient):
        result = graphql_query(client, 'query { bookById(id: "3") { fullData } }')

        assert result["data"]["bookById"]["fullData"] == "1984 by George Orwell (1949)"

    def test_circular_traversal(self, client: TestClient):
        query = """
        query {
            authorById(id: "3") {
                name
                books {
                    title
                    author { name books { title } }
                }
            }
        }
        """
        result = graphql_query(client, query)

        author = result["data"]["authorById"]
        assert author["books"][0]["title"] == "1984"
        assert author["books"][0]["author"]["name"] == "George Orwell"
        assert author["books"][0]["author"]["books"] == [{"title": "1984"}]

    def test_full_data_reflects_author_update(self, client: TestClient):
        graphql_query(
            client,
            'mutation { updateAuthor(id: "3", input: {name: "Eric Blair"}) { id } }',
        )
        result = graphql_query(client, 'query { bookById(id: "3") { fullData author { name } } }')

        assert result["data"]["bookById"]["fullData"] == "1984 by Eric Blair (1949)"
        assert result["data"]["bookById"]["author"]["name"] == "Eric Blair"


# =============================================================================
# Pagination Tests
# =============================================================================


class TestBooksPaginated:
    """Tests for the booksPaginated query."""

    def test_default_page_size(self, client: TestClient):
        result = graphql_query(client, BOOKS_PAGINATED)

        page = result["data"]["booksPaginated"]
        assert [e["cursor"] for e in page["edges"]] == ["1", "2"]
        assert page["totalCount"] == 5

    def test_first_page(self, client: TestClient):
        result = graphql_query(client, BOOKS_PAGINATED, {"first": 2})

        page = result["data"]["booksPaginated"]
        assert len(page["edges"]) == 2
        assert page["pageInfo"]["hasNextPage"] is True
        assert page["pageInfo"]["hasPreviousPage"] is False
        assert page["pageInfo"]["endCursor"] == "2"

    def test_next_page(self, client: TestClient):
        result = graphql_query(client, BOOKS_PAGINATED, {"first": 2, "after": "2"})

        page = result["data"]["booksPaginated"]
        assert [e["node"]["id"] for e in page["edges"]] == ["3", "4"]
        assert page["pageInfo"]["hasPreviousPage"] is True
        assert page["pageInfo"]["startCursor"] == "3"

    def test_empty_page_has_null_cursors(self, client: TestClient):
        result = graphql_query(client, BOOKS_PAGINATED, {"first": 2, "after": "5"})

        page = result["data"]["booksPaginated"]
        assert page["edges"] == []
        assert page["pageInfo"]["startCursor"] is None
        assert page["pageInfo"]["endCursor"] is None

    def test_negative_first(self, client: TestClient):
        result = graphql_query(client, BOOKS_PAGINATED, {"first": -1})

        assert error_extensions(result)["code"] == "INVALID_VALUE"


# =============================================================================
# Book Mutation Tests
# =============================================================================


class TestAddBook:
    """Tests for the addBook mutation."""

    def test_add_book(self, client: TestClient, store: LibraryStore):
        variables = {
            "input": {
                "title": "Animal Farm",
                "authorId": "3",
                "genre": "FICTION",
                "publishedYear": 1945,
                "pages": 112,
                "isbn": "978-0451526342",
            }
        }
        result = graphql_query(client, ADD_BOOK, variables)

        assert "errors" not in result
        book = result["data"]["addBook"]
        assert book["id"] == "6"
        assert book["isAvailable"] is True
        assert book["genre"] == "FICTION"
        assert book["author"] == {"id": "3", "name": "George Orwell"}
        assert len(store.books) == 6

    def test_add_book_duplicate_title(self, client: TestClient, store: LibraryStore):
        result = graphql_query(client, ADD_BOOK, {"input": {"title": "1984", "authorId": "3"}})

        assert result["data"] is None
        assert result["errors"][0]["message"] == "Book title must be unique"
        assert error_extensions(result) == {
            "code": "CONFLICT",
            "invalidArgs": {"field": "title", "value": "1984"},
        }
        assert len(store.books) == 5

    def test_add_book_unknown_author(self, client: TestClient, store: LibraryStore):
        result = graphql_query(client, ADD_BOOK, {"input": {"title": "Dune", "authorId": "999"}})

        assert error_extensions(result)["code"] == "INVALID_REFERENCE"
        assert error_extensions(result)["invalidArgs"] == {"field": "authorId", "value": "999"}
        assert len(store.books) == 5

    def test_add_book_invalid_isbn(self, client: TestClient):
        variables = {"input": {"title": "Dune", "authorId": "1", "isbn": "12-34"}}
        result = graphql_query(client, ADD_BOOK, variables)

        assert error_extensions(result)["code"] == "INVALID_FORMAT"

    def test_add_book_invalid_year(self, client: TestClient):
        variables = {"input": {"title": "Dune", "authorId": "1", "publishedYear": date.today().year + 5}}
        result = graphql_query(client, ADD_BOOK, variables)

        assert error_extensions(result)["code"] == "OUT_OF_RANGE"
        assert error_extensions(result)["invalidArgs"]["field"] == "publishedYear"

    def test_add_book_negative_pages(self, client: TestClient):
        variables = {"input": {"title": "Dune", "authorId": "1", "pages": -10}}
        result = graphql_query(client, ADD_BOOK, variables)

        assert error_extensions(result)["code"] == "INVALID_VALUE"

    def test_add_book_missing_title_rejected_by_schema(self, client: TestClient):
        result = graphql_query(client, ADD_BOOK, {"input": {"authorId": "1"}})

        assert "errors" in result


class TestUpdateBook:
    """Tests for the updateBook mutation."""

    def test_update_book(self, client: TestClient):
        query = """
        mutation {
            updateBook(id: "2", input: {pages: 200, isAvailable: false}) {
                title pages isAvailable
            }
        }
        """
        result = graphql_query(client, query)

        assert result["data"]["updateBook"] == {
            "title": "City of Glass",
            "pages": 200,
            "isAvailable": False,
        }

    def test_update_book_clears_optional_field(self, client: TestClient):
        result = graphql_query(
            client, 'mutation { updateBook(id: "2", input: {summary: null}) { summary isbn } }'
        )

        assert result["data"]["updateBook"] == {"summary": None, "isbn": "978-0140097313"}

    def test_update_book_changes_author(self, client: TestClient):
        query = """
        mutation {
            updateBook(id: "1", input: {authorId: "2"}) { author { name } fullData }
        }
        """
        result = graphql_query(client, query)

        assert result["data"]["updateBook"]["author"]["name"] == "Paul Auster"
        assert result["data"]["updateBook"]["fullData"] == "The Awakening by Paul Auster (1899)"

    def test_update_book_not_found(self, client: TestClient):
        result = graphql_query(
            client, 'mutation { updateBook(id: "999", input: {title: "Ghost"}) { id } }'
        )

        assert result["errors"][0]["message"] == "Book not found"
        assert error_extensions(result)["code"] == "NOT_FOUND"


class TestDeleteAndToggleBook:
    """Tests for deleteBook and toggleBookAvailability."""

    def test_delete_book(self, client: TestClient):
        result = graphql_query(client, 'mutation { deleteBook(id: "1") }')

        assert result["data"]["deleteBook"] is True
        count = graphql_query(client, "query { bookCount }")
        assert count["data"]["bookCount"] == 4

    def test_delete_missing_book(self, client: TestClient):
        result = graphql_query(client, 'mutation { deleteBook(id: "999") }')

        assert "errors" not in result
        assert result["data"]["deleteBook"] is False

    def test_toggle_twice_restores_flag(self, client: TestClient):
        query = 'mutation { toggleBookAvailability(id: "3") { isAvailable } }'

        first = graphql_query(client, query)
        second = graphql_query(client, query)

        assert first["data"]["toggleBookAvailability"]["isAvailable"] is True
        assert second["data"]["toggleBookAvailability"]["isAvailable"] is False

    def test_toggle_missing_book(self, client: TestClient):
        result = graphql_query(client, 'mutation { toggleBookAvailability(id: "999") { id } }')

        assert error_extensions(result)["code"] == "NOT_FOUND"


# =============================================================================
# Author Mutation Tests
# =============================================================================


class TestAuthorMutations:
    """Tests for the author mutations."""

    def test_add_author(self, client: TestClient):
        query = """
        mutation($input: AuthorInput!) {
            addAuthor(input: $input) { id name bio birthYear books { id } }
        }
        """
        result = graphql_query(client, query, {"input": {"name": "  Jane Austen ", "birthYear": 1775}})

        assert result["data"]["addAuthor"] == {
            "id": "6",
            "name": "Jane Austen",
            "bio": None,
            "birthYear": 1775,
            "books": [],
        }

    def test_add_author_duplicate(self, client: TestClient):
        result = graphql_query(client, 'mutation { addAuthor(input: {name: "harper lee"}) { id } }')

        assert error_extensions(result)["code"] == "CONFLICT"

    def test_add_author_short_name(self, client: TestClient):
        result = graphql_query(client, 'mutation { addAuthor(input: {name: "J"}) { id } }')

        assert result["errors"][0]["message"] == "Author name must be at least 2 characters"
        assert error_extensions(result)["code"] == "INVALID_VALUE"

    def test_add_author_invalid_birth_year(self, client: TestClient):
        result = graphql_query(
            client, 'mutation { addAuthor(input: {name: "Someone New", birthYear: 0}) { id } }'
        )

        assert error_extensions(result)["code"] == "OUT_OF_RANGE"

    def test_update_author_keeps_unsent_fields(self, client: TestClient):
        result = graphql_query(
            client, 'mutation { updateAuthor(id: "4", input: {name: "Nelle Harper Lee"}) { name bio birthYear } }'
        )

        assert result["data"]["updateAuthor"] == {
            "name": "Nelle Harper Lee",
            "bio": "American novelist known for To Kill a Mockingbird",
            "birthYear": 1926,
        }

    def test_update_author_not_found(self, client: TestClient):
        result = graphql_query(client, 'mutation { updateAuthor(id: "99", input: {name: "Ghost"}) { id } }')

        assert error_extensions(result)["code"] == "NOT_FOUND"

    def test_delete_author_with_books(self, client: TestClient, store: LibraryStore):
        result = graphql_query(client, 'mutation { deleteAuthor(id: "3") }')

        assert result["errors"][0]["message"] == "Cannot delete author with existing books"
        assert error_extensions(result)["code"] == "DEPENDENCY_CONFLICT"
        assert len(store.authors) == 5
        assert len(store.books) == 5

    def test_delete_author_without_books(self, client: TestClient, author_without_books):
        result = graphql_query(client, f'mutation {{ deleteAuthor(id: "{author_without_books.id}") }}')

        assert result["data"]["deleteAuthor"] is True

    def test_delete_missing_author(self, client: TestClient):
        result = graphql_query(client, 'mutation { deleteAuthor(id: "999") }')

        assert result["data"]["deleteAuthor"] is False


class TestResetData:
    """Tests for the resetData mutation."""

    def test_reset_restores_seed(self, client: TestClient):
        graphql_query(client, 'mutation { deleteBook(id: "1") }')
        graphql_query(client, 'mutation { toggleBookAvailability(id: "2") { id } }')
        graphql_query(client, 'mutation { addAuthor(input: {name: "Jane Austen"}) { id } }')

        result = graphql_query(client, "mutation { resetData }")

        assert result["data"]["resetData"] == "Data reset successfully! Restored 5 authors and 5 books."
        state = graphql_query(client, "query { books { id isAvailable } authors { id } }")
        assert [b["id"] for b in state["data"]["books"]] == ["1", "2", "3", "4", "5"]
        assert state["data"]["books"][1]["isAvailable"] is True
        assert [a["id"] for a in state["data"]["authors"]] == ["1", "2", "3", "4", "5"]

    def test_ids_are_reused_after_reset(self, client: TestClient):
        graphql_query(client, ADD_BOOK, {"input": {"title": "Dune", "authorId": "1"}})
        graphql_query(client, "mutation { resetData }")

        result = graphql_query(client, ADD_BOOK, {"input": {"title": "Dune", "authorId": "1"}})

        assert result["data"]["addBook"]["id"] == "6"
