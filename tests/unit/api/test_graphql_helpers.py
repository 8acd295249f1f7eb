"""Unit tests for GraphQL input and result shaping."""

import strawberry

from bookshelf.api.graphql.types import BookInput, input_data, result_list
from bookshelf.core.errors import bad_input
from bookshelf.entities import Author


class TestInputData:
    """Test conversion of GraphQL inputs to service dictionaries."""

    def test_keeps_sent_fields_with_api_names(self):
        """Should drop unset fields and camel-case the rest."""
        data = BookInput(title="Dune", year_published="1965", author_id=strawberry.UNSET)

        assert input_data(data) == {"title": "Dune", "yearPublished": "1965"}

    def test_keeps_explicit_null(self):
        """Should keep fields sent as null."""
        assert input_data(BookInput(genre=None)) == {"genre": None}


class TestResultList:
    """Test list query post-processing."""

    def test_wraps_single_result(self):
        """Should wrap an envelope into a one-element list."""
        envelope = bad_input("where", "bad")

        assert result_list(envelope) == [envelope]

    def test_empty_list_becomes_info(self):
        """Should replace an empty list with one informational envelope."""
        (envelope,) = result_list([])

        assert envelope.errors[0].code == "I_INFO"
        assert envelope.errors[0].message == "No data matched your selection criteria"

    def test_passes_lists_through(self):
        """Should return non-empty lists unchanged."""
        authors = [Author(id=1, name="Ursula")]

        assert result_list(authors) is authors
