"""
Test per i modelli dati e la validazione degli argomenti.
"""
import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from core.exceptions import InvalidArgumentError
from core.models import (
    SearchQuery,
    WebSearchQuery,
    PostalAddress,
    PoiRecord,
    WebResult,
    LocalSearchOutcome,
    text_response,
)


class TestSearchQuery:
    """Test per SearchQuery.from_args."""

    def test_query_only_uses_default_count(self):
        """Test count assente -> default 5."""
        query = SearchQuery.from_args({"query": "pizza near Central Park"})
        assert query.text == "pizza near Central Park"
        assert query.count == 5

    @pytest.mark.parametrize("args", [
        None,
        "pizza",
        ["pizza"],
        {},
        {"q": "pizza"},
        {"query": None},
        {"query": 42},
        {"query": ""},
        {"query": "   "},
    ])
    def test_invalid_shape(self, args):
        """Test input senza 'query' stringa non vuota."""
        with pytest.raises(InvalidArgumentError):
            SearchQuery.from_args(args)

    @pytest.mark.parametrize("count", ["5", True, [5], float("nan"), float("inf")])
    def test_invalid_count(self, count):
        """Test count non numerico o non finito."""
        with pytest.raises(InvalidArgumentError):
            SearchQuery.from_args({"query": "pizza", "count": count})

    @pytest.mark.parametrize("count,expected", [
        (1, 1),
        (7, 7),
        (20, 20),
        (21, 20),
        (500, 20),
        (0, 5),
        (-3, 5),
        (3.9, 3),
        (None, 5),
    ])
    def test_count_normalization(self, count, expected):
        """Test clamp di count a [1, 20] con default 5."""
        query = SearchQuery.from_args({"query": "pizza", "count": count})
        assert query.count == expected

    def test_to_args(self):
        """Test argomenti per il fallback."""
        query = SearchQuery.from_args({"query": "pizza", "count": 50})
        assert query.to_args() == {"query": "pizza", "count": 20}


class TestWebSearchQuery:
    """Test per WebSearchQuery.from_args."""

    def test_defaults(self):
        query = WebSearchQuery.from_args({"query": "news"})
        assert query.count == 10
        assert query.offset == 0

    @pytest.mark.parametrize("offset,expected", [(0, 0), (4, 4), (9, 9), (15, 9), (-1, 0)])
    def test_offset_bounds(self, offset, expected):
        """Test offset limitato a [0, 9]."""
        query = WebSearchQuery.from_args({"query": "news", "offset": offset})
        assert query.offset == expected

    def test_invalid(self):
        with pytest.raises(InvalidArgumentError):
            WebSearchQuery.from_args({"query": "news", "offset": "2"})


class TestPoiRecord:
    """Test per PoiRecord e PostalAddress."""

    def test_from_dict_full(self, pois_payload):
        """Test parsing di una scheda completa."""
        poi = PoiRecord.from_dict(pois_payload["results"][1])

        assert poi.id == "loc-b"
        assert poi.name == "Pizzeria Y"
        assert poi.address.postal_code == "97403"
        assert poi.coordinates.latitude == 44.05
        assert poi.rating.rating_value == 4.5
        assert poi.rating.rating_count == 120
        assert poi.opening_hours == ["Mo-Fr 11:00-22:00", "Sa 12:00-23:00"]
        assert poi.price_range == "$$"

    def test_from_dict_minimal(self):
        """Test parsing con soli id e nome."""
        poi = PoiRecord.from_dict({"id": "1", "name": "Cafe X"})

        assert poi.address.components() == []
        assert poi.coordinates is None
        assert poi.rating is None
        assert poi.opening_hours == []

    def test_address_components_skip_empty(self):
        address = PostalAddress(street_address="", address_locality="Springfield", postal_code="97403")
        assert address.components() == ["Springfield", "97403"]

    def test_to_dict(self, pois_payload):
        """Test conversione a dict per la tabella."""
        poi = PoiRecord.from_dict(pois_payload["results"][1])
        row = poi.to_dict("Wood-fired pizza")

        assert row["Nome"] == "Pizzeria Y"
        assert row["Indirizzo"] == "742 Evergreen Terrace, Springfield, OR, 97403"
        assert row["Recensioni"] == 120
        assert row["Descrizione"] == "Wood-fired pizza"
        assert row["Lat"] == 44.05


class TestMisc:
    """Test per WebResult, LocalSearchOutcome ed envelope."""

    def test_web_result_missing_fields(self):
        result = WebResult.from_dict({"title": "Only title"})
        assert result.description == ""
        assert result.url == ""

    def test_outcome_used_fallback(self):
        query = SearchQuery.from_args({"query": "pizza"})
        assert LocalSearchOutcome(query=query).used_fallback is False
        assert LocalSearchOutcome(query=query, fallback=text_response("x")).used_fallback is True

    def test_text_response(self):
        assert text_response("hello") == {
            "content": [{"type": "text", "text": "hello"}],
            "isError": False,
        }
