from __future__ import annotations

import pytest

from samla.i18n import SearchQuery, parse_search_query

PREFIXES = {
    "@box": "box",
    "@karton": "box",
    "@produkt": "product",
    "@product": "product",
    "@hersteller": "manufacturer",
    "@tag": "tag",
    "@ort": "location",
    "@standort": "location",
}


@pytest.mark.parametrize(
    "query,filters",
    [
        ("@box K-12", {"box": "K-12"}),
        ("@Karton 12", {"box": "12"}),
        ("@KARTON   12  ", {"box": "12"}),
        ("  @produkt Sondermarke", {"product": "Sondermarke"}),
        ("@Product stamp", {"product": "stamp"}),
        ("@Hersteller Deutsche Post", {"manufacturer": "Deutsche Post"}),
        ("@tag\tblumen", {"tag": "blumen"}),
        ("@Standort Keller", {"location": "Keller"}),
    ],
)
def test_prefixed_queries_become_filters(query: str, filters: dict) -> None:
    parsed = parse_search_query(query, PREFIXES)

    assert parsed == SearchQuery(term="", filters=filters)
    assert parsed.is_filtered


@pytest.mark.parametrize(
    "query,term",
    [
        ("Rosen", "Rosen"),
        ("  Rosen 2020 ", "Rosen 2020"),
        ("@boxen", "@boxen"),  # no whitespace after a known prefix
        ("@unknown value", "@unknown value"),
        ("@ort ", "@ort"),  # bare prefix with nothing after it
        ("", ""),
    ],
)
def test_other_queries_are_terms(query: str, term: str) -> None:
    parsed = parse_search_query(query, PREFIXES)

    assert parsed.term == term
    assert parsed.filters == {}
    assert not parsed.is_filtered


def test_longer_prefix_wins_over_shorter_overlap() -> None:
    prefixes = {"@ort": "location", "@ortsteil": "tag"}

    assert parse_search_query("@ortsteil Mitte", prefixes).filters == {"tag": "Mitte"}
    assert parse_search_query("@ort Mitte", prefixes).filters == {"location": "Mitte"}
