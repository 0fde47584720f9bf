# tests/test_suggestions.py

import pytest

from witsearch.application.suggestions import SuggestionGenerator


def test_suggests_close_known_term():
    suggestions = SuggestionGenerator().suggest("hamer", ["claw hammer", "hammer", "claw"])

    assert [s.term for s in suggestions] == ["hammer"]
    assert suggestions[0].distance == 1
    assert suggestions[0].similarity == pytest.approx(5 / 6)


def test_exact_match_is_never_suggested():
    assert SuggestionGenerator().suggest("Hammer", ["hammer"]) == []


def test_sorted_by_similarity_and_capped():
    known = ["drill", "drills", "grill", "dril", "frill"]
    suggestions = SuggestionGenerator().suggest("drilll", known, max_suggestions=2)

    assert len(suggestions) == 2
    assert suggestions[0].similarity >= suggestions[1].similarity


def test_distance_cap_excludes_far_terms():
    generator = SuggestionGenerator(min_similarity=0.0, max_distance=1)
    terms = [s.term for s in generator.suggest("saw", ["saws", "sawhorse"])]

    assert terms == ["saws"]


def test_nothing_close_gives_no_suggestions():
    assert SuggestionGenerator().suggest("zzzzqqq", ["hammer", "wrench", "screwdriver"]) == []


@pytest.mark.parametrize("query", ["", "  ", None])
def test_empty_query(query):
    assert SuggestionGenerator().suggest(query, ["hammer"]) == []
