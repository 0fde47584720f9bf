# tests/test_synonym_expander.py

from witsearch.domain.models import SynonymGroup
from witsearch.application.synonym_expander import SynonymExpander, SynonymIndex
from witsearch.infrastructure.synonym_store import InMemorySynonymStore


def test_expand_wrench_includes_whole_group(expander):
    expanded = expander.expand("wrench")

    for term in ["wrench", "spanner", "adjustable wrench", "crescent wrench", "pipe wrench"]:
        assert term in expanded.expanded_terms
    assert expanded.synonyms_found is True
    assert expanded.original_query == "wrench"


def test_expand_synonym_reaches_canonical(expander):
    expanded = expander.expand("Spanner")

    assert expanded.original_query == "Spanner"
    assert expanded.expanded_terms[0] == "spanner"
    assert "wrench" in expanded.expanded_terms


def test_expand_unknown_term_is_left_alone(expander):
    expanded = expander.expand("xyzzy")

    assert expanded.expanded_terms == ["xyzzy"]
    assert expanded.synonyms_found is False


def test_expand_multi_word_without_synonyms_does_not_add_phrase(expander):
    expanded = expander.expand("blue widget")

    assert expanded.expanded_terms == ["blue", "widget"]
    assert expanded.synonyms_found is False


def test_expand_multi_word_canonical_phrase(expander):
    expanded = expander.expand("tape measure")

    assert "tape measure" in expanded.expanded_terms
    assert "measuring tape" in expanded.expanded_terms
    assert "ruler" in expanded.expanded_terms
    assert expanded.synonyms_found is True


def test_expand_unions_groups_sharing_a_canonical_name(expander):
    terms = expander.expand("washer").expanded_terms

    # hardware and plumbing both define "washer"
    assert "flat washer" in terms
    assert "o-ring" in terms


def test_expand_terms_are_deduplicated(expander):
    terms = expander.expand("wrench wrench spanner").expanded_terms
    assert len(terms) == len(set(terms))


def test_expand_empty_or_invalid_query(expander):
    for query in ["", "   ", None, 42]:
        expanded = expander.expand(query)
        assert expanded.expanded_terms == []
        assert expanded.synonyms_found is False


def test_inactive_groups_are_ignored():
    store = InMemorySynonymStore([
        SynonymGroup.create("sofa", ["couch"], is_active=False),
    ])
    expanded = SynonymExpander(store).expand("couch")

    assert expanded.expanded_terms == ["couch"]
    assert expanded.synonyms_found is False


def test_refresh_swaps_in_a_new_index():
    store = InMemorySynonymStore()
    expander = SynonymExpander(store)
    old_index = expander.index

    store.upsert_group("sofa", ["couch", "settee"])
    assert expander.expand("couch").expanded_terms == ["couch"]

    new_index = expander.refresh()

    assert new_index is not old_index
    assert len(old_index) == 0
    assert "sofa" in expander.expand("couch").expanded_terms


def test_index_lookup_returns_every_group_for_term(seeded_store):
    index = SynonymIndex.build(seeded_store.all_groups())
    categories = {g.category for g in index.lookup("TAPE")}

    assert categories == {"tools", "plumbing", "paint", "office"}
    assert index.lookup("nothing-here") == ()


def test_find_related_terms(expander):
    related = expander.find_related_terms(" Spanner ")

    assert related[0] == "spanner"
    assert "wrench" in related
    assert expander.find_related_terms("") == []


def test_build_expanded_text_query(expander):
    assert expander.build_expanded_text_query("xyzzy") == "xyzzy"
    assert "spanner" in expander.build_expanded_text_query("wrench").split(" ")


def test_build_synonym_pattern_highlights_related_terms(expander):
    pattern = expander.build_synonym_pattern("spanner")

    match = pattern.search("Crescent Wrench 10in")
    assert match is not None
    assert match.group(0).lower() == "crescent wrench"
    assert expander.build_synonym_pattern("") is None
