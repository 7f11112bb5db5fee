import pytest

from api.services.keyword_classifier import KeywordClassifier

classifier = KeywordClassifier()


def test_detects_desk():
    assert "desk" in classifier.classify("I want a desk")


def test_desktop_does_not_match_desk():
    assert "desk" not in classifier.classify("a stand for my desktop computer")


def test_bedside_does_not_match_bed():
    assert classifier.classify("oak bedside table") == ["bedside table"]


def test_desk_chair_is_an_office_chair():
    assert classifier.classify("ergonomic desk chair") == ["office chair"]


def test_synonyms_map_to_canonical_categories():
    assert classifier.classify("A comfy couch and a nightstand") == ["sofa", "bedside table"]


def test_results_follow_taxonomy_order_without_duplicates():
    result = classifier.classify("Mirrors, a BED, another bed and a wardrobe")
    assert result == ["bed", "wardrobe", "mirror"]


@pytest.mark.parametrize("query", ["something nice for my flat", "", "   ", None])
def test_default_categories_when_nothing_matches(query):
    assert classifier.classify(query) == ["sofa", "bed", "dining table"]
