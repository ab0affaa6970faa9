import pytest

from gqlcore.suggestion import levenshtein_distance, make_suggestion


@pytest.mark.parametrize("text", ["", "a", "name", "friends"])
def test_distance_to_self_is_zero(text):
    assert levenshtein_distance(text, text) == 0


@pytest.mark.parametrize("text", ["a", "name", "friends"])
def test_distance_from_empty_is_length(text):
    assert levenshtein_distance("", text) == len(text)
    assert levenshtein_distance(text, "") == len(text)


@pytest.mark.parametrize("a,b", [("kitten", "sitting"), ("flaw", "lawn"), ("id", "name")])
def test_distance_is_symmetric(a, b):
    assert levenshtein_distance(a, b) == levenshtein_distance(b, a)


def test_known_distance():
    assert levenshtein_distance("kitten", "sitting") == 3


def test_distance_bounded_by_longer_length():
    assert levenshtein_distance("abc", "xyzw") <= 4


def test_no_options_gives_empty_string():
    assert make_suggestion("Did you mean", [], "name") == ""


def test_far_options_give_empty_string():
    assert make_suggestion("Did you mean", ["zzzzzz"], "name") == ""


def test_single_suggestion_format():
    assert make_suggestion("Did you mean", ["name", "id"], "nam") == ' Did you mean "name"?'


def test_multiple_suggestions_sorted_by_distance():
    result = make_suggestion("Did you mean", ["abcdxx", "abcdef"], "abcdef")
    assert result.startswith(" Did you mean ")
    assert result.endswith("?")
    assert result.index('"abcdef"') < result.index('"abcdxx"')
    assert ', or "abcdxx"' in result