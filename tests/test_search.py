import pytest

from keylyze.search import jaro, jaro_winkler, layout_names, search


def test_jaro_identical_strings_is_one():
    assert jaro("sturdy", "sturdy") == 1.0


def test_jaro_both_empty_is_one():
    assert jaro("", "") == 1.0


def test_jaro_one_empty_is_zero():
    assert jaro("abc", "") == 0.0
    assert jaro("", "abc") == 0.0


def test_jaro_nothing_in_common_is_zero():
    assert jaro("abc", "xyz") == 0.0


def test_jaro_known_value():
    assert jaro("martha", "marhta") == pytest.approx(0.9444, abs=1e-4)


@pytest.mark.parametrize(
    "a,b", [("martha", "marhta"), ("dvorak", "dvarok"), ("colemak", "coleman")]
)
def test_jaro_is_symmetric(a, b):
    assert jaro(a, b) == pytest.approx(jaro(b, a))


@pytest.mark.parametrize(
    "a,b", [("martha", "marhta"), ("qwerty", "qwertz"), ("abc", "xyz")]
)
def test_winkler_never_below_jaro(a, b):
    assert jaro_winkler(a, b) >= jaro(a, b)
    assert jaro_winkler(a, b) <= 1.0


def test_winkler_unchanged_for_low_similarity():
    assert jaro_winkler("abcdef", "fedcxa") == jaro("abcdef", "fedcxa")


def test_search_exact_match_first():
    names = ["Dvorak", "Qwerty", "Qwertz", "Colemak"]
    result = search(names, "qwerty", 24)
    assert result[0] == "Qwerty"
    assert "Colemak" not in result


def test_search_is_case_insensitive():
    assert search(["Sturdy"], "STURDY", 5) == ["Sturdy"]


def test_search_respects_max_results():
    names = ["qwerty", "qwertz", "qwerta", "qwertb"]
    assert len(search(names, "qwert", 2)) == 2


def test_search_results_above_threshold():
    names = ["noctum", "sturdy", "dvorak", "colemak", "semimak"]
    for name in search(names, "semi", 10):
        assert jaro_winkler(name.lower(), "semi") >= 0.55


def test_search_empty_candidates():
    assert search([], "anything", 10) == []


def test_layout_names_sorted_case_insensitively():
    paths = ["layouts/Sturdy.dof", "layouts/qwerty.dof", "layouts/Colemak.dof"]
    assert layout_names(paths) == ["Colemak", "qwerty", "Sturdy"]


def test_layout_names_skips_paths_without_name():
    assert layout_names(["..", "a/b.dof"]) == ["b"]