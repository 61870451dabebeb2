"""Unit tests for replacement text composition."""

import pytest

from textfind.exceptions import InvalidReplacementError, PatternError
from textfind.options.search import SearchModel
from textfind.search.replacement import compute_replacement, replace_with_case_respect


@pytest.mark.unit
class TestReplaceWithCaseRespect:
    """Case-preserving literal replacement."""

    @pytest.mark.parametrize(
        "found,expected",
        [
            ("WORD", "CAT"),
            ("word", "cat"),
            ("Word", "Cat"),
            ("wOrD", "cat"),
        ],
    )
    def test_follows_found_casing(self, found, expected):
        assert replace_with_case_respect("cat", found) == expected

    def test_mixed_tail_leaves_rest_alone(self):
        assert replace_with_case_respect("gOOse", "WoRd") == "GOOse"

    def test_single_character_found(self):
        assert replace_with_case_respect("cat", "W") == "Cat"
        assert replace_with_case_respect("cAt", "w") == "cAt"

    def test_single_character_template(self):
        assert replace_with_case_respect("x", "WORD") == "X"

    def test_empty_inputs(self):
        assert replace_with_case_respect("", "WORD") == ""
        assert replace_with_case_respect("cat", "") == "cat"

    def test_tail_without_letters(self):
        # Digits are neither upper nor lower case, so the template tail is kept
        assert replace_with_case_respect("cAT", "W42") == "CAT"


@pytest.mark.unit
class TestComputeReplacementLiteral:
    """Literal replacements."""

    def test_not_in_replace_mode(self):
        assert compute_replacement("word", SearchModel(pattern="word", replacement="cat")) is None

    def test_no_model(self):
        assert compute_replacement("word", None) is None

    def test_verbatim(self, replace_model):
        assert compute_replacement("WORD", replace_model) == "cat"

    def test_dollar_is_literal(self):
        model = SearchModel(pattern="word", replacement="$1", is_replace=True)
        assert compute_replacement("word", model) == "$1"

    def test_preserve_case(self, replace_model):
        model = replace_model.create_updated(preserve_case=True)
        assert compute_replacement("WORD", model) == "CAT"
        assert compute_replacement("Word", model) == "Cat"


@pytest.mark.unit
class TestComputeReplacementRegex:
    """Regex replacements with group references."""

    def test_swaps_groups(self):
        model = SearchModel(pattern=r"(\w+)@(\w+)", is_regex=True, replacement="$2@$1", is_replace=True)
        assert compute_replacement("alice@example", model) == "example@alice"

    def test_named_groups(self):
        model = SearchModel(
            pattern=r"(?P<key>\w+)=(?P<value>\w+)", is_regex=True, replacement="${value}=${key}", is_replace=True
        )
        assert compute_replacement("a=1", model) == "1=a"

    def test_escapes_are_translated(self):
        model = SearchModel(pattern=r"(\w+),(\w+)", is_regex=True, replacement=r"$1\n$2", is_replace=True)
        assert compute_replacement("x,y", model) == "x\ny"

    def test_escaped_dollar(self):
        model = SearchModel(pattern=r"(\d+)", is_regex=True, replacement=r"\$$1", is_replace=True)
        assert compute_replacement("42", model) == "$42"

    def test_preserve_case_ignored_in_regex_mode(self):
        model = SearchModel(pattern="w(o)rd", is_regex=True, replacement="c$1t", preserve_case=True, is_replace=True)
        assert compute_replacement("WORD", model) == "cOt"

    def test_context_dependent_pattern_returns_template(self):
        model = SearchModel(pattern=r"(?<=\$)(\d+)", is_regex=True, replacement="<$1>", is_replace=True)
        assert compute_replacement("42", model) == "<$1>"

    def test_missing_group(self):
        model = SearchModel(pattern=r"(\w+)", is_regex=True, replacement="$2", is_replace=True)
        with pytest.raises(InvalidReplacementError):
            compute_replacement("abc", model)

    def test_dangling_dollar(self):
        model = SearchModel(pattern=r"\w+", is_regex=True, replacement="cost$", is_replace=True)
        with pytest.raises(InvalidReplacementError):
            compute_replacement("abc", model)

    def test_bad_pattern(self):
        model = SearchModel(pattern="[abc", is_regex=True, replacement="x", is_replace=True)
        with pytest.raises(PatternError):
            compute_replacement("abc", model)
