"""Tests for filter_string."""

import re

import pytest
import regex

from value_filters import INVALID, StringOptions, filter_string, make_string_filter


class TestStringBasics:
    """Input coercion and identity."""

    def test_plain_string_unchanged(self):
        """A string with no options is returned as-is."""
        assert filter_string("hello") == "hello"

    def test_none_becomes_empty_string(self):
        """None is read as the empty string, which is valid."""
        assert filter_string(None) == ""
        assert filter_string(None, {"required": False}) == ""

    def test_empty_string_is_not_invalid(self):
        """An empty optional string stays "" (distinct from INVALID)."""
        result = filter_string("", {"required": False})

        assert result == ""
        assert result is not INVALID

    def test_non_string_is_invalid(self):
        """Non-string input fails immediately."""
        assert filter_string(42) is INVALID
        assert filter_string(["a"]) is INVALID
        assert filter_string(b"bytes") is INVALID

    def test_identity_within_all_constraints(self):
        """A value satisfying every constraint comes back unchanged."""
        opts = {"min": 2, "max": 10, "regex": r"[a-z]+", "required": True}

        assert filter_string("hello", opts) == "hello"

    def test_idempotent(self):
        """Filtering a filtered value again yields the same value."""
        opts = {"max": 5, "default": "none"}
        once = filter_string("", opts)

        assert filter_string(once, opts) == once


class TestRequired:
    """The required option."""

    def test_required_rejects_empty(self):
        """required + empty → INVALID."""
        assert filter_string("", {"required": True}) is INVALID
        assert filter_string(None, {"required": True}) is INVALID

    def test_required_suppresses_default(self):
        """A required field never receives the default."""
        assert filter_string(None, {"required": True, "default": "x"}) is INVALID

    def test_required_suppresses_default_after_length_failure(self):
        """Default is also withheld when a required value fails max."""
        assert filter_string("toolong", {"required": True, "max": 3, "default": "x"}) is INVALID

    def test_required_accepts_non_empty(self):
        assert filter_string("x", {"required": True}) == "x"


class TestLength:
    """max / min bounds on the character count."""

    def test_max_boundary(self):
        """Length == max is valid, max + 1 is not."""
        assert filter_string("abc", {"max": 3}) == "abc"
        assert filter_string("abcd", {"max": 3}) is INVALID

    def test_min_boundary(self):
        """Length == min is valid, min - 1 is not."""
        assert filter_string("abc", {"min": 3}) == "abc"
        assert filter_string("ab", {"min": 3}) is INVALID

    def test_counts_codepoints_not_bytes(self):
        """Multibyte characters count once each."""
        word = "żółw"  # 4 codepoints, 7 UTF-8 bytes

        assert filter_string(word, {"max": 4}) == word
        assert filter_string(word, {"min": 4}) == word
        assert filter_string(word, {"max": 3}) is INVALID

    def test_empty_optional_skips_min(self):
        """An empty optional value is not length-checked."""
        assert filter_string("", {"min": 3}) == ""

    def test_length_failure_falls_back_to_default(self):
        assert filter_string("abcdef", {"max": 3, "default": "abc"}) == "abc"


class TestRegex:
    """Pattern option."""

    def test_full_match_required(self):
        """The pattern must cover the whole value."""
        assert filter_string("12345", {"regex": r"\d+"}) == "12345"
        assert filter_string("123ab", {"regex": r"\d+"}) is INVALID

    def test_anchored_pattern(self):
        assert filter_string("abc", {"regex": r"^abc$"}) == "abc"

    def test_bad_pattern_is_invalid(self):
        """A pattern that does not compile makes the value invalid."""
        assert filter_string("abc", {"regex": "(unclosed"}) is INVALID

    def test_bad_pattern_falls_back_to_default(self):
        assert filter_string("abc", {"regex": "(unclosed", "default": "d"}) == "d"

    def test_compiled_patterns(self):
        """Compiled regex and re patterns are accepted."""
        assert filter_string("abc", {"regex": regex.compile(r"[a-c]+")}) == "abc"
        assert filter_string("abc", {"regex": re.compile(r"[a-c]+")}) == "abc"
        assert filter_string("abd", {"regex": re.compile(r"[a-c]+")}) is INVALID

    def test_timeout_factory(self):
        """make_string_filter builds a working filter with its own timeout."""
        fast = make_string_filter(timeout=0.5)

        assert fast("aaa", {"regex": r"a+"}) == "aaa"
        assert fast("aab", {"regex": r"a+"}) is INVALID


class TestDefault:
    """Default substitution."""

    def test_empty_gets_default(self):
        assert filter_string("", {"default": "fallback"}) == "fallback"
        assert filter_string(None, {"default": "fallback"}) == "fallback"

    def test_non_string_gets_default(self):
        assert filter_string(3.5, {"default": "fallback"}) == "fallback"

    def test_valid_value_keeps_value(self):
        assert filter_string("given", {"default": "fallback"}) == "given"


class TestMalformedOptions:
    """Wrong-typed options behave as if absent."""

    @pytest.mark.parametrize(
        "options",
        [
            {"max": "3"},
            {"min": 2.5},
            {"required": "yes"},
            {"regex": 123},
            {"max": True},
            {"unknown": 1},
            "not a mapping",
            None,
        ],
    )
    def test_ignored(self, options):
        """Malformed options impose no constraint."""
        assert filter_string("abcdef", options) == "abcdef"

    def test_non_string_default_ignored(self):
        assert filter_string("", {"default": 5}) == ""

    def test_dataclass_options(self):
        """StringOptions works the same as a mapping."""
        assert filter_string("abcd", StringOptions(max=3)) is INVALID
        assert filter_string("", StringOptions(default="d")) == "d"

    def test_dataclass_drops_wrong_types(self):
        """A hand-built StringOptions with a wrong-typed field ignores it."""
        opts = StringOptions(max="3")  # type: ignore[arg-type]

        assert opts.max is None
        assert filter_string("abcdef", opts) == "abcdef"
