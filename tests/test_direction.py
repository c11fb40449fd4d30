"""
Tests for translation direction resolution.
"""
import pytest

from kanalang.direction import Direction, detect_direction, resolve_direction


class TestResolveDirection:
    """Explicit names and aliases win over detection."""

    @pytest.mark.parametrize("name", ["to", "en2k", "en-kana"])
    def test_to_kana_aliases(self, name):
        assert resolve_direction(name, "mi toki pona") is Direction.TO_KANA

    @pytest.mark.parametrize("name", ["from", "k2en", "kana-en"])
    def test_from_kana_aliases(self, name):
        assert resolve_direction(name, "i want food") is Direction.FROM_KANA

    def test_auto_kana(self):
        assert resolve_direction("auto", "mi toki pona") is Direction.FROM_KANA

    def test_auto_english(self):
        assert resolve_direction("auto", "i want food") is Direction.TO_KANA

    def test_none_and_unknown_names_are_auto(self):
        assert resolve_direction(None, "mi toki pona") is Direction.FROM_KANA
        assert resolve_direction("klingon", "i want food") is Direction.TO_KANA

    def test_direction_passthrough(self):
        assert resolve_direction(Direction.FROM_KANA, "i want food") is Direction.FROM_KANA


class TestDetectDirection:
    """Keyword sniffing is a substring test on the lowercased text."""

    def test_kana_keyword(self):
        assert detect_direction("sina pona") is Direction.FROM_KANA

    def test_case_insensitive(self):
        assert detect_direction("MI TOKI") is Direction.FROM_KANA

    def test_substring_matches_inside_english_words(self):
        # "e" in "hello", "li" in "like", "mi" in "mind"
        assert detect_direction("hello") is Direction.FROM_KANA
        assert detect_direction("i like it") is Direction.FROM_KANA
        assert detect_direction("mind") is Direction.FROM_KANA

    def test_no_keyword_is_english(self):
        assert detect_direction("i want food") is Direction.TO_KANA
        assert detect_direction("what a lot of fun") is Direction.TO_KANA

    def test_empty_text_is_english(self):
        assert detect_direction("") is Direction.TO_KANA
