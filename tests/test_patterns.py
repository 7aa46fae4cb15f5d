import re

import pytest

from data_designer_doc_rubric.patterns import Pattern, PatternRegistry


class TestPattern:
    def test_words_are_case_insensitive_whole_words(self):
        pattern = Pattern.words("buzz", ["robust", "seamless"])
        assert pattern.occurs("A Robust design")
        assert not pattern.occurs("robustness matters")
        assert pattern.matches("robust and seamless") == ["robust", "seamless"]

    def test_words_with_suffix(self):
        pattern = Pattern.words("verb", ["led", "launch"], suffix="(?:d|ed)?")
        assert pattern.occurs("We launched it")
        assert pattern.occurs("Led the team")
        assert not pattern.occurs("launching soon")

    def test_multi_word_phrase_matches_as_substring(self):
        pattern = Pattern.phrase("filler", "in order to")
        assert pattern.occurs("We did this In order to ship.")

    def test_single_token_phrase_with_punctuation(self):
        pattern = Pattern.phrase("syco", "absolutely!")
        assert pattern.occurs("Absolutely! Let's go.")
        assert not pattern.occurs("absolutely fine")

    def test_count_and_first(self):
        pattern = Pattern.compile("digits", r"\d+")
        assert pattern.count("1 and 22 and 333") == 3
        assert pattern.first("x 42 y 7") == "42"
        assert pattern.first("none") is None

    def test_compile_respects_flags(self):
        pattern = Pattern.compile("heading", r"^#+\s*status", re.MULTILINE)
        assert pattern.occurs("intro\n## status")
        assert not pattern.occurs("intro\n## Status")


class TestPatternRegistry:
    def test_lookup_and_len(self):
        registry = PatternRegistry.of(Pattern.compile("a.one", "one"), Pattern.compile("b.two", "two"))
        assert len(registry) == 2
        assert registry["a.one"].occurs("ONE")
        assert list(registry) == ["a.one", "b.two"]

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate pattern name"):
            PatternRegistry.of(Pattern.compile("x", "x"), Pattern.compile("x", "y"))

    def test_unknown_name_raises_key_error(self):
        registry = PatternRegistry.of(Pattern.compile("x", "x"))
        with pytest.raises(KeyError, match="Unknown pattern"):
            registry["missing"]

    def test_group_keeps_registration_order(self):
        registry = PatternRegistry.of(
            Pattern.compile("verb.b", "b"),
            Pattern.compile("noun.a", "a"),
            Pattern.compile("verb.a", "a"),
        )
        assert [p.name for p in registry.group("verb")] == ["verb.b", "verb.a"]
        assert registry.group("adj") == []

    def test_registry_is_read_only(self):
        registry = PatternRegistry.of(Pattern.compile("x", "x"))
        with pytest.raises(TypeError):
            registry["y"] = Pattern.compile("y", "y")
