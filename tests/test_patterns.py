"""Tests for the kana -> romanization pattern table."""
import pytest

from app.errors import PatternError
from core.patterns import PatternDictionary, build_patterns, default_patterns


class TestPatternDictionaryValidation:
    """Construction-time checks."""

    def test_accepts_valid_table(self):
        table = PatternDictionary({"し": ["si", "shi"], "きゃ": ["kya"]})
        assert table["し"] == ("si", "shi")
        assert len(table) == 2
        assert table.max_key_length == 2

    def test_rejects_empty_candidates(self):
        with pytest.raises(PatternError) as exc:
            PatternDictionary({"し": []})
        assert exc.value.key == "し"

    def test_rejects_duplicate_candidates(self):
        with pytest.raises(PatternError):
            PatternDictionary({"し": ["si", "si"]})

    def test_rejects_non_letter_romanization(self):
        with pytest.raises(PatternError):
            PatternDictionary({"ー": ["-"]})

    def test_rejects_too_long_romanization(self):
        with pytest.raises(PatternError):
            PatternDictionary({"っちゃ": ["ltucha"]})

    def test_rejects_uppercase_romanization(self):
        with pytest.raises(PatternError):
            PatternDictionary({"し": ["SI"]})

    def test_rejects_long_key(self):
        with pytest.raises(PatternError):
            PatternDictionary({"あいうえ": ["aiue"]})

    def test_pattern_error_is_value_error(self):
        assert issubclass(PatternError, ValueError)

    def test_table_is_read_only(self):
        table = PatternDictionary({"し": ["si"]})
        with pytest.raises(TypeError):
            table["か"] = ("ka",)
        with pytest.raises(TypeError):
            table._table["か"] = ("ka",)

    def test_source_mapping_changes_do_not_leak(self):
        source = {"し": ["si"]}
        table = PatternDictionary(source)
        source["か"] = ["ka"]
        assert "か" not in table


class TestDefaultPatterns:
    """The shipped table."""

    def test_cached_instance(self):
        assert default_patterns() is default_patterns()

    def test_every_entry_is_valid(self, patterns):
        for key, candidates in patterns.items():
            assert 1 <= len(key) <= 3
            assert candidates
            assert len(set(candidates)) == len(candidates)
            for c in candidates:
                assert c.isalpha() and c.islower() and c.isascii()
                assert 1 <= len(c) <= 4

    def test_preferred_order(self, patterns):
        assert patterns["し"] == ("si", "shi", "ci")
        assert patterns["しゃ"][:2] == ("sya", "sha")
        assert patterns["ん"][:2] == ("n", "nn")
        assert patterns["ち"] == ("ti", "chi")
        assert patterns["つ"] == ("tu", "tsu")

    def test_sokuon_doubles_consonant(self, patterns):
        assert patterns["っか"] == ("kka", "cca")
        assert patterns["っし"] == ("ssi", "sshi", "cci")
        assert patterns["っきゃ"] == ("kkya",)
        assert "っあ" not in patterns
        assert "っな" not in patterns

    def test_moraic_n_before_vowel(self, patterns):
        assert patterns["んあ"] == ("nna", "xna")
        assert patterns["んや"] == ("nnya", "xnya")
        assert "nnwhu" not in patterns["んう"]

    def test_katakana_mirrors_hiragana(self, patterns):
        assert patterns["シ"] == patterns["し"]
        assert patterns["キャ"] == patterns["きゃ"]
        assert patterns["ッカ"] == patterns["っか"]
        assert patterns["ヴ"] == ("vu",)

    def test_hiragana_only_build(self):
        table = build_patterns(with_katakana=False)
        assert "し" in table
        assert "シ" not in table

    def test_no_entry_for_kanji_or_punctuation(self, patterns):
        for ch in ("猫", "。", "、", "ー", " "):
            assert ch not in patterns
