"""Tests for per-unit matching."""
from core.units import TypingUnit


def shi():
    return TypingUnit("し", ("si", "shi", "ci"))


class TestTypingUnit:

    def test_initial_state(self):
        u = shi()
        assert u.pattern == "si"
        assert u.expected_char() == "s"
        assert not u.is_complete()
        assert u.remaining == "si"
        assert u.confirmed == ""

    def test_advance_on_expected_char(self):
        u = shi()
        assert u.try_advance("s")
        assert u.typed == 1
        assert u.confirmed == "s"
        assert u.remaining == "i"

    def test_advance_rejects_other_char(self):
        u = shi()
        assert not u.try_advance("h")
        assert u.typed == 0
        assert u.index == 0

    def test_complete(self):
        u = shi()
        u.try_advance("s")
        u.try_advance("i")
        assert u.is_complete()
        assert u.expected_char() is None
        assert not u.try_advance("i")

    def test_switch_after_shared_prefix(self):
        u = shi()
        assert u.try_advance("s")
        assert not u.try_advance("h")
        assert u.try_switch("h")
        assert u.pattern == "shi"
        assert u.typed == 2
        assert u.try_advance("i")
        assert u.is_complete()

    def test_switch_on_first_char(self):
        u = shi()
        assert u.try_switch("c")
        assert u.pattern == "ci"
        assert u.typed == 1

    def test_switch_requires_matching_prefix(self):
        # "ci" has 'i' at offset 1 but does not start with the typed "s"
        u = TypingUnit("x", ("sa", "ci"))
        u.try_advance("s")
        assert not u.try_switch("i")
        assert u.pattern == "sa"
        assert u.typed == 1

    def test_switch_skips_current_candidate(self):
        u = TypingUnit("x", ("ab", "cd"))
        assert not u.try_switch("a")
        assert u.index == 0
        assert u.typed == 0

    def test_first_matching_candidate_wins(self):
        u = TypingUnit("ちゃ", ("tya", "cha", "cya"))
        assert u.try_switch("c")
        assert u.pattern == "cha"
        assert u.try_switch("y")
        assert u.pattern == "cya"
        assert u.typed == 2

    def test_switch_ignores_shorter_candidates(self):
        u = TypingUnit("ん", ("nn", "n"))
        u.try_advance("n")
        assert not u.try_switch("x")
        assert u.index == 0

    def test_retreat(self):
        u = shi()
        u.try_advance("s")
        u.retreat()
        assert u.typed == 0
        u.retreat()
        assert u.typed == 0

    def test_retreat_keeps_assumed_candidate(self):
        u = shi()
        u.try_advance("s")
        u.try_switch("h")
        u.retreat()
        u.retreat()
        assert u.typed == 0
        assert u.pattern == "shi"

    def test_reopen_last(self):
        u = TypingUnit("しゃ", ("sya", "sha"))
        u.typed = 3
        u.reopen_last()
        assert u.typed == 2
        single = TypingUnit("ん", ("n",))
        single.typed = 1
        single.reopen_last()
        assert single.typed == 0
