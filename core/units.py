# core/units.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class TypingUnit:
    """
    One segmented chunk of kana ("し", "きゃ", "っか") and the romanizations
    accepted for it. `index` picks the assumed candidate, `typed` counts how
    many of its leading characters are confirmed.
    """
    kana: str
    patterns: Tuple[str, ...]
    index: int = 0
    typed: int = 0

    @property
    def pattern(self) -> str:
        return self.patterns[self.index]

    @property
    def confirmed(self) -> str:
        return self.pattern[:self.typed]

    @property
    def remaining(self) -> str:
        return self.pattern[self.typed:]

    def expected_char(self) -> Optional[str]:
        if self.is_complete():
            return None
        return self.pattern[self.typed]

    def is_complete(self) -> bool:
        return self.typed >= len(self.pattern)

    def try_advance(self, ch: str) -> bool:
        if ch != self.expected_char():
            return False
        self.typed += 1
        return True

    def try_switch(self, ch: str) -> bool:
        # "s" fits both "si" and "shi"; the second key decides which one is meant
        prefix = self.confirmed
        for i, candidate in enumerate(self.patterns):
            if i == self.index:
                continue
            if len(candidate) <= self.typed or not candidate.startswith(prefix):
                continue
            if candidate[self.typed] == ch:
                self.index = i
                self.typed += 1
                return True
        return False

    def retreat(self):
        if self.typed > 0:
            self.typed -= 1

    def reopen_last(self):
        self.typed = max(len(self.pattern) - 1, 0)
