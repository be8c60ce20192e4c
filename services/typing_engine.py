# services/typing_engine.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple
import time

from app.calculation import RoundResult, score_round
from app.errors import RoundNotComplete
from core.patterns import PatternDictionary
from core.segmenter import segment
from core.units import TypingUnit


class Placement(Enum):
    TYPED = "typed"
    CURRENT = "current"
    PENDING = "pending"


@dataclass(frozen=True)
class UnitView:
    kana: str
    romaji: str
    typed: int
    placement: Placement


@dataclass(frozen=True)
class RoundView:
    units: Tuple[UnitView, ...]
    is_error: bool
    is_complete: bool


class TypingEngine:
    """
    Keystroke matcher for one round. A new round always gets a new engine.

    The cursor points at the unit being typed and equals len(units) once the
    round is complete. A unit that becomes complete moves the cursor in the
    same call, so a complete unit is never left under the cursor.
    """

    def __init__(self, units: Sequence[TypingUnit], clock: Callable[[], float] = time.monotonic):
        self.units: List[TypingUnit] = list(units)
        self.cursor = 0
        self.is_error = False
        self.misses = 0
        self.started_at: Optional[float] = None
        self._clock = clock

    @classmethod
    def for_phrase(cls, kana: str, patterns: PatternDictionary,
                   clock: Callable[[], float] = time.monotonic) -> "TypingEngine":
        return cls(segment(kana, patterns), clock=clock)

    @property
    def is_complete(self) -> bool:
        return self.cursor >= len(self.units)

    @property
    def current(self) -> Optional[TypingUnit]:
        if self.is_complete:
            return None
        return self.units[self.cursor]

    def accept(self, ch: str) -> bool:
        if self.is_complete:
            return False
        if self.started_at is None:
            self.started_at = self._clock()

        unit = self.units[self.cursor]
        if unit.try_advance(ch) or unit.try_switch(ch):
            self.is_error = False
            if unit.is_complete():
                self.cursor += 1
            return True

        self.is_error = True
        self.misses += 1
        return False

    def backspace(self):
        if self.is_complete and self.cursor > 0:
            self.cursor -= 1

        if not self.is_complete:
            unit = self.units[self.cursor]
            if unit.typed > 0:
                unit.retreat()
            elif self.cursor > 0:
                # erase the last visible character of the previous unit, keep the rest
                self.cursor -= 1
                self.units[self.cursor].reopen_last()

        self.is_error = False

    def total_chars(self) -> int:
        return sum(len(u.pattern) for u in self.units)

    def elapsed(self) -> float:
        if self.started_at is None:
            return 0.0
        return max(0.0, self._clock() - self.started_at)

    def finish(self) -> RoundResult:
        if not self.is_complete:
            raise RoundNotComplete(self.cursor, len(self.units))
        result = score_round(self.elapsed(), self.total_chars(), self.misses)
        self.started_at = None
        return result

    def romaji(self) -> str:
        return "".join(u.pattern for u in self.units)

    def view(self) -> RoundView:
        units = []
        for i, u in enumerate(self.units):
            if i < self.cursor:
                placement = Placement.TYPED
            elif i == self.cursor:
                placement = Placement.CURRENT
            else:
                placement = Placement.PENDING
            units.append(UnitView(u.kana, u.pattern, u.typed, placement))
        return RoundView(tuple(units), self.is_error, self.is_complete)
