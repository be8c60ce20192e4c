# services/session.py
from __future__ import annotations
import logging
import time
from typing import Callable, List, Optional, Sequence

from app.calculation import RoundResult
from app.phrases import Phrase
from core.patterns import PatternDictionary
from services.progression import ProgressionLedger
from services.typing_engine import TypingEngine

logger = logging.getLogger(__name__)


class TrainerSession:
    """
    Cycles through the phrase list, one TypingEngine per round. With
    auto_advance a round is scored and the next phrase loaded as soon as the
    last unit is typed.
    """

    def __init__(
        self,
        phrases: Sequence[Phrase],
        patterns: PatternDictionary,
        ledger: ProgressionLedger,
        clock: Callable[[], float] = time.monotonic,
        auto_advance: bool = True,
    ):
        if not phrases:
            raise ValueError("TrainerSession needs at least one phrase")
        self.phrases: List[Phrase] = list(phrases)
        self.patterns = patterns
        self.ledger = ledger
        self.auto_advance = auto_advance
        self._clock = clock

        self.index = 0
        self.last_result: Optional[RoundResult] = None
        self.last_leveled_up = False
        self.engine = self._new_engine()

    def _new_engine(self) -> TypingEngine:
        return TypingEngine.for_phrase(self.current_phrase.kana, self.patterns, clock=self._clock)

    @property
    def current_phrase(self) -> Phrase:
        return self.phrases[self.index]

    def type_char(self, ch: str) -> bool:
        if self.auto_advance and self.engine.is_complete:
            # phrase had nothing to type (kanji or punctuation only)
            self.finish_round()
        ok = self.engine.accept(ch)
        if self.auto_advance and self.engine.is_complete:
            self.finish_round()
        return ok

    def backspace(self):
        self.engine.backspace()

    def finish_round(self) -> RoundResult:
        phrase = self.current_phrase
        result = self.engine.finish()
        logger.info(
            "Round %r: %d chars, %.2fs, %d misses, %.2f cps, score %.0f, +%d xp",
            phrase.display, result.total_chars, result.elapsed, result.misses,
            result.cps, result.score, result.xp,
        )
        self.last_result = result
        self.last_leveled_up = self.ledger.record(result, phrase.display, phrase.kana)
        self.index = (self.index + 1) % len(self.phrases)
        self.engine = self._new_engine()
        return result

    def abandon_round(self):
        # no result, no progression update; the same phrase starts over
        logger.info("Round %r abandoned", self.current_phrase.display)
        self.engine = self._new_engine()
