# core/segmenter.py
from __future__ import annotations
import logging
from typing import List

from core.patterns import MAX_KEY_LENGTH, PatternDictionary
from core.units import TypingUnit

logger = logging.getLogger(__name__)


def segment(phrase: str, patterns: PatternDictionary) -> List[TypingUnit]:
    """
    Split a kana phrase into typing units, longest key first (3, then 2, then 1
    characters), so "しゃ" is never read as "し" + "ゃ".
    Characters with no entry at any length (kanji, punctuation) are skipped:
    they stay in the displayed phrase but are never typed.
    """
    units: List[TypingUnit] = []
    i = 0
    n = len(phrase)
    while i < n:
        for size in range(min(MAX_KEY_LENGTH, n - i), 0, -1):
            chunk = phrase[i:i + size]
            candidates = patterns.get(chunk)
            if candidates is not None:
                units.append(TypingUnit(chunk, candidates))
                i += size
                break
        else:
            logger.debug("No romanization for %r at %d, skipping", phrase[i], i)
            i += 1
    return units
