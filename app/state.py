from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from app.calculation import RoundResult, round_half_up


def required_xp_for_level(level: int) -> int:
    return round_half_up(level ** 1.1 * 10.0)


@dataclass
class TypeRecord:
    timestamp: datetime
    display: str
    kana: str
    total_chars: int
    duration: float
    misses: int
    cps: float
    score: float
    xp_gained: int

    @classmethod
    def from_result(cls, result: RoundResult, display: str, kana: str) -> "TypeRecord":
        return cls(
            timestamp=datetime.now(timezone.utc),
            display=display,
            kana=kana,
            total_chars=result.total_chars,
            duration=result.elapsed,
            misses=result.misses,
            cps=result.cps,
            score=result.score,
            xp_gained=result.xp,
        )


@dataclass
class PlayerData:
    level: int = 1
    current_xp: int = 0
    total_typed_chars: int = 0
    total_misses: int = 0
    history: List[TypeRecord] = field(default_factory=list)

    def required_xp_for_next_level(self) -> int:
        return required_xp_for_level(self.level)

    def add_xp(self, xp: int, chars_typed: int) -> bool:
        self.current_xp += xp
        self.total_typed_chars += chars_typed

        leveled_up = False
        while self.current_xp >= self.required_xp_for_next_level():
            self.current_xp -= self.required_xp_for_next_level()
            self.level += 1
            leveled_up = True
        return leveled_up

    def xp_ratio(self) -> float:
        req = self.required_xp_for_next_level()
        if req <= 0:
            return 0.0
        return min(1.0, self.current_xp / req)
