from dataclasses import dataclass
import math


@dataclass(frozen=True)
class RoundResult:
    elapsed: float
    total_chars: int
    misses: int
    cps: float
    accuracy: float
    score: float
    xp: int


def round_half_up(value: float) -> int:
    # round() is banker's rounding; 2.5 must give 3 here
    return int(math.floor(value + 0.5))


def accuracy(total_chars: int, misses: int) -> float:
    attempts = total_chars + misses
    if attempts <= 0:
        return 100.0
    return total_chars / attempts * 100.0


def chars_per_second(total_chars: int, elapsed: float) -> float:
    if elapsed <= 0:
        return 0.0
    return total_chars / elapsed


def score_round(elapsed: float, total_chars: int, misses: int) -> RoundResult:
    """
    Score a finished round.
    score = cps * 100 * (acc/100)^3 * chars; the cubic accuracy term makes a
    fast but sloppy round score below a slightly slower clean one.
    xp    = chars * (1 + cps/10) * (acc/100)^3, rounded, never negative.
    """
    acc = accuracy(total_chars, misses)
    cps = chars_per_second(total_chars, elapsed)
    acc_mod = (acc / 100.0) ** 3
    score = (cps * 100.0) * acc_mod * total_chars
    xp = max(0, round_half_up(total_chars * (1.0 + cps / 10.0) * acc_mod))
    return RoundResult(
        elapsed=max(0.0, elapsed),
        total_chars=total_chars,
        misses=misses,
        cps=cps,
        accuracy=acc,
        score=score,
        xp=xp,
    )
