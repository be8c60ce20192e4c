# services/progression.py
from __future__ import annotations
import logging
from typing import Optional

from app.calculation import RoundResult
from app.errors import DatabaseError
from app.state import PlayerData, TypeRecord
from utils.db_helper import DB_PATH, load_player, save_player

logger = logging.getLogger(__name__)


class ProgressionLedger:
    """
    Lifetime level/XP totals plus the round history. Saving is best effort:
    a failed write is logged and the in-memory totals are kept.
    """

    def __init__(self, player: Optional[PlayerData] = None, db_path: Optional[str] = DB_PATH):
        self.player = player or PlayerData()
        self.db_path = db_path

    @classmethod
    def load(cls, db_path: str = DB_PATH) -> "ProgressionLedger":
        try:
            player = load_player(db_path)
        except DatabaseError as e:
            logger.warning("Failed to load save data from %s: %s", db_path, e)
            player = None
        if player is None:
            logger.info("Starting with fresh player data")
        return cls(player, db_path)

    def record(self, result: RoundResult, display: str, kana: str) -> bool:
        """Apply a finished round; returns True when the player levelled up."""
        leveled_up = self.player.add_xp(result.xp, result.total_chars)
        self.player.total_misses += result.misses
        record = TypeRecord.from_result(result, display, kana)
        self.player.history.append(record)
        if leveled_up:
            logger.info("Level up! Now level %d", self.player.level)
        self.save(record)
        return leveled_up

    def save(self, record: Optional[TypeRecord] = None):
        if self.db_path is None:
            return
        try:
            save_player(self.player, record, self.db_path)
        except DatabaseError as e:
            logger.warning("Failed to save progress to %s: %s", self.db_path, e)

    @property
    def level(self) -> int:
        return self.player.level

    @property
    def current_xp(self) -> int:
        return self.player.current_xp

    def required_xp(self) -> int:
        return self.player.required_xp_for_next_level()

    def xp_ratio(self) -> float:
        return self.player.xp_ratio()
