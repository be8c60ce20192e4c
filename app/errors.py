# app/errors.py


class PatternError(ValueError):
    """Raised when a kana -> romanization table is malformed."""
    def __init__(self, key: str, reason: str):
        super().__init__(f"Invalid pattern entry '{key}': {reason}")
        self.key = key
        self.reason = reason


class RoundNotComplete(RuntimeError):
    """Raised when a round is scored before every unit has been typed."""
    def __init__(self, cursor: int, unit_count: int):
        super().__init__(f"Round still in progress ({cursor}/{unit_count} units typed)")
        self.cursor = cursor
        self.unit_count = unit_count


class DatabaseError(Exception):
    pass
