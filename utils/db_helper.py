import sqlite3, os
from datetime import datetime
from typing import List, Optional

from app.errors import DatabaseError
from app.state import PlayerData, TypeRecord

DB_PATH = "data/typewiz.db"

_RECORD_COLUMNS = (
    "timestamp, display, kana, total_chars, duration, misses, cps, score, xp_gained"
)


def _ensure_schema(conn):
    conn.execute("""
    CREATE TABLE IF NOT EXISTS player(
        id INTEGER PRIMARY KEY CHECK (id = 1),
        level INTEGER NOT NULL,
        current_xp INTEGER NOT NULL,
        total_typed_chars INTEGER NOT NULL,
        total_misses INTEGER NOT NULL
    );
    """)
    conn.execute("""
    CREATE TABLE IF NOT EXISTS history(
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        timestamp TEXT NOT NULL,
        display TEXT NOT NULL,
        kana TEXT NOT NULL,
        total_chars INTEGER NOT NULL,
        duration REAL NOT NULL,
        misses INTEGER NOT NULL,
        cps REAL NOT NULL,
        score REAL NOT NULL,
        xp_gained INTEGER NOT NULL
    );
    """)


def get_conn(db_path: str = DB_PATH):
    folder = os.path.dirname(db_path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    conn = sqlite3.connect(db_path)
    _ensure_schema(conn)
    return conn


def _record_from_row(row) -> TypeRecord:
    return TypeRecord(
        timestamp=datetime.fromisoformat(row[0]),
        display=row[1],
        kana=row[2],
        total_chars=row[3],
        duration=row[4],
        misses=row[5],
        cps=row[6],
        score=row[7],
        xp_gained=row[8],
    )


def load_history(db_path: str = DB_PATH) -> List[TypeRecord]:
    conn = None
    try:
        conn = get_conn(db_path)
        rows = conn.execute(f"SELECT {_RECORD_COLUMNS} FROM history ORDER BY id").fetchall()
        return [_record_from_row(r) for r in rows]
    except (sqlite3.Error, OSError, ValueError) as e:
        raise DatabaseError(str(e)) from e
    finally:
        if conn is not None:
            conn.close()


def load_player(db_path: str = DB_PATH) -> Optional[PlayerData]:
    """Return the saved player, or None when nothing has been saved yet."""
    conn = None
    try:
        conn = get_conn(db_path)
        row = conn.execute(
            "SELECT level, current_xp, total_typed_chars, total_misses FROM player WHERE id = 1"
        ).fetchone()
        if row is None:
            return None
        rows = conn.execute(f"SELECT {_RECORD_COLUMNS} FROM history ORDER BY id").fetchall()
        return PlayerData(
            level=row[0],
            current_xp=row[1],
            total_typed_chars=row[2],
            total_misses=row[3],
            history=[_record_from_row(r) for r in rows],
        )
    except (sqlite3.Error, OSError, ValueError) as e:
        raise DatabaseError(str(e)) from e
    finally:
        if conn is not None:
            conn.close()


def save_player(player: PlayerData, record: Optional[TypeRecord] = None, db_path: str = DB_PATH):
    """Upsert the player totals and append `record` to the history in one transaction."""
    conn = None
    try:
        conn = get_conn(db_path)
        with conn:
            conn.execute(
                "INSERT OR REPLACE INTO player(id, level, current_xp, total_typed_chars, total_misses) "
                "VALUES (1,?,?,?,?)",
                (player.level, player.current_xp, player.total_typed_chars, player.total_misses),
            )
            if record is not None:
                conn.execute(
                    f"INSERT INTO history({_RECORD_COLUMNS}) VALUES (?,?,?,?,?,?,?,?,?)",
                    (
                        record.timestamp.isoformat(),
                        record.display,
                        record.kana,
                        record.total_chars,
                        record.duration,
                        record.misses,
                        record.cps,
                        record.score,
                        record.xp_gained,
                    ),
                )
    except (sqlite3.Error, OSError) as e:
        raise DatabaseError(str(e)) from e
    finally:
        if conn is not None:
            conn.close()
