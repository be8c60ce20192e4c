import json, logging, os
from pathlib import Path
from typing import List, Optional

from app.phrases import PHRASES, Phrase, phrase_from_dict

logger = logging.getLogger(__name__)

DATA_DIR = "data"
PHRASES_PATH = Path(DATA_DIR) / "phrases.json"


def ensure_app_files(data_dir: str = DATA_DIR):
    os.makedirs(data_dir, exist_ok=True)


def load_phrases(path: Optional[Path] = None) -> List[Phrase]:
    """
    Phrases from a JSON list of {"display": ..., "kana": ...} objects.
    Bad entries are skipped; a missing, unreadable or empty file gives the
    built-in list.
    """
    path = Path(path) if path is not None else PHRASES_PATH
    if not path.exists():
        return list(PHRASES)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Failed to read phrases from %s: %s", path, e)
        return list(PHRASES)

    if not isinstance(data, list):
        logger.warning("Phrase file %s must hold a JSON list", path)
        return list(PHRASES)

    phrases: List[Phrase] = []
    for i, item in enumerate(data):
        try:
            if not isinstance(item, dict):
                raise ValueError("entry is not an object")
            phrases.append(phrase_from_dict(item))
        except ValueError as e:
            logger.warning("Skipping phrase #%d in %s: %s", i, path, e)
    return phrases or list(PHRASES)
