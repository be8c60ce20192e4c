# app/phrases.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any, List


@dataclass(frozen=True)
class Phrase:
    display: str  # shown to the player, may contain kanji
    kana: str     # what actually gets typed


# -------- Built-in phrases (shortest kana first) --------
PHRASES: List[Phrase] = [
    Phrase("猫", "ねこ"),
    Phrase("犬", "いぬ"),
    Phrase("空", "そら"),
    Phrase("海", "うみ"),
    Phrase("山", "やま"),
    Phrase("川", "かわ"),
    Phrase("車", "くるま"),
    Phrase("リンゴ", "りんご"),
    Phrase("ミカン", "みかん"),
    Phrase("電話", "でんわ"),
    Phrase("時計", "とけい"),
    Phrase("こんにちは", "こんにちは"),
    Phrase("ありがとう", "ありがとう"),
    Phrase("さようなら", "さようなら"),
    Phrase("飛行機", "ひこうき"),
    Phrase("図書館", "としょかん"),
    Phrase("新幹線", "しんかんせん"),
    Phrase("動物園", "どうぶつえん"),
    Phrase("水族館", "すいぞくかん"),
    Phrase("遊園地", "ゆうえんち"),
    Phrase("駐車場", "ちゅうしゃじょう"),
    Phrase("高速道路", "こうそくどうろ"),
]


def phrase_from_dict(d: Dict[str, Any]) -> Phrase:
    required = {"display", "kana"}
    missing = required - set(d.keys())
    if missing:
        raise ValueError(f"Missing phrase keys: {', '.join(sorted(missing))}")
    display = str(d["display"]).strip()
    kana = str(d["kana"]).strip()
    if not kana:
        raise ValueError("Phrase kana must not be empty")
    return Phrase(display=display or kana, kana=kana)
