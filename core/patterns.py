# core/patterns.py
from __future__ import annotations
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Tuple
import re

import jaconv

from app.errors import PatternError


MAX_KEY_LENGTH = 3
_ROMAJI_RE = re.compile(r"^[a-z]{1,4}$")

# Candidate order is preference order: index 0 is what gets displayed first.
HIRAGANA_PATTERNS: Dict[str, Tuple[str, ...]] = {
    # vowels
    "あ": ("a",), "い": ("i", "yi"), "う": ("u", "wu", "whu"), "え": ("e",), "お": ("o",),
    # plain rows
    "か": ("ka", "ca"), "き": ("ki",), "く": ("ku", "cu", "qu"), "け": ("ke",), "こ": ("ko", "co"),
    "さ": ("sa",), "し": ("si", "shi", "ci"), "す": ("su",), "せ": ("se", "ce"), "そ": ("so",),
    "た": ("ta",), "ち": ("ti", "chi"), "つ": ("tu", "tsu"), "て": ("te",), "と": ("to",),
    "な": ("na",), "に": ("ni",), "ぬ": ("nu",), "ね": ("ne",), "の": ("no",),
    "は": ("ha",), "ひ": ("hi",), "ふ": ("hu", "fu"), "へ": ("he",), "ほ": ("ho",),
    "ま": ("ma",), "み": ("mi",), "む": ("mu",), "め": ("me",), "も": ("mo",),
    "や": ("ya",), "ゆ": ("yu",), "よ": ("yo",),
    "ら": ("ra",), "り": ("ri",), "る": ("ru",), "れ": ("re",), "ろ": ("ro",),
    "わ": ("wa",), "を": ("wo",), "ん": ("n", "nn", "xn"),
    # dakuten / handakuten
    "が": ("ga",), "ぎ": ("gi",), "ぐ": ("gu",), "げ": ("ge",), "ご": ("go",),
    "ざ": ("za",), "じ": ("zi", "ji"), "ず": ("zu",), "ぜ": ("ze",), "ぞ": ("zo",),
    "だ": ("da",), "ぢ": ("di",), "づ": ("du",), "で": ("de",), "ど": ("do",),
    "ば": ("ba",), "び": ("bi",), "ぶ": ("bu",), "べ": ("be",), "ぼ": ("bo",),
    "ぱ": ("pa",), "ぴ": ("pi",), "ぷ": ("pu",), "ぺ": ("pe",), "ぽ": ("po",),
    "ゔ": ("vu",),
    # small kana typed on their own
    "ぁ": ("xa", "la"), "ぃ": ("xi", "li"), "ぅ": ("xu", "lu"), "ぇ": ("xe", "le"), "ぉ": ("xo", "lo"),
    "ゃ": ("xya", "lya"), "ゅ": ("xyu", "lyu"), "ょ": ("xyo", "lyo"), "ゎ": ("xwa", "lwa"),
    "っ": ("xtu", "ltu", "xtsu", "ltsu"),
    # palatalized digraphs
    "きゃ": ("kya",), "きゅ": ("kyu",), "きょ": ("kyo",), "きぇ": ("kye",),
    "ぎゃ": ("gya",), "ぎゅ": ("gyu",), "ぎょ": ("gyo",), "ぎぇ": ("gye",),
    "しゃ": ("sya", "sha"), "しゅ": ("syu", "shu"), "しょ": ("syo", "sho"), "しぇ": ("sye", "she"),
    "じゃ": ("zya", "ja", "jya"), "じゅ": ("zyu", "ju", "jyu"), "じょ": ("zyo", "jo", "jyo"),
    "じぇ": ("zye", "je", "jye"),
    "ちゃ": ("tya", "cha", "cya"), "ちゅ": ("tyu", "chu", "cyu"), "ちょ": ("tyo", "cho", "cyo"),
    "ちぇ": ("tye", "che", "cye"),
    "ぢゃ": ("dya",), "ぢゅ": ("dyu",), "ぢょ": ("dyo",),
    "にゃ": ("nya",), "にゅ": ("nyu",), "にょ": ("nyo",), "にぇ": ("nye",),
    "ひゃ": ("hya",), "ひゅ": ("hyu",), "ひょ": ("hyo",), "ひぇ": ("hye",),
    "びゃ": ("bya",), "びゅ": ("byu",), "びょ": ("byo",),
    "ぴゃ": ("pya",), "ぴゅ": ("pyu",), "ぴょ": ("pyo",),
    "みゃ": ("mya",), "みゅ": ("myu",), "みょ": ("myo",),
    "りゃ": ("rya",), "りゅ": ("ryu",), "りょ": ("ryo",),
    # small-vowel combinations
    "ふぁ": ("fa",), "ふぃ": ("fi",), "ふぇ": ("fe",), "ふぉ": ("fo",), "ふゅ": ("fyu",),
    "うぃ": ("wi", "whi"), "うぇ": ("we", "whe"), "うぉ": ("who",),
    "ゔぁ": ("va",), "ゔぃ": ("vi",), "ゔぇ": ("ve",), "ゔぉ": ("vo",),
    "てぃ": ("thi",), "てゅ": ("thu",), "でぃ": ("dhi",), "でゅ": ("dhu",),
    "とぅ": ("twu",), "どぅ": ("dwu",), "つぁ": ("tsa",),
}

_SMALL_KANA = "ぁぃぅぇぉゃゅょゎっ"
_VOWEL_KANA = "あいうえお"
_Y_KANA = "やゆよ"


def _dedupe(candidates: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(c for c in candidates if len(c) <= 4))


def _sokuon_patterns(base: Dict[str, Tuple[str, ...]]) -> Dict[str, Tuple[str, ...]]:
    """っ before a consonant kana doubles the consonant: っか -> kka, っきゃ -> kkya."""
    out: Dict[str, Tuple[str, ...]] = {}
    for key, candidates in base.items():
        if key[0] in _SMALL_KANA or key[0] in _VOWEL_KANA or key == "ん":
            continue
        doubled = _dedupe(c[0] + c for c in candidates if c[0] not in "aiueon")
        if doubled:
            out["っ" + key] = doubled
    return out


def _moraic_n_patterns(base: Dict[str, Tuple[str, ...]]) -> Dict[str, Tuple[str, ...]]:
    """ん before a vowel or y-kana must be typed "nn"/"xn", otherwise "n" + "a" reads as な."""
    out: Dict[str, Tuple[str, ...]] = {}
    for kana in _VOWEL_KANA + _Y_KANA:
        candidates = base[kana]
        out["ん" + kana] = _dedupe(
            [prefix + c for prefix in ("nn", "xn") for c in candidates]
        )
    return out


class PatternDictionary(Mapping):
    """Read-only kana -> romanization table, validated once at construction."""

    def __init__(self, patterns: Mapping[str, Iterable[str]]):
        table: Dict[str, Tuple[str, ...]] = {}
        for key, candidates in patterns.items():
            candidates = tuple(candidates)
            if not 1 <= len(key) <= MAX_KEY_LENGTH:
                raise PatternError(key, f"key length must be 1-{MAX_KEY_LENGTH}")
            if not candidates:
                raise PatternError(key, "no romanization given")
            bad = [c for c in candidates if not _ROMAJI_RE.match(c)]
            if bad:
                raise PatternError(key, f"invalid romanization {bad!r}")
            if len(set(candidates)) != len(candidates):
                raise PatternError(key, "duplicate romanization")
            table[key] = candidates
        self._table = MappingProxyType(table)
        self.max_key_length = max((len(k) for k in table), default=0)

    def __getitem__(self, key: str) -> Tuple[str, ...]:
        return self._table[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"PatternDictionary({len(self)} keys)"


def build_patterns(with_katakana: bool = True) -> PatternDictionary:
    table: Dict[str, Tuple[str, ...]] = dict(HIRAGANA_PATTERNS)
    table.update(_sokuon_patterns(HIRAGANA_PATTERNS))
    table.update(_moraic_n_patterns(HIRAGANA_PATTERNS))
    if with_katakana:
        for key, candidates in list(table.items()):
            table.setdefault(jaconv.hira2kata(key), candidates)
    return PatternDictionary(table)


@lru_cache(maxsize=1)
def default_patterns() -> PatternDictionary:
    return build_patterns()
