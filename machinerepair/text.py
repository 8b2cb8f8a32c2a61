"""Text helpers."""

from __future__ import annotations

_TRANSLIT = str.maketrans(
    {
        "й": "j", "ц": "c", "у": "u", "к": "k", "е": "e", "н": "n",
        "г": "g", "ш": "sh", "щ": "shch", "з": "z", "ъ": "ie", "ф": "f",
        "ы": "y", "в": "v", "а": "a", "п": "p", "р": "r", "о": "o",
        "л": "l", "д": "d", "ж": "zh", "э": "e", "я": "ya", "ч": "ch",
        "с": "s", "м": "m", "и": "i", "т": "t", "ь": "io", "б": "b",
        "ю": "yu", "ё": "yo", "х": "h",
    }
)


def translit(text: str) -> str:
    """Replace lower-case Cyrillic letters in ``text`` with Latin spellings."""
    return text.translate(_TRANSLIT)