"""Text normalization for rendered scientific names."""

from __future__ import annotations

import re
import unicodedata

from unidecode import unidecode

HYBRID_MARKER = "×"

_EPITHET_SEPARATOR_RE = re.compile(r"[\s_-]+")

_LIGATURES: dict[str, str] = {
    "æ": "ae",
    "Æ": "Ae",
    "œ": "oe",
    "Œ": "Oe",
    "ß": "ss",
    "ĳ": "ij",
    "Ĳ": "Ij",
    "ﬀ": "ff",
    "ﬁ": "fi",
    "ﬂ": "fl",
    "ﬃ": "ffi",
    "ﬄ": "ffl",
    "ﬅ": "ft",
    "ﬆ": "st",
}
_LIGATURE_RE = re.compile("|".join(map(re.escape, _LIGATURES)))


def hyphenate_epithet(epithet: str) -> str:
    """Replace runs of whitespace, underscores and hyphens inside an epithet with one hyphen."""

    return _EPITHET_SEPARATOR_RE.sub("-", epithet.strip())


def strip_hybrid_marker(value: str) -> tuple[str, bool]:
    """Strip a leading hybrid marker from a name part.

    Returns:
        `(value, is_hybrid)`.
    """

    if value.startswith(HYBRID_MARKER):
        return value[len(HYBRID_MARKER):].lstrip(), True
    return value, False


def decompose(text: str) -> str:
    """Expand ligatures and strip diacritics, e.g. `æ` -> `ae`, `é` -> `e`.

    Letters without a canonical decomposition (e.g. `ø`) are left for `ascii_fold`.
    """

    value = _LIGATURE_RE.sub(lambda m: _LIGATURES[m.group(0)], text)
    value = unicodedata.normalize("NFD", value)
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    return unicodedata.normalize("NFC", value)


def ascii_fold(text: str) -> str:
    """Transliterate non-ASCII letters to their closest ASCII form, e.g. `ø` -> `o`.

    The hybrid marker is kept as is.
    """

    return HYBRID_MARKER.join(unidecode(part) for part in text.split(HYBRID_MARKER))
