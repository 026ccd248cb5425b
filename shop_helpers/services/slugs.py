"""URL slugs for shops and products.

The slug style depends on the shop language: latin-script languages keep
their letters (accents folded to ASCII), other scripts are transliterated.
Resolve a ``Slugifier`` once from the shop language and pass it to callers.
"""

import logging
import unicodedata
from typing import Optional, Protocol

from slugify import slugify as transliterate_slugify


logger = logging.getLogger(__name__)

# ISO 639-1 codes of languages written in a latin-based script, per
# http://w3c.github.io/typography/gap-analysis/language-matrix.html
LATIN_LANGS = (
    "az", "da", "de", "en", "es", "ff", "fr", "ha", "hr", "hu", "ig", "is", "it", "jv", "ku",
    "ms", "nl", "no", "om", "pl", "pt", "ro", "sv", "sw", "tl", "tr", "uz", "vi", "yo",
)

LATIN_REPLACEMENTS = [["&", " and "]]


def _is_latin(char: str) -> bool:
    return unicodedata.name(char, "").startswith("LATIN")


class Slugifier(Protocol):
    name: str

    def slugify(self, text: str) -> str:
        ...


class LatinSlugifier:
    """Slugs for latin-script text.

    Latin letters are folded to ASCII (ł -> l, ß -> ss, æ -> ae); letters
    from other scripts are dropped rather than transliterated.
    """

    name = "latin"

    def slugify(self, text: str) -> str:
        latin_only = "".join(char for char in text if not char.isalpha() or _is_latin(char))
        return transliterate_slugify(latin_only, replacements=LATIN_REPLACEMENTS)


class TransliteratingSlugifier:
    """Slugs for any script, transliterated to ASCII first."""

    name = "transliteration"

    def slugify(self, text: str) -> str:
        return transliterate_slugify(text)


def resolve_slugifier(language: Optional[str]) -> Slugifier:
    if language in LATIN_LANGS:
        return LatinSlugifier()
    logger.info(f"Using transliterating slugs for shop language {language!r}")
    return TransliteratingSlugifier()


def get_slug(text: Optional[str], slugifier: Slugifier) -> str:
    """Lowercase and slugify ``text``; empty input gives an empty slug."""
    if not text:
        return ""
    return slugifier.slugify(text.lower())
