"""Supported vocabularies for era-aware rendering.

Each language owns an era suffix for negative years, an ordinal rule,
and the noun fragments used at decade, century and millennium precision.
The two-letter code is the only external serialization of a language.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Vocabulary(BaseModel):
    """Fixed string fragments for one language."""

    model_config = {"frozen": True}

    era_suffix: str
    decade: str
    century: str
    millennium: str


class Language(StrEnum):
    """Rendering language, valued by its two-letter code."""

    ENGLISH = "en"
    GERMAN = "de"

    @classmethod
    def from_code(cls, code: str) -> Language:
        """Resolve a language code, falling back to English.

        The code is trimmed and lowercased first. Empty or unrecognized
        codes resolve to :attr:`ENGLISH`; this never raises.
        """
        normalized = code.strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            if normalized:
                logger.debug("Unknown language code %r, using English", code)
            return cls.ENGLISH

    def to_code(self) -> str:
        return self.value

    @property
    def vocabulary(self) -> Vocabulary:
        return VOCABULARIES[self]

    def era_suffix(self, year: int) -> str:
        """Return the BCE marker for negative years, otherwise ``""``."""
        if year >= 0:
            return ""
        return self.vocabulary.era_suffix

    def ordinal_extension(self, magnitude: int) -> str:
        """Return the suffix that makes *magnitude* an ordinal.

        English looks only at the last digit, so 11, 12 and 13 become
        "11st", "12nd" and "13rd". German ordinals take a trailing period.
        """
        if self is Language.GERMAN:
            return "."
        return _ENGLISH_ORDINALS.get(abs(magnitude) % 10, "th")

    def decade_fragment(self) -> str:
        return self.vocabulary.decade

    def century_fragment(self) -> str:
        return self.vocabulary.century

    def millennium_fragment(self) -> str:
        return self.vocabulary.millennium


_ENGLISH_ORDINALS: dict[int, str] = {1: "st", 2: "nd", 3: "rd"}

VOCABULARIES: dict[Language, Vocabulary] = {
    Language.ENGLISH: Vocabulary(
        era_suffix=" BCE",
        decade="s",
        century="century",
        millennium="millennium",
    ),
    Language.GERMAN: Vocabulary(
        era_suffix=" v.Chr.",
        decade="er",
        century="Jahrhundert",
        millennium="Jahrtausend",
    ),
}
