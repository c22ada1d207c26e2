"""Vocabulary entities - a single word list entry and its session card."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class VocabItem:
    """Represents one word list entry.

    Attributes:
        headword: Target-language term as written (kanji/kana).
        reading: Phonetic reading (kana).
        romanization: Optional romaji transcription.
        translation: Optional translation (Chinese in the bundled word lists).
        example_target: Optional example sentence, may contain line breaks.
        example_translation: Optional translation of the example sentence.
    """

    headword: str
    reading: str
    romanization: Optional[str] = None
    translation: Optional[str] = None
    example_target: Optional[str] = None
    example_translation: Optional[str] = None

    @property
    def has_translation(self) -> bool:
        return bool(self.translation)


@dataclass(frozen=True)
class StudyCard:
    """A vocabulary item together with the category it was loaded from."""

    category_id: str
    item: VocabItem

    @property
    def identity(self) -> str:
        """Key used for proficiency tracking.

        Headwords are assumed unique within a category; duplicates share a score.
        """
        return f"{self.category_id}-{self.item.headword}"
