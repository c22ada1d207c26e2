"""Display modes offered on the setup screen."""

from enum import Enum


class DisplayMode(Enum):
    """How a card is presented.

    KANJI, CHINESE and LISTENING are practice modes (shuffled, scored);
    DICTIONARY is free browsing in source order.
    """

    KANJI = "kanji"
    CHINESE = "chinese"
    LISTENING = "listening"
    DICTIONARY = "dictionary"

    @property
    def is_practice(self) -> bool:
        return self is not DisplayMode.DICTIONARY

    @property
    def requires_translation(self) -> bool:
        """Translation-led mode cannot show items without a translation."""
        return self is DisplayMode.CHINESE

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    DisplayMode.DICTIONARY: "Dictionary",
    DisplayMode.KANJI: "Read the word, say it in Japanese",
    DisplayMode.CHINESE: "Read the translation, say it in Japanese",
    DisplayMode.LISTENING: "Listening quiz",
}
