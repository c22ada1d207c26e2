"""WorkingSet entity - the ordered cards of one session."""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .display_mode import DisplayMode
from .vocab_item import StudyCard


@dataclass(frozen=True)
class WorkingSet:
    """Merged, filtered and arranged cards for the active session.

    Attributes:
        categories: Category ids the set was built from, in selection order.
        mode: Display mode the set was built for.
        pool: Filtered cards in source order; reshuffles rearrange this pool.
        cards: The traversal order (shuffled in practice modes).
    """

    categories: Tuple[str, ...]
    mode: DisplayMode
    pool: Tuple[StudyCard, ...]
    cards: Tuple[StudyCard, ...]

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> StudyCard:
        return self.cards[index]

    def __iter__(self) -> Iterator[StudyCard]:
        return iter(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards
