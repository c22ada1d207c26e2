"""Word Store - builds the working set for a session."""

import logging
import random
from typing import Iterable, List, Mapping, Optional, Sequence

from kotoba_quiz.core import DisplayMode, StudyCard, WorkingSet
from kotoba_quiz.io import CategorySource

logger = logging.getLogger(__name__)


class WordStore:
    """Turns a category selection into a WorkingSet.

    Pipeline: fetch every category, concatenate in selection order, drop
    untranslated items for translation-led modes, then shuffle (practice
    modes) or keep source order (dictionary).
    """

    def __init__(self, source: CategorySource, rng: Optional[random.Random] = None):
        self._source = source
        self._rng = rng or random.Random()

    def build(
        self,
        categories: Iterable[str],
        mode: DisplayMode,
        sample_sizes: Optional[Mapping[str, int]] = None,
    ) -> WorkingSet:
        """Build a fresh working set.

        Args:
            categories: Selected category ids; duplicates are ignored.
            mode: Display mode of the session.
            sample_sizes: Optional per-category cap; larger categories
                contribute a random sample of that many items.

        Returns:
            WorkingSet, possibly empty after filtering.

        Raises:
            DataUnavailable: If any category cannot be fetched or parsed.
        """
        category_ids = tuple(dict.fromkeys(categories))

        pool: List[StudyCard] = []
        for category_id in category_ids:
            items = self._source.fetch_category(category_id)
            sample_size = (sample_sizes or {}).get(category_id)
            if sample_size and len(items) > sample_size:
                picked = sorted(self._rng.sample(range(len(items)), sample_size))
                items = [items[i] for i in picked]
                logger.debug("Sampled %d of the items in %s", sample_size, category_id)
            for item in items:
                pool.append(StudyCard(category_id=category_id, item=item))

        if mode.requires_translation:
            before = len(pool)
            pool = [card for card in pool if card.item.has_translation]
            logger.debug("Dropped %d untranslated items", before - len(pool))

        pool_tuple = tuple(pool)
        working_set = WorkingSet(
            categories=category_ids,
            mode=mode,
            pool=pool_tuple,
            cards=self._arrange(pool_tuple, mode),
        )
        logger.info(
            "Built working set of %d cards from %s (%s)",
            len(working_set), ", ".join(category_ids), mode.value,
        )
        return working_set

    def reshuffle(self, working_set: WorkingSet) -> WorkingSet:
        """Return a new working set with a fresh arrangement of the same pool.

        Nothing is fetched again: the filtered (and sampled) pool of the
        original build is reused, so this never raises DataUnavailable.
        """
        return WorkingSet(
            categories=working_set.categories,
            mode=working_set.mode,
            pool=working_set.pool,
            cards=self._arrange(working_set.pool, working_set.mode),
        )

    def _arrange(self, pool: Sequence[StudyCard], mode: DisplayMode) -> tuple:
        if not mode.is_practice:
            return tuple(pool)
        return tuple(fisher_yates(pool, self._rng))


def fisher_yates(items: Sequence, rng: random.Random) -> list:
    """Return a uniformly shuffled copy of items."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result
