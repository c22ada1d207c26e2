"""Proficiency Ledger - per-card streak of consecutive correct answers."""

import logging
from typing import Dict

from kotoba_quiz.io import ScoreRepository

logger = logging.getLogger(__name__)


class ProficiencyLedger:
    """Application service for proficiency scores.

    Scores are loaded once from the repository and written through on every
    change.
    """

    def __init__(self, repository: ScoreRepository) -> None:
        if repository is None:
            raise ValueError("ScoreRepository must not be None")
        self._repository = repository
        self._scores: Dict[str, int] = dict(repository.load_scores())

    def score_of(self, item_id: str) -> int:
        return self._scores.get(item_id, 0)

    def record_feedback(self, item_id: str, correct: bool) -> int:
        """Apply one judgement and persist it.

        A correct answer extends the streak by one; an incorrect answer resets it.

        Returns:
            The new score.

        Raises:
            RuntimeError: If the score cannot be saved; the score is left unchanged.
        """
        new_score = self.score_of(item_id) + 1 if correct else 0
        self._repository.save_score(item_id, new_score)
        self._scores[item_id] = new_score
        logger.debug("Score for %s is now %d", item_id, new_score)
        return new_score

    def snapshot(self) -> Dict[str, int]:
        return dict(self._scores)
