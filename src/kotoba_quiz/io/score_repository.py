"""SQLite-backed proficiency score persistence."""

import logging
import sqlite3
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)


class ScoreRepository:
    """Owns the SQLite connection holding one score per card identity.

    Follows the failing-fast philosophy: write failures raise RuntimeError.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        if str(db_path) != ":memory:":
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.connection = sqlite3.connect(str(db_path))
        self.connection.row_factory = sqlite3.Row

    def ensure_schema(self) -> None:
        """Create the scores table if it does not exist."""
        cur = self.connection.cursor()
        cur.execute(
            """
            CREATE TABLE IF NOT EXISTS proficiency_scores (
                item_id TEXT PRIMARY KEY,
                score INTEGER NOT NULL DEFAULT 0 CHECK (score >= 0),
                updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
            );
            """
        )
        self.connection.commit()

    def load_scores(self) -> Dict[str, int]:
        """Return every stored score keyed by card identity.

        Raises:
            RuntimeError: If the query fails.
        """
        try:
            cur = self.connection.cursor()
            cur.execute("SELECT item_id, score FROM proficiency_scores")
            return {row["item_id"]: row["score"] for row in cur.fetchall()}
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to load scores: {e}") from e

    def save_score(self, item_id: str, score: int) -> None:
        """Insert or update a single score.

        Raises:
            RuntimeError: If the database write fails.
        """
        try:
            self.connection.execute(
                """
                INSERT INTO proficiency_scores (item_id, score)
                VALUES (?, ?)
                ON CONFLICT(item_id) DO UPDATE SET
                    score = excluded.score,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (item_id, score),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to save score for {item_id}: {e}") from e

    def save_scores(self, scores: Dict[str, int]) -> None:
        """Replace the stored scores with the given mapping.

        Raises:
            RuntimeError: If the database write fails.
        """
        try:
            with self.connection:
                self.connection.execute("DELETE FROM proficiency_scores")
                self.connection.executemany(
                    "INSERT INTO proficiency_scores (item_id, score) VALUES (?, ?)",
                    list(scores.items()),
                )
        except sqlite3.Error as e:
            raise RuntimeError(f"Failed to save scores: {e}") from e
        logger.debug("Saved %d scores", len(scores))

    def close(self) -> None:
        self.connection.close()
