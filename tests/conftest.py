"""Shared fixtures: virtual-clock scheduler and small working sets."""

import os
import random
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from kotoba_quiz.coordinators import AdvanceTimer, Scheduler, SessionController
from kotoba_quiz.core import DisplayMode, StudyCard, VocabItem, WorkingSet
from kotoba_quiz.io import ScoreRepository
from kotoba_quiz.services import ProficiencyLedger, WordStore


class FakeScheduler(Scheduler):
    """Scheduler driven by a virtual clock; nothing fires until advance() is called."""

    def __init__(self):
        self.now = 0.0
        self._pending = {}
        self._next_handle = 0

    def schedule(self, delay_seconds, on_fire):
        self._next_handle += 1
        self._pending[self._next_handle] = (self.now + delay_seconds, on_fire)
        return self._next_handle

    def cancel(self, handle):
        self._pending.pop(handle, None)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due callbacks in order."""
        target = self.now + seconds
        while True:
            due = [(when, handle) for handle, (when, _) in self._pending.items() if when <= target]
            if not due:
                break
            when, handle = min(due)
            _, on_fire = self._pending.pop(handle)
            self.now = when
            on_fire()
        self.now = target


def make_card(headword: str, category_id: str = "test", translation: str | None = "tr") -> StudyCard:
    return StudyCard(
        category_id=category_id,
        item=VocabItem(headword=headword, reading=f"{headword}-kana", translation=translation),
    )


def make_working_set(headwords, mode: DisplayMode = DisplayMode.KANJI) -> WorkingSet:
    cards = tuple(make_card(h) for h in headwords)
    return WorkingSet(categories=("test",), mode=mode, pool=cards, cards=cards)


@pytest.fixture
def fake_scheduler():
    return FakeScheduler()


@pytest.fixture
def score_repository():
    repo = ScoreRepository(":memory:")
    repo.ensure_schema()
    yield repo
    repo.close()


@pytest.fixture
def ledger(score_repository):
    return ProficiencyLedger(score_repository)


@pytest.fixture
def word_store():
    return WordStore(MagicMock(), rng=random.Random(1234))


@pytest.fixture
def controller(word_store, ledger, fake_scheduler):
    return SessionController(
        word_store=word_store,
        ledger=ledger,
        advance_timer=AdvanceTimer(fake_scheduler),
    )


@pytest.fixture
def card_factory():
    return make_card


@pytest.fixture
def working_set_factory():
    return make_working_set
