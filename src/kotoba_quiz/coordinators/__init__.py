"""Coordinators - Orchestration layer connecting UI with the study session."""

from .advance_timer import AdvanceTimer
from .quiz_coordinator import QuizCoordinator
from .scheduler import QtScheduler, Scheduler
from .session_controller import SessionController

__all__ = [
    "AdvanceTimer",
    "QuizCoordinator",
    "QtScheduler",
    "Scheduler",
    "SessionController",
]
