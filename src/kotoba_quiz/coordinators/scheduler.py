"""Cancellable one-shot callbacks on the Qt event loop."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class Scheduler(ABC):
    """Primitive for delayed callbacks: schedule one, cancel it by handle."""

    @abstractmethod
    def schedule(self, delay_seconds: float, on_fire: Callable[[], None]) -> object:
        """Run on_fire once after delay_seconds and return a handle for cancel()."""

    @abstractmethod
    def cancel(self, handle: object) -> None:
        """Prevent a scheduled callback from running. Unknown handles are ignored."""


class QtScheduler(Scheduler):
    """Scheduler backed by single-shot QTimers."""

    def __init__(self, parent: Optional[QObject] = None):
        self._parent = parent

    def schedule(self, delay_seconds: float, on_fire: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(int(delay_seconds * 1000))

        def fire():
            timer.deleteLater()
            on_fire()

        timer.timeout.connect(fire)
        timer.start()
        return timer

    def cancel(self, handle: object) -> None:
        if isinstance(handle, QTimer):
            handle.stop()
            handle.deleteLater()
