"""
One-way progress stream between the update pipeline and whoever displays it.
"""
import threading
from collections import deque
from typing import Callable, Deque, Iterator, List, Optional

from .models import ProgressEvent, UpdatePhase
from ..utils.logging import get_logger

ProgressCallback = Callable[[Optional[int], str], None]
ProgressObserver = Callable[[ProgressEvent], None]

DEFAULT_BUFFER_SIZE = 256


class ProgressChannel:
    """
    Ordered, bounded stream of ProgressEvents.

    ``publish`` never blocks the producer: observers are called in order and the
    event is appended to a bounded buffer, dropping the oldest entry when full.
    """

    def __init__(self, max_buffered: int = DEFAULT_BUFFER_SIZE):
        self.logger = get_logger(__name__)
        self._observers: List[ProgressObserver] = []
        self._buffer: Deque[ProgressEvent] = deque(maxlen=max_buffered)
        self._lock = threading.Lock()
        self.dropped = 0

    def subscribe(self, observer: ProgressObserver):
        """Register an observer called for every published event."""
        self._observers.append(observer)

    def unsubscribe(self, observer: ProgressObserver):
        if observer in self._observers:
            self._observers.remove(observer)

    def publish(self, event: ProgressEvent):
        with self._lock:
            if len(self._buffer) == self._buffer.maxlen:
                self.dropped += 1
            self._buffer.append(event)

        for observer in list(self._observers):
            try:
                observer(event)
            except Exception as e:
                # A broken display must not abort the update
                self.logger.error(f"Error in progress observer: {e}", exc_info=True)

    def drain(self) -> List[ProgressEvent]:
        """Remove and return every buffered event, oldest first."""
        with self._lock:
            events = list(self._buffer)
            self._buffer.clear()
        return events

    def __iter__(self) -> Iterator[ProgressEvent]:
        return iter(self.drain())

    def as_callback(self) -> ProgressCallback:
        """Adapt the channel to the installer's ``(percent, phase)`` callback shape."""

        def callback(percent: Optional[int], phase: str):
            self.publish(ProgressEvent(phase=UpdatePhase(phase), percent=percent))

        return callback
