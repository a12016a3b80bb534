import logging
from threading import Event, Lock
from typing import List

from hostfs.core.execution.protocol import check_capacity
from hostfs.core.execution.sync import AtomicFlag
from ..domain.interfaces import IEnumerator
from ..domain.models import PathEntry, TraversalRequest

logger = logging.getLogger(__name__)

class TraversalState:
    """
    Per-execution buffer and read position.
    Invariant: 0 <= cursor <= len(buffer).
    """

    def __init__(self):
        self.buffer: List[PathEntry] = []
        self.cursor = 0
        self.materialized = AtomicFlag()
        self.ready = Event()
        self.lock = Lock()

    @property
    def total(self) -> int:
        return len(self.buffer)

    @property
    def remaining(self) -> int:
        return len(self.buffer) - self.cursor

class PaginatedCursor:
    """
    Serves one listing in bounded batches.

    The first pull runs the whole walk and buffers the result; every pull
    after that only slices the buffer. If pull is re-entered while the
    walk is running, the late callers wait for it instead of walking again.
    """

    def __init__(self, request: TraversalRequest, enumerator: IEnumerator):
        self.request = request
        self.enumerator = enumerator
        self.state = TraversalState()

    def pull(self, capacity: int) -> List[PathEntry]:
        """
        Returns up to ``capacity`` consecutive entries and advances the cursor.
        An empty list means exhausted; it stays empty on every later call.
        """
        check_capacity(capacity)

        if not self.state.materialized.test_and_set():
            try:
                self._materialize()
            finally:
                self.state.ready.set()
        else:
            self.state.ready.wait()

        with self.state.lock:
            start = self.state.cursor
            batch = self.state.buffer[start:start + capacity]
            self.state.cursor = start + len(batch)
            return batch

    @property
    def exhausted(self) -> bool:
        return self.state.ready.is_set() and self.state.remaining == 0

    def _materialize(self) -> None:
        # Assigned only on success: a failed walk exposes no partial buffer
        entries = list(self.enumerator.enumerate(self.request))
        with self.state.lock:
            self.state.buffer = entries
        logger.debug(f"Buffered {len(entries)} entries for {self.request.root}")
