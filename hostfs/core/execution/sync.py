# File: hostfs/core/execution/sync.py

from threading import Lock


class AtomicFlag:
    """
    One-way boolean with test-and-set semantics.
    Guards transitions that must happen once per execution even when the
    produce step is invoked again (look-ahead or retry).
    """

    def __init__(self):
        self._lock = Lock()
        self._is_set = False

    def test_and_set(self) -> bool:
        """Sets the flag and returns its previous value."""
        with self._lock:
            was_set = self._is_set
            self._is_set = True
            return was_set

    @property
    def is_set(self) -> bool:
        return self._is_set
