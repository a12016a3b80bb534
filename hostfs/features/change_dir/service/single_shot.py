from typing import Callable, Generic, List, TypeVar

from hostfs.core.execution.sync import AtomicFlag

T = TypeVar("T")

class SingleShotExecutor(Generic[T]):
    """
    Runs a side-effecting action at most once per execution.

    The flag is set before the action runs, so a failing action raises
    once and every later call (look-ahead probe, retry) gets zero rows
    instead of repeating the effect.
    """

    def __init__(self, action: Callable[[], T]):
        self._action = action
        self.executed = AtomicFlag()

    def run(self) -> List[T]:
        if self.executed.test_and_set():
            return []
        return [self._action()]
