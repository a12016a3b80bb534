# File: hostfs/core/execution/context.py

from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Optional, Union

from hostfs.core.common.enums import ChangeDirMode
from hostfs.core.config.settings import settings

class IWorkingDirectory(ABC):
    """
    Contract for the 'current directory' an execution resolves relative
    paths against. Replaces an implicit dependency on the process cwd.
    """

    @abstractmethod
    def get(self) -> Path:
        """Returns the current directory as an absolute path."""
        pass

    @abstractmethod
    def change(self, target: Path) -> Path:
        """
        Moves to ``target`` (absolute) and returns the canonical new directory.
        Raises OSError subclasses when the OS rejects the move.
        """
        pass

class ExecutionContext:
    """
    Explicit state passed through Bind / Init / Produce calls.
    """

    def __init__(self, working_directory: Optional[IWorkingDirectory] = None):
        self.working_directory = working_directory or default_working_directory()

    @property
    def cwd(self) -> Path:
        return self.working_directory.get()

    def resolve(self, path: Union[str, Path]) -> Path:
        """
        Anchors ``path`` at the context's directory.
        ``..`` components are kept: the OS resolves them after any symlink
        they follow.
        """
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = self.cwd / candidate
        return candidate

def default_working_directory() -> IWorkingDirectory:
    """
    Builds the adapter selected by settings.CHDIR_MODE.
    Lazy import keeps core free of a hard dependency on the feature package.
    """
    from hostfs.features.change_dir.data.working_directory import (
        ProcessWorkingDirectory,
        SessionWorkingDirectory,
    )

    if settings.CHDIR_MODE == ChangeDirMode.PROCESS:
        return ProcessWorkingDirectory()
    return SessionWorkingDirectory(Path.cwd())

_default_context: Optional[ExecutionContext] = None
_default_lock = Lock()

def get_default_context() -> ExecutionContext:
    """
    Context shared by every call that does not pass its own, so a cd
    made through the facades is seen by later listings.
    """
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = ExecutionContext()
        return _default_context

def reset_default_context() -> None:
    """Drops the shared context; the next call starts from the process cwd."""
    global _default_context
    with _default_lock:
        _default_context = None
