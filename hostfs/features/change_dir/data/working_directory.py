import logging
import os
from pathlib import Path

from hostfs.core.execution.context import IWorkingDirectory

logger = logging.getLogger(__name__)

class SessionWorkingDirectory(IWorkingDirectory):
    """
    Working directory held by the execution context.
    Changing it never touches the process cwd.
    """

    def __init__(self, start: Path):
        self._current = Path(os.path.realpath(start))

    def get(self) -> Path:
        return self._current

    def change(self, target: Path) -> Path:
        canonical = Path(os.path.realpath(target))
        if not canonical.exists():
            raise FileNotFoundError(f"No such directory: {target}")
        if not canonical.is_dir():
            raise NotADirectoryError(f"Not a directory: {target}")
        if not os.access(canonical, os.X_OK):
            raise PermissionError(f"Permission denied: {target}")
        self._current = canonical
        return canonical

class ProcessWorkingDirectory(IWorkingDirectory):
    """
    Legacy adapter: the process-wide cwd via os.getcwd / os.chdir.
    """

    def get(self) -> Path:
        return Path(os.getcwd())

    def change(self, target: Path) -> Path:
        os.chdir(target)
        current = Path(os.getcwd())
        logger.debug(f"Process cwd is now {current}")
        return current
