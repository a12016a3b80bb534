import os
import stat
from pathlib import Path

from hostfs.core.common.errors import (
    AccessDeniedError,
    ChangeDirNotADirectoryError,
    ChangeDirNotFoundError,
    ChangeDirPermissionError,
    NotFoundError,
    PathNotADirectoryError,
)
from ..domain.interfaces import IPathValidator

class LocalPathValidator(IPathValidator):
    """
    Fail-fast checks against the local filesystem.
    Symlinks are followed: a link to a directory is a valid root.
    """

    def validate_directory(self, path: Path) -> Path:
        self._check(path, NotFoundError, PathNotADirectoryError, AccessDeniedError)
        return path

    def validate_change_target(self, path: Path) -> Path:
        """
        Same checks with the change-directory error types, plus the
        search (execute) permission a directory change needs.
        """
        self._check(path, ChangeDirNotFoundError, ChangeDirNotADirectoryError, ChangeDirPermissionError)
        if not os.access(path, os.X_OK):
            raise ChangeDirPermissionError(f"Permission denied: cannot enter {path}")
        return path

    def _check(self, path: Path, not_found, not_a_dir, denied) -> None:
        try:
            mode = os.stat(path).st_mode
        except FileNotFoundError:
            raise not_found(f"Directory not found: {path}")
        except NotADirectoryError:
            # A parent component is a regular file
            raise not_found(f"Directory not found: {path}")
        except PermissionError as e:
            raise denied(f"Permission denied: {path} ({e.strerror})")

        if not stat.S_ISDIR(mode):
            raise not_a_dir(f"Not a directory: {path}")
