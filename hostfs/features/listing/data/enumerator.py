import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional

from hostfs.core.common.errors import (
    AccessDeniedError,
    NotFoundError,
    PathNotADirectoryError,
    TraversalIOError,
)
from ..domain.interfaces import IEnumerator, IMetadataProbe
from ..domain.models import PathEntry, TraversalRequest
from .metadata_probe import LocalMetadataProbe

logger = logging.getLogger(__name__)

class LocalEnumerator(IEnumerator):
    """
    Pre-order walk built on os.scandir.

    Each directory is read in one go (so no descriptor stays open while
    its children are walked) and visited with an explicit stack, so deep
    trees don't hit the recursion limit. Symlinked directories are
    reported but never descended.
    """

    def __init__(self, probe: Optional[IMetadataProbe] = None):
        self.probe = probe or LocalMetadataProbe()

    def enumerate(self, request: TraversalRequest) -> Iterator[PathEntry]:
        logger.info(
            f"Walking {request.root} (depth={request.depth}, "
            f"skip_permission_denied={request.skip_permission_denied})"
        )
        stack = [(request.directory, iter(self._open_root(request)), 1)]
        emitted = 0

        while stack:
            parent, entries, level = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            path = os.path.join(parent, entry.name)
            children = None
            if _is_real_dir(entry) and request.descends_from(level):
                # Open before emitting: an unreadable directory is dropped with its subtree
                children = self._open_subdir(entry, request)
                if children is None:
                    continue

            try:
                metadata = self.probe.probe(Path(entry.path))
            except OSError as e:
                if self._recover(e, entry.path, request):
                    continue
                raise

            yield PathEntry.from_metadata(path, metadata)
            emitted += 1

            if children is not None:
                stack.append((path, iter(children), level + 1))

        logger.info(f"Walk of {request.root} finished: {emitted} entries")

    def _open_root(self, request: TraversalRequest) -> List[os.DirEntry]:
        if not request.root_readable:
            return []
        try:
            return _scan(request.root)
        except FileNotFoundError:
            raise NotFoundError(f"Directory not found: {request.root}")
        except NotADirectoryError:
            raise PathNotADirectoryError(f"Not a directory: {request.root}")
        except OSError as e:
            if self._recover(e, str(request.root), request):
                logger.warning(f"Cannot read {request.root}, listing is empty: {e}")
                return []
            raise

    def _open_subdir(self, entry: os.DirEntry, request: TraversalRequest) -> Optional[List[os.DirEntry]]:
        """
        Returns the children of ``entry`` or None when the directory must be left out.
        A directory that vanished is still reported, with no children.
        """
        try:
            return _scan(entry.path)
        except (FileNotFoundError, NotADirectoryError):
            logger.debug(f"Vanished during walk, not descending: {entry.path}")
            return []
        except OSError as e:
            if self._recover(e, entry.path, request):
                return None
            raise

    def _recover(self, error: OSError, path: str, request: TraversalRequest) -> bool:
        """
        Applies the error policy. Returns True when the entry should be
        skipped; raises the typed error otherwise.
        """
        if isinstance(error, PermissionError):
            if request.skip_permission_denied:
                logger.debug(f"Permission denied, skipping: {path}")
                return True
            raise AccessDeniedError(f"Permission denied: {path}") from error
        raise TraversalIOError(f"Failed to read {path}: {error}") from error

def _scan(directory) -> List[os.DirEntry]:
    with os.scandir(directory) as entries:
        return list(entries)

def _is_real_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False
