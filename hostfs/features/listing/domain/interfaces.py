from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator

from .models import PathEntry, PathMetadata, TraversalRequest

class IPathValidator(ABC):
    """
    Contract for gating an operation on its target path.
    Runs before any traversal I/O or OS mutation.
    """
    @abstractmethod
    def validate_directory(self, path: Path) -> Path:
        """
        Returns ``path`` when it exists and is a directory.
        Raises NotFoundError or PathNotADirectoryError otherwise.
        """
        pass

class IMetadataProbe(ABC):
    """
    Contract for resolving per-path attributes.
    """
    @abstractmethod
    def probe(self, path: Path) -> PathMetadata:
        """
        Classifies ``path`` and reads its size and mtime.
        Degrades to unresolved metadata if the path is gone.
        """
        pass

class IEnumerator(ABC):
    """
    Contract for walking a directory tree.
    """
    @abstractmethod
    def enumerate(self, request: TraversalRequest) -> Iterator[PathEntry]:
        """
        Yields entries in pre-order, in the order the OS lists them.
        The root itself is never yielded.
        """
        pass
