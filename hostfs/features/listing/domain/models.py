from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from hostfs.core.common.enums import ColumnType, EntryType
from hostfs.core.common.errors import ValidationError
from hostfs.core.execution.protocol import Column

UNBOUNDED_DEPTH = -1

LISTING_COLUMNS: Tuple[Column, ...] = (
    Column("path", ColumnType.VARCHAR),
    Column("size", ColumnType.BIGINT),
    Column("file_type", ColumnType.VARCHAR),
    Column("last_modified", ColumnType.TIMESTAMP),
)

@dataclass(frozen=True)
class TraversalRequest:
    """
    Validated arguments of one listing.

    ``directory`` is the root exactly as the caller spelled it (used to
    build output paths); ``root`` is the same location made absolute
    against the execution's working directory (used for I/O).
    """
    directory: str
    root: Path
    depth: int = UNBOUNDED_DEPTH
    skip_permission_denied: bool = True
    # False when bind could not access the root and the skip policy let it through
    root_readable: bool = True

    def __post_init__(self):
        if not isinstance(self.directory, str) or not self.directory:
            raise ValidationError(f"Directory must be a non-empty string, got {self.directory!r}")
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise ValidationError(f"Depth must be an integer, got {self.depth!r}")
        if self.depth < UNBOUNDED_DEPTH:
            raise ValidationError(f"Depth must be -1 (unbounded) or >= 0, got {self.depth}")
        if not isinstance(self.skip_permission_denied, bool):
            raise ValidationError(
                f"skip_permission_denied must be a boolean, got {self.skip_permission_denied!r}"
            )
        if not self.root_readable and not self.skip_permission_denied:
            raise ValidationError("An unreadable root is only accepted when permission errors are skipped")

    @property
    def max_level(self) -> Optional[int]:
        """
        Deepest level emitted; the root's direct children are level 1.
        None means unbounded. Depth 0 and 1 both stop at the top level.
        """
        if self.depth == UNBOUNDED_DEPTH:
            return None
        return max(self.depth, 1)

    def admits(self, level: int) -> bool:
        return self.max_level is None or level <= self.max_level

    def descends_from(self, level: int) -> bool:
        """True when children of a directory at ``level`` are still in bound."""
        return self.admits(level + 1)

@dataclass(frozen=True)
class PathMetadata:
    """
    Attributes resolved by the probe. All None when the path vanished.
    """
    entry_type: Optional[EntryType]
    size: Optional[int]
    last_modified: Optional[datetime]

    @classmethod
    def unresolved(cls) -> "PathMetadata":
        return cls(entry_type=None, size=None, last_modified=None)

    @property
    def is_resolved(self) -> bool:
        return self.entry_type is not None

@dataclass(frozen=True)
class PathEntry:
    """
    One listing row. Read-only once produced.
    """
    path: str
    entry_type: Optional[EntryType]
    size: Optional[int] = None
    last_modified: Optional[datetime] = None

    @classmethod
    def from_metadata(cls, path: str, metadata: PathMetadata) -> "PathEntry":
        return cls(
            path=path,
            entry_type=metadata.entry_type,
            size=metadata.size,
            last_modified=metadata.last_modified
        )

    def as_row(self) -> tuple:
        file_type = self.entry_type.value if self.entry_type is not None else None
        return (self.path, self.size, file_type, self.last_modified)
