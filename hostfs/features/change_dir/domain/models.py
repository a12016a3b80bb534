from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from hostfs.core.common.enums import ColumnType
from hostfs.core.execution.protocol import Column

CHANGE_DIR_COLUMNS: Tuple[Column, ...] = (
    Column("current_directory", ColumnType.VARCHAR),
    Column("success", ColumnType.BOOLEAN),
)

@dataclass(frozen=True)
class ChangeDirRequest:
    """
    User intent to move the execution's working directory.
    ``target`` is ``path`` anchored at the directory current at bind time.
    """
    path: str
    target: Path

@dataclass(frozen=True)
class ChangeDirResult:
    current_directory: str
    success: bool = True

    def as_row(self) -> tuple:
        return (self.current_directory, self.success)
