# File: hostfs/core/common/enums.py

from enum import Enum, unique

@unique
class EntryType(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

@unique
class ColumnType(str, Enum):
    VARCHAR = "VARCHAR"
    BIGINT = "BIGINT"
    BOOLEAN = "BOOLEAN"
    TIMESTAMP = "TIMESTAMP"

@unique
class ChangeDirMode(str, Enum):
    SESSION = "session"
    PROCESS = "process"

@unique
class SnapshotStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
