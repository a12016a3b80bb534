from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from hostfs.core.common.enums import SnapshotStatus

@dataclass(frozen=True)
class SnapshotSummary:
    """
    Report returned after a listing has been captured.
    """
    snapshot_id: UUID
    function_name: str
    status: SnapshotStatus
    row_count: int = 0
    error_message: Optional[str] = None
