from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from hostfs.core.execution.protocol import Row
from hostfs.features.listing.domain.models import PathEntry
from .models import SnapshotSummary

class ICatalogRepository(ABC):
    """
    Contract for persisting listing snapshots so they can be queried later.
    """

    @abstractmethod
    def create_snapshot(self, function_name: str, arguments: Dict[str, Any]) -> UUID:
        """Creates a snapshot record in PENDING state."""
        pass

    @abstractmethod
    def mark_processing(self, snapshot_id: UUID) -> None:
        pass

    @abstractmethod
    def append_rows(self, snapshot_id: UUID, start_position: int, rows: List[Row]) -> int:
        """
        Stores one produced batch of listing rows. Positions continue from ``start_position``.
        Returns the number of rows written.
        """
        pass

    @abstractmethod
    def complete_snapshot(self, snapshot_id: UUID, row_count: int) -> None:
        pass

    @abstractmethod
    def fail_snapshot(self, snapshot_id: UUID, error_message: str) -> None:
        pass

    @abstractmethod
    def get_snapshot(self, snapshot_id: UUID) -> Optional[SnapshotSummary]:
        pass

    @abstractmethod
    def get_entries(self, snapshot_id: UUID) -> List[PathEntry]:
        """Returns the stored entries in production order."""
        pass
