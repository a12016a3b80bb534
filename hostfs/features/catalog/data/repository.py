from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import UUID

from hostfs.core.common.enums import EntryType, SnapshotStatus
from hostfs.core.database.connection import SessionLocal
from hostfs.core.execution.protocol import Row
from hostfs.features.listing.domain.models import PathEntry
from .sql_models import ListingEntryModel, ListingSnapshotModel
from ..domain.interfaces import ICatalogRepository
from ..domain.models import SnapshotSummary

class SqlCatalogRepository(ICatalogRepository):

    def create_snapshot(self, function_name: str, arguments: Dict[str, Any]) -> UUID:
        with SessionLocal() as db:
            snapshot = ListingSnapshotModel(function_name=function_name, arguments=arguments)
            db.add(snapshot)
            db.commit()
            db.refresh(snapshot)
            return snapshot.id

    def mark_processing(self, snapshot_id: UUID) -> None:
        with SessionLocal() as db:
            snapshot = self._require(db, snapshot_id)
            snapshot.status = SnapshotStatus.PROCESSING
            snapshot.started_at = datetime.now(timezone.utc)
            db.commit()

    def append_rows(self, snapshot_id: UUID, start_position: int, rows: List[Row]) -> int:
        with SessionLocal() as db:
            try:
                for offset, (path, size, file_type, last_modified) in enumerate(rows):
                    db.add(ListingEntryModel(
                        snapshot_id=snapshot_id,
                        position=start_position + offset,
                        path=path,
                        size=size,
                        file_type=EntryType(file_type) if file_type is not None else None,
                        last_modified=last_modified
                    ))
                db.commit()
            except Exception:
                db.rollback()
                raise
            return len(rows)

    def complete_snapshot(self, snapshot_id: UUID, row_count: int) -> None:
        with SessionLocal() as db:
            snapshot = self._require(db, snapshot_id)
            snapshot.status = SnapshotStatus.COMPLETED
            snapshot.row_count = row_count
            snapshot.finished_at = datetime.now(timezone.utc)
            db.commit()

    def fail_snapshot(self, snapshot_id: UUID, error_message: str) -> None:
        with SessionLocal() as db:
            snapshot = self._require(db, snapshot_id)
            snapshot.status = SnapshotStatus.FAILED
            snapshot.error_message = error_message
            snapshot.finished_at = datetime.now(timezone.utc)
            db.commit()

    def get_snapshot(self, snapshot_id: UUID) -> Optional[SnapshotSummary]:
        with SessionLocal() as db:
            snapshot = db.get(ListingSnapshotModel, snapshot_id)
            if not snapshot:
                return None
            return SnapshotSummary(
                snapshot_id=snapshot.id,
                function_name=snapshot.function_name,
                status=snapshot.status,
                row_count=snapshot.row_count,
                error_message=snapshot.error_message
            )

    def get_entries(self, snapshot_id: UUID) -> List[PathEntry]:
        with SessionLocal() as db:
            models = (
                db.query(ListingEntryModel)
                .filter(ListingEntryModel.snapshot_id == snapshot_id)
                .order_by(ListingEntryModel.position)
                .all()
            )
            return [
                PathEntry(
                    path=m.path,
                    entry_type=m.file_type,
                    size=m.size,
                    last_modified=m.last_modified
                )
                for m in models
            ]

    def _require(self, db, snapshot_id: UUID) -> ListingSnapshotModel:
        snapshot = db.get(ListingSnapshotModel, snapshot_id)
        if not snapshot:
            raise ValueError(f"Snapshot {snapshot_id} not found.")
        return snapshot
