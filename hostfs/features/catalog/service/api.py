import logging
from typing import List, Optional
from uuid import UUID

from hostfs.core.common.errors import ValidationError
from hostfs.core.execution.context import ExecutionContext
from hostfs.core.execution.protocol import TableFunction
from hostfs.core.execution.runner import QueryRunner
from hostfs.features.listing.domain.models import PathEntry
from hostfs.features.listing.service.table_functions import ListingFunction
from ..data.repository import SqlCatalogRepository
from ..domain.interfaces import ICatalogRepository
from ..domain.models import SnapshotSummary

logger = logging.getLogger(__name__)

class CatalogService:
    """
    Facade for the Catalog Feature.
    Drains a listing through the produce protocol and stores every batch
    so the result can be queried with SQL afterwards.
    """

    def __init__(self, repo: Optional[ICatalogRepository] = None):
        self.repo = repo or SqlCatalogRepository()

    def capture(self, function: TableFunction, *args,
                context: Optional[ExecutionContext] = None,
                batch_size: Optional[int] = None,
                **kwargs) -> SnapshotSummary:
        """
        Runs ``function`` (ls or lsr) and persists its rows.

        Bind errors are raised before any snapshot exists. A failure while
        producing marks the snapshot FAILED and is re-raised.

        Returns:
            Summary of the stored snapshot.
        """
        if not isinstance(function, ListingFunction):
            raise ValidationError(f"Only listing functions can be captured, got '{function.name}'")

        # 1. Bind (raises before anything is persisted)
        batches = QueryRunner(context, batch_size).stream(function, *args, **kwargs)

        # 2. Register the snapshot
        snapshot_id = self.repo.create_snapshot(
            function.name, {"args": list(args), "kwargs": dict(kwargs)}
        )
        self.repo.mark_processing(snapshot_id)
        logger.info(f"Capturing {function.name} into snapshot {snapshot_id}")

        # 3. Persist batch by batch
        row_count = 0
        try:
            for batch in batches:
                row_count += self.repo.append_rows(snapshot_id, row_count, batch)
        except Exception as e:
            logger.exception(f"Snapshot {snapshot_id} failed: {e}")
            self.repo.fail_snapshot(snapshot_id, str(e))
            raise

        self.repo.complete_snapshot(snapshot_id, row_count)
        logger.info(f"Snapshot {snapshot_id} completed with {row_count} entries")
        return self.repo.get_snapshot(snapshot_id)

    def entries(self, snapshot_id: UUID) -> List[PathEntry]:
        return self.repo.get_entries(snapshot_id)

# Singleton Instance for easy import
catalog = CatalogService()
