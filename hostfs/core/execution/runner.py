# File: hostfs/core/execution/runner.py

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from hostfs.core.config.settings import settings
from .context import ExecutionContext, get_default_context
from .protocol import Column, Row, TableFunction, check_capacity

logger = logging.getLogger(__name__)

@dataclass
class QueryResult:
    """
    Every row produced by one execution, in production order.
    """
    columns: Tuple[Column, ...]
    rows: List[Row] = field(default_factory=list)

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    def as_dicts(self) -> List[dict]:
        names = self.column_names
        return [dict(zip(names, row)) for row in self.rows]

class QueryRunner:
    """
    Drives a TableFunction through Bind -> Init -> Produce* the way a host
    engine does: produce is called until it reports zero rows.
    """

    def __init__(self, context: Optional[ExecutionContext] = None, batch_size: Optional[int] = None):
        self.context = context or get_default_context()
        self.batch_size = batch_size if batch_size is not None else settings.BATCH_SIZE
        check_capacity(self.batch_size)

    def stream(self, function: TableFunction, *args, **kwargs) -> Iterator[List[Row]]:
        """
        Yields non-empty batches. Bind errors are raised before the first
        batch; produce errors terminate the stream.
        """
        bound = function.bind(self.context, *args, **kwargs)
        return self._produce_all(function, bound)

    def execute(self, function: TableFunction, *args, **kwargs) -> QueryResult:
        bound = function.bind(self.context, *args, **kwargs)
        result = QueryResult(columns=bound.columns)
        for batch in self._produce_all(function, bound):
            result.rows.extend(batch)
        return result

    def _produce_all(self, function: TableFunction, bound) -> Iterator[List[Row]]:
        state = function.init(self.context, bound)
        batches = 0
        while True:
            batch = function.produce(bound, state, self.batch_size)
            if not batch:
                break
            batches += 1
            yield batch
        logger.debug(f"{function.name}: execution finished after {batches} batch(es)")
