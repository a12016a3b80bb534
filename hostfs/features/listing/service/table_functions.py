import logging
from dataclasses import replace
from typing import Any, List, Optional, Tuple

from hostfs.core.common.errors import AccessDeniedError
from hostfs.core.execution.context import ExecutionContext
from hostfs.core.execution.protocol import (
    BindResult,
    Row,
    TableFunction,
    parse_arguments,
    require_path_argument,
)
from ..data.enumerator import LocalEnumerator
from ..data.path_validator import LocalPathValidator
from ..domain.interfaces import IEnumerator, IPathValidator
from ..domain.models import LISTING_COLUMNS, UNBOUNDED_DEPTH, TraversalRequest
from .cursor import PaginatedCursor

logger = logging.getLogger(__name__)

class ListingFunction(TableFunction):
    """
    Shared Bind / Init / Produce for the listing entry points.
    Every row is (path, size, file_type, last_modified).
    """
    parameters: Tuple[Tuple[str, Any], ...] = ()
    # Used when the entry point has no depth argument
    fixed_depth: int = UNBOUNDED_DEPTH

    def __init__(self, validator: Optional[IPathValidator] = None, enumerator: Optional[IEnumerator] = None):
        self.validator = validator or LocalPathValidator()
        self.enumerator = enumerator or LocalEnumerator()

    def bind(self, context: ExecutionContext, *args, **kwargs) -> BindResult:
        values = parse_arguments(self.name, self.parameters, args, kwargs)
        directory = require_path_argument(self.name, values["directory"])

        request = TraversalRequest(
            directory=directory,
            root=context.resolve(directory),
            depth=values.get("depth", self.fixed_depth),
            skip_permission_denied=values["skip_permission_denied"]
        )
        try:
            self.validator.validate_directory(request.root)
        except AccessDeniedError as e:
            if not request.skip_permission_denied:
                raise
            logger.warning(f"Cannot access {request.root}, listing is empty: {e}")
            request = replace(request, root_readable=False)
        return BindResult(columns=LISTING_COLUMNS, data=request)

    def init(self, context: ExecutionContext, bound: BindResult) -> PaginatedCursor:
        return PaginatedCursor(bound.data, self.enumerator)

    def produce(self, bound: BindResult, state: PaginatedCursor, capacity: int) -> List[Row]:
        return [entry.as_row() for entry in state.pull(capacity)]

class ListDirFunction(ListingFunction):
    """ls([directory], [skip_permission_denied]): the root's direct children."""
    name = "ls"
    parameters = (
        ("directory", "."),
        ("skip_permission_denied", True),
    )
    fixed_depth = 0

class ListDirRecursiveFunction(ListingFunction):
    """lsr([directory], [depth], [skip_permission_denied]): -1 walks the whole tree."""
    name = "lsr"
    parameters = (
        ("directory", "."),
        ("depth", UNBOUNDED_DEPTH),
        ("skip_permission_denied", True),
    )
