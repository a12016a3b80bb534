import logging
from typing import List, Optional

from hostfs.core.common.errors import (
    ChangeDirNotADirectoryError,
    ChangeDirNotFoundError,
    ChangeDirPermissionError,
    TraversalIOError,
    ValidationError,
)
from hostfs.core.execution.context import ExecutionContext
from hostfs.core.execution.protocol import (
    BindResult,
    Row,
    TableFunction,
    check_capacity,
    require_path_argument,
)
from hostfs.features.listing.data.path_validator import LocalPathValidator
from ..domain.models import CHANGE_DIR_COLUMNS, ChangeDirRequest, ChangeDirResult
from .single_shot import SingleShotExecutor

logger = logging.getLogger(__name__)

class ChangeDirFunction(TableFunction):
    """
    cd(path): moves the execution's working directory and emits one row
    (current_directory, success).
    """
    name = "cd"

    def __init__(self, validator: Optional[LocalPathValidator] = None):
        self.validator = validator or LocalPathValidator()

    def bind(self, context: ExecutionContext, *args, **kwargs) -> BindResult:
        if kwargs:
            raise ValidationError(f"cd() takes no keyword arguments, got {sorted(kwargs)}")
        if len(args) != 1:
            raise ValidationError(f"cd() requires exactly one argument, got {len(args)}")
        path = require_path_argument(self.name, args[0])

        request = ChangeDirRequest(path=path, target=context.resolve(path))
        return BindResult(columns=CHANGE_DIR_COLUMNS, data=request)

    def init(self, context: ExecutionContext, bound: BindResult) -> SingleShotExecutor:
        request: ChangeDirRequest = bound.data
        return SingleShotExecutor(lambda: self._change(context, request))

    def produce(self, bound: BindResult, state: SingleShotExecutor, capacity: int) -> List[Row]:
        check_capacity(capacity)
        return [result.as_row() for result in state.run()]

    def _change(self, context: ExecutionContext, request: ChangeDirRequest) -> ChangeDirResult:
        # Validate before mutating anything
        self.validator.validate_change_target(request.target)

        try:
            current = context.working_directory.change(request.target)
        except FileNotFoundError as e:
            raise ChangeDirNotFoundError(f"Directory not found: {request.target}") from e
        except NotADirectoryError as e:
            raise ChangeDirNotADirectoryError(f"Not a directory: {request.target}") from e
        except PermissionError as e:
            raise ChangeDirPermissionError(f"Permission denied: {request.target}") from e
        except OSError as e:
            raise TraversalIOError(f"Failed to change directory to {request.target}: {e}") from e

        logger.info(f"Working directory changed to {current}")
        return ChangeDirResult(current_directory=str(current), success=True)
