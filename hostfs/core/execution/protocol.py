# File: hostfs/core/execution/protocol.py

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Tuple

from hostfs.core.common.enums import ColumnType
from hostfs.core.common.errors import ValidationError
from .context import ExecutionContext

Row = Tuple[Any, ...]

@dataclass(frozen=True)
class Column:
    name: str
    type: ColumnType

@dataclass(frozen=True)
class BindResult:
    """
    Output of the Bind step: the declared output shape plus the
    immutable, validated arguments.
    """
    columns: Tuple[Column, ...]
    data: Any

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

class TableFunction(ABC):
    """
    Contract for an operation driven by the Bind / Init / Produce protocol.

    The caller binds once, creates one state per execution, then calls
    ``produce`` until it returns an empty batch.
    """
    name: str = ""

    @abstractmethod
    def bind(self, context: ExecutionContext, *args, **kwargs) -> BindResult:
        """
        Validates arguments and declares the output columns.
        Raises ValidationError (or a path error) before any side effect.
        """
        pass

    @abstractmethod
    def init(self, context: ExecutionContext, bound: BindResult) -> Any:
        """Creates a fresh per-execution state. Never shared."""
        pass

    @abstractmethod
    def produce(self, bound: BindResult, state: Any, capacity: int) -> List[Row]:
        """
        Returns up to ``capacity`` rows. An empty list means end of data.
        """
        pass

def check_capacity(capacity: int) -> None:
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise ValidationError(f"Capacity must be a positive integer, got {capacity!r}")

def parse_arguments(function_name: str, parameters: Tuple[Tuple[str, Any], ...], args: tuple, kwargs: dict) -> dict:
    """
    Maps positional and keyword arguments onto ``parameters``
    (``(name, default)`` pairs, in positional order).
    """
    names = [name for name, _ in parameters]
    if len(args) > len(names):
        raise ValidationError(
            f"{function_name}() takes at most {len(names)} argument(s), got {len(args)}"
        )

    values = dict(parameters)
    for name, value in zip(names, args):
        values[name] = value

    for name, value in kwargs.items():
        if name not in values:
            raise ValidationError(f"{function_name}() got an unexpected argument '{name}'")
        if name in names[:len(args)]:
            raise ValidationError(f"{function_name}() got multiple values for argument '{name}'")
        values[name] = value
    return values

def require_path_argument(function_name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{function_name}() expects a non-empty path string, got {value!r}")
    return value
