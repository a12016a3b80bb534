from typing import Optional

from hostfs.core.execution.context import ExecutionContext
from hostfs.core.execution.runner import QueryResult, QueryRunner
from ..domain.models import UNBOUNDED_DEPTH
from .table_functions import ListDirFunction, ListDirRecursiveFunction

# Singleton entry points for easy import
ls = ListDirFunction()
lsr = ListDirRecursiveFunction()

def list_directory(directory: str = ".",
                   skip_permission_denied: bool = True,
                   context: Optional[ExecutionContext] = None) -> QueryResult:
    """
    Public Service API: the direct children of ``directory``.
    """
    return QueryRunner(context).execute(ls, directory, skip_permission_denied)

def list_directory_recursive(directory: str = ".",
                             depth: int = UNBOUNDED_DEPTH,
                             skip_permission_denied: bool = True,
                             context: Optional[ExecutionContext] = None) -> QueryResult:
    """
    Public Service API: walk ``directory`` in pre-order.

    Args:
        directory: Root to list; relative paths resolve against the context.
        depth: -1 for the whole tree, 0 for the top level only, N for levels 1..N.
        skip_permission_denied: Leave unreadable directories out instead of failing.
    """
    return QueryRunner(context).execute(lsr, directory, depth, skip_permission_denied)
