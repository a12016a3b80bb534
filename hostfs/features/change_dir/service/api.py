from typing import Optional

from hostfs.core.execution.context import ExecutionContext, get_default_context
from hostfs.core.execution.runner import QueryResult, QueryRunner
from .table_function import ChangeDirFunction

cd = ChangeDirFunction()

def change_directory(path: str, context: Optional[ExecutionContext] = None) -> QueryResult:
    """
    Public Service API: move the working directory to ``path``.
    Without ``context`` the shared default context is moved, so later
    calls that also omit it see the new directory.
    Returns a single (current_directory, success) row.
    """
    return QueryRunner(context).execute(cd, path)

def print_working_directory(context: Optional[ExecutionContext] = None) -> str:
    return str((context or get_default_context()).cwd)
