# File: hostfs/core/common/errors.py

"""
Typed failures raised by the listing and change-directory operations.

Each class also derives from the matching builtin so callers can catch
either ``NotFoundError`` or plain ``FileNotFoundError``.
"""


class HostFsError(Exception):
    """Base class for every hostfs failure."""


class ValidationError(HostFsError, ValueError):
    """Missing, surplus or malformed argument."""


class NotFoundError(HostFsError, FileNotFoundError):
    """Path does not exist."""


class PathNotADirectoryError(HostFsError, NotADirectoryError):
    """Path exists but is not a directory."""


class AccessDeniedError(HostFsError, PermissionError):
    """Permission denied while the skip policy is disabled."""


class TraversalIOError(HostFsError, OSError):
    """Any other OS failure. The message of the cause is preserved."""


class ChangeDirNotFoundError(NotFoundError):
    pass


class ChangeDirNotADirectoryError(PathNotADirectoryError):
    pass


class ChangeDirPermissionError(AccessDeniedError):
    pass
