import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from hostfs.core.common.enums import EntryType
from ..domain.interfaces import IMetadataProbe
from ..domain.models import PathMetadata

class LocalMetadataProbe(IMetadataProbe):
    """
    lstat-based probe. Symlinks are reported as links and never followed,
    so their size is 0. Timestamps are UTC at whole-second granularity.
    """

    def probe(self, path: Path) -> PathMetadata:
        try:
            st = os.lstat(path)
        except (FileNotFoundError, NotADirectoryError):
            # Gone since it was listed
            return PathMetadata.unresolved()
        return self.from_stat(st)

    @staticmethod
    def from_stat(st: os.stat_result) -> PathMetadata:
        entry_type = classify(st.st_mode)
        size = st.st_size if entry_type == EntryType.FILE else 0
        last_modified = datetime.fromtimestamp(int(st.st_mtime), tz=timezone.utc)
        return PathMetadata(entry_type=entry_type, size=size, last_modified=last_modified)

def classify(mode: int) -> EntryType:
    """
    First match wins: regular file, directory, symlink, other.
    """
    if stat.S_ISREG(mode):
        return EntryType.FILE
    if stat.S_ISDIR(mode):
        return EntryType.DIRECTORY
    if stat.S_ISLNK(mode):
        return EntryType.SYMLINK
    return EntryType.OTHER
