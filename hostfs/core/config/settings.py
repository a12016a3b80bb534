# File: hostfs/core/config/settings.py

import os
from pathlib import Path

from platformdirs import user_data_dir


class Settings:
    # --- Paths ---
    # Per-user data directory (e.g. ~/.local/share/hostfs), never inside the installed package
    @property
    def DATA_DIR(self) -> Path:
        return Path(os.getenv("HOSTFS_DATA_DIR") or user_data_dir("hostfs", appauthor=False))

    # --- Produce Protocol ---
    # Rows handed out per produce call (the host's vector size)
    BATCH_SIZE: int = int(os.getenv("HOSTFS_BATCH_SIZE", "2048"))

    # --- Working Directory ---
    # "session": cd only moves the execution context's directory
    # "process": cd calls os.chdir as well
    CHDIR_MODE: str = os.getenv("HOSTFS_CHDIR_MODE", "session").lower()

    # --- Catalog Database ---
    @property
    def CATALOG_URL(self) -> str:
        # Read at access time so the test suite can redirect it.
        url = os.getenv("HOSTFS_CATALOG_URL")
        if url:
            return url
        return f"sqlite:///{self.DATA_DIR / 'catalog.db'}"

    def ensure_dirs(self):
        """Creates the data directory if it doesn't exist."""
        self.DATA_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
