from pathlib import Path

from platformdirs import user_data_dir

import hostfs
from hostfs.core.config.settings import Settings


def test_data_dir_defaults_to_user_data_directory(monkeypatch):
    monkeypatch.delenv("HOSTFS_DATA_DIR", raising=False)
    data_dir = Settings().DATA_DIR

    assert data_dir == Path(user_data_dir("hostfs", appauthor=False))
    # Never inside the package tree (site-packages once installed)
    package_dir = Path(list(hostfs.__path__)[0]).resolve()
    assert package_dir not in data_dir.resolve().parents

def test_data_dir_and_catalog_url_follow_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HOSTFS_DATA_DIR", str(tmp_path / "state"))
    monkeypatch.delenv("HOSTFS_CATALOG_URL", raising=False)
    settings = Settings()

    assert settings.DATA_DIR == tmp_path / "state"
    assert settings.CATALOG_URL == f"sqlite:///{tmp_path / 'state' / 'catalog.db'}"

    settings.ensure_dirs()
    assert (tmp_path / "state").is_dir()
