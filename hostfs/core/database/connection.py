# File: hostfs/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from hostfs.core.config.settings import settings

CATALOG_URL = settings.CATALOG_URL

# check_same_thread=False is needed only for SQLite
connect_args = {"check_same_thread": False} if CATALOG_URL.startswith("sqlite") else {}

# Default catalog lives under DATA_DIR
if CATALOG_URL == f"sqlite:///{settings.DATA_DIR / 'catalog.db'}":
    settings.ensure_dirs()

engine = create_engine(
    CATALOG_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """Dependency for obtaining a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
