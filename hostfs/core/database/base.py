# File: hostfs/core/database/base.py

from sqlalchemy.orm import declarative_base

# The shared registry. Catalog models (snapshots, entries) inherit from this.
Base = declarative_base()
