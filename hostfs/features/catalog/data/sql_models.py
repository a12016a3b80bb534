import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    BigInteger, Column, DateTime, Enum as SQLEnum, ForeignKey, Integer, JSON, String, Uuid
)
from sqlalchemy.orm import relationship
from hostfs.core.database.base import Base
from hostfs.core.common.enums import EntryType, SnapshotStatus

def utc_now():
    return datetime.now(timezone.utc)

class ListingSnapshotModel(Base):
    __tablename__ = "listing_snapshots"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    function_name = Column(String, nullable=False)
    arguments = Column(JSON, default=dict)
    status = Column(SQLEnum(SnapshotStatus), default=SnapshotStatus.PENDING, nullable=False)
    row_count = Column(Integer, default=0, nullable=False)
    error_message = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utc_now)
    started_at = Column(DateTime(timezone=True), nullable=True)
    finished_at = Column(DateTime(timezone=True), nullable=True)

    entries = relationship(
        "ListingEntryModel",
        back_populates="snapshot",
        cascade="all, delete-orphan",
        order_by="ListingEntryModel.position"
    )

class ListingEntryModel(Base):
    __tablename__ = "listing_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    snapshot_id = Column(Uuid(as_uuid=True), ForeignKey("listing_snapshots.id"), nullable=False, index=True)
    # Order in which the walk produced the entry
    position = Column(Integer, nullable=False)

    path = Column(String, nullable=False)
    size = Column(BigInteger, nullable=True)
    file_type = Column(SQLEnum(EntryType), nullable=True)
    last_modified = Column(DateTime(timezone=True), nullable=True)

    snapshot = relationship("ListingSnapshotModel", back_populates="entries")
