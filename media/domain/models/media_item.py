from __future__ import annotations
from datetime import datetime
from uuid import uuid4, UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base

LABEL_MAX_LENGTH = 255


class MediaItem(Base):
    __tablename__ = "media_items"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    # bundle is the media type id
    bundle: Mapped[str] = mapped_column(String(32), ForeignKey("media_types.id", ondelete="RESTRICT"), nullable=False, index=True)
    label: Mapped[str] = mapped_column(String(LABEL_MAX_LENGTH), nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    source_value: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
