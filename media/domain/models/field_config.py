from __future__ import annotations
from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database.base import Base


class FieldConfig(Base):
    __tablename__ = "field_configs"
    __table_args__ = (
        UniqueConstraint("target_entity_type", "target_bundle", "field_name", name="uq_field_configs_field"),
    )

    # "<entity_type>.<bundle>.<field_name>"
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    target_entity_type: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    target_bundle: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    field_name: Mapped[str] = mapped_column(String(64), nullable=False)
    field_type: Mapped[str] = mapped_column(String(64), nullable=False)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    required: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    settings: Mapped[dict] = mapped_column(JSON, default=dict, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
