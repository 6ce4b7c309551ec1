"""
AppSetting SQLAlchemy model.

Opaque key-value slots, e.g. the persisted emission factor table.
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from app.database import Base


class AppSettingDBModel(Base):
    """Named application setting holding a serialized value."""

    __tablename__ = "app_settings"

    key = Column(
        String(100),
        primary_key=True,
        comment="Fixed setting name (e.g., 'emission_factors')",
    )

    value = Column(
        Text,
        nullable=False,
        comment="Serialized setting value (JSON)",
    )

    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    __table_args__ = ({"comment": "Key-value application settings"},)

    def __repr__(self):
        return f"<AppSettingDBModel: {self.key}>"
