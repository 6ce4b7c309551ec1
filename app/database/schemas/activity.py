"""
Activity SQLAlchemy model.

One logged day of transport, food and electricity use with its computed emissions.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Numeric, String, Uuid
from sqlalchemy.orm import relationship

from app.database import Base


class ActivityDBModel(Base):
    """Daily activity record and its emission breakdown (kg CO2)."""

    __tablename__ = "activities"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    date = Column(
        Date,
        nullable=False,
        index=True,
        comment="Date when the activity occurred",
    )

    travel_mode = Column(String(100), nullable=False)
    distance_km = Column(Numeric(10, 3), nullable=False)
    food_item = Column(String(100), nullable=False)
    electricity_kwh = Column(Numeric(10, 3), nullable=False)

    travel_emissions = Column(Numeric(12, 3), nullable=False)
    food_emissions = Column(Numeric(12, 3), nullable=False)
    electricity_emissions = Column(Numeric(12, 3), nullable=False)
    total_emissions = Column(
        Numeric(12, 3),
        nullable=False,
        comment="Sum of the rounded travel, food and electricity emissions",
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    user = relationship("UserDBModel", back_populates="activities", lazy="noload")

    __table_args__ = (
        Index("ix_activities_user_date", "user_id", "date"),
        {"comment": "Logged daily activities with computed emissions"},
    )

    def __repr__(self):
        return f"<ActivityDBModel: {self.user_id} - {self.date}>"
