"""
User SQLAlchemy model.
"""
import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Uuid
from sqlalchemy.orm import relationship

from app.database import Base
from app.utils.constants import UserRole


class UserDBModel(Base):
    """
    Campus member tracking their footprint.

    Holds the cumulative totals that activity logging and redemptions mutate.
    """

    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    full_name = Column(String(200), nullable=False)

    college_id = Column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
        comment="College / staff identifier",
    )

    email = Column(String(255), nullable=True)

    phone = Column(String(30), nullable=False)

    role = Column(
        String(20),
        nullable=False,
        default=UserRole.STUDENT.value,
        comment="student or staff",
    )

    reward_points = Column(
        Integer,
        nullable=False,
        default=0,
        comment="Current redeemable reward points balance",
    )

    total_emissions = Column(
        Numeric(12, 3),
        nullable=False,
        default=Decimal("0"),
        comment="Cumulative logged emissions (kg CO2)",
    )

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    activities = relationship("ActivityDBModel", back_populates="user", lazy="noload")
    transactions = relationship(
        "RewardTransactionDBModel", back_populates="user", lazy="noload"
    )

    __table_args__ = ({"comment": "Campus users with reward and emission totals"},)

    def __repr__(self):
        return f"<UserDBModel: {self.college_id} - {self.full_name}>"
