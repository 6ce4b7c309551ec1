"""
RewardTransaction SQLAlchemy model.
"""
import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import relationship

from app.database import Base


class RewardTransactionDBModel(Base):
    """
    Reward points ledger entry.

    Points are positive for earned awards and negative for redemptions.
    """

    __tablename__ = "reward_transactions"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    type = Column(String(20), nullable=False, comment="earn or redeem")

    points = Column(Integer, nullable=False)

    reason = Column(String(255), nullable=False)

    cafeteria = Column(String(50), nullable=True)
    item = Column(String(100), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("UserDBModel", back_populates="transactions", lazy="noload")

    __table_args__ = ({"comment": "Reward points earned and redeemed"},)

    def __repr__(self):
        return f"<RewardTransactionDBModel: {self.type} {self.points}>"
