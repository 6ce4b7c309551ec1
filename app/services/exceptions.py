"""
Service-layer exceptions.
"""
from uuid import UUID


class RewardsError(Exception):
    """Base class for activity and reward service errors."""


class UserNotFoundError(RewardsError):
    """Raised when the referenced user does not exist."""

    def __init__(self, user_id: UUID):
        self.user_id = user_id
        super().__init__(f"User {user_id} not found")


class UnknownCafeteriaItemError(RewardsError):
    """Raised when redeeming at a cafeteria missing from the catalog."""

    def __init__(self, cafeteria: str):
        self.cafeteria = cafeteria
        super().__init__(f"Unknown cafeteria {cafeteria!r}")


class InsufficientPointsError(RewardsError):
    """Raised when a user cannot afford a redemption."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"You need {required} points but only have {available}"
        )
