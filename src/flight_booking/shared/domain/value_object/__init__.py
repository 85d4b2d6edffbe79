from .booking_id import BookingId
from .user_id import UserId

__all__ = ["BookingId", "UserId"]
