from .booking_cancelled import BookingCancelled
from .seats_booked import SeatsBooked

__all__ = ["BookingCancelled", "SeatsBooked"]
