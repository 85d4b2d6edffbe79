from dataclasses import dataclass

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain.value_object import BookingId, UserId


@dataclass(frozen=True)
class SeatsBooked:
    """座席が予約された"""

    flight_id: FlightId
    booking_id: BookingId
    user_id: UserId
    seat_codes: tuple[str, ...]
