from dataclasses import dataclass

from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain.value_object import BookingId, UserId


@dataclass(frozen=True)
class BookingCancelled:
    """予約がキャンセルされ、座席が解放された"""

    flight_id: FlightId
    booking_id: BookingId
    user_id: UserId
    released_seat_codes: tuple[str, ...]
