from flight_booking.flight.domain.entity import Flight, FlightBooking
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.shared.domain import BookingId, ResourceNotFoundException, UserId
from flight_booking.user.domain.repository import UserRepository


class BookingQueryService:
    """予約照会サービス（自分の予約のみ参照できる）"""

    def __init__(
        self, flight_repository: FlightRepository, user_repository: UserRepository
    ) -> None:
        self._flight_repository = flight_repository
        self._user_repository = user_repository

    def get(
        self, user_id: UserId, booking_id: BookingId
    ) -> tuple[Flight, FlightBooking]:
        """予約とそのフライトを取得する"""
        flight = self._flight_repository.find_by_booking_id(booking_id)
        booking = flight.get_booking(booking_id) if flight else None
        if booking is None or booking.user_id != user_id:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        return flight, booking

    def list_for_user(self, user_id: UserId) -> list[tuple[Flight, FlightBooking]]:
        """ユーザーの全予約（出発時刻の昇順）"""
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise ResourceNotFoundException(f"User not found: {user_id}")

        results: list[tuple[Flight, FlightBooking]] = []
        for booking_id in user.booking_ids:
            flight = self._flight_repository.find_by_booking_id(booking_id)
            booking = flight.get_booking(booking_id) if flight else None
            if booking is not None:
                results.append((flight, booking))

        return sorted(results, key=lambda pair: pair[0].departure_time)
