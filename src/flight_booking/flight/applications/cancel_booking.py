from flight_booking.flight.domain.entity import FlightBooking
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.infrastructure import FlightLockRegistry
from flight_booking.shared.domain import BookingId, ResourceNotFoundException, UserId
from flight_booking.shared.utils import get_logger
from flight_booking.user.domain.repository import UserRepository

logger = get_logger()


class CancelBookingService:
    """予約キャンセルサービス"""

    def __init__(
        self,
        flight_repository: FlightRepository,
        user_repository: UserRepository,
        locks: FlightLockRegistry,
    ) -> None:
        self._flight_repository = flight_repository
        self._user_repository = user_repository
        self._locks = locks

    def cancel(self, user_id: UserId, booking_id: BookingId) -> FlightBooking:
        """自分の予約をキャンセルする

        他のユーザーの予約は存在しないものとして扱う。

        Raises:
            ResourceNotFoundException: 予約が存在しない、または他のユーザーの予約
        """
        flight = self._flight_repository.find_by_booking_id(booking_id)
        if flight is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")

        with self._locks.hold(flight.id):
            # ロック取得までに別リクエストでキャンセルされている場合がある
            flight = self._flight_repository.find_by_id(flight.id)
            booking = flight.get_booking(booking_id) if flight else None
            if booking is None or booking.user_id != user_id:
                raise ResourceNotFoundException(f"Booking not found: {booking_id}")

            flight.remove_booking(booking)
            self._flight_repository.save(flight)

            user = self._user_repository.find_by_id(user_id)
            if user is not None:
                user.remove_booking(booking_id)
                self._user_repository.save(user)

            for event in flight.flush_domain_events():
                logger.info(
                    "Booking cancelled",
                    extra={"event": type(event).__name__, "detail": event},
                )

        return booking
