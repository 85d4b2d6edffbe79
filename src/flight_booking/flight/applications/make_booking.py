from flight_booking.flight.domain.entity import FlightBooking
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.flight.infrastructure import FlightLockRegistry
from flight_booking.shared.domain import ResourceNotFoundException, UserId
from flight_booking.shared.utils import get_logger
from flight_booking.user.domain.repository import UserRepository

logger = get_logger()


class MakeBookingService:
    """座席予約サービス

    フライト単位のロック内で集約を読み込み、予約し、保存する。
    """

    def __init__(
        self,
        flight_repository: FlightRepository,
        user_repository: UserRepository,
        locks: FlightLockRegistry,
    ) -> None:
        self._flight_repository = flight_repository
        self._user_repository = user_repository
        self._locks = locks

    def make(
        self, user_id: UserId, flight_id: FlightId, seat_codes: list[str]
    ) -> FlightBooking:
        """座席を予約する

        Raises:
            ResourceNotFoundException: フライトまたはユーザーが存在しない
            BookingException: 予約リクエストが検証に失敗した
        """
        with self._locks.hold(flight_id):
            flight = self._flight_repository.find_by_id(flight_id)
            if flight is None:
                raise ResourceNotFoundException(f"Flight not found: {flight_id}")

            user = self._user_repository.find_by_id(user_id)
            if user is None:
                raise ResourceNotFoundException(f"User not found: {user_id}")

            booking = flight.make_booking(user, seat_codes)

            self._flight_repository.save(flight)
            self._user_repository.save(user)

            for event in flight.flush_domain_events():
                logger.info(
                    "Seats booked",
                    extra={"event": type(event).__name__, "detail": event},
                )

        return booking
