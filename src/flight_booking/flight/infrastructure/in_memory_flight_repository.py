import threading

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain import BookingId


class InMemoryFlightRepository(FlightRepository):
    """ID をキーにしたインメモリの FlightRepository 実装

    集約をそのまま保持する。予約 → フライトの索引は save 時に再構築する。
    """

    def __init__(self, flights: list[Flight] | None = None) -> None:
        self._lock = threading.RLock()
        self._flights: dict[FlightId, Flight] = {}
        self._flight_by_booking: dict[BookingId, FlightId] = {}
        for flight in flights or []:
            self.save(flight)

    def save(self, flight: Flight) -> None:
        with self._lock:
            self._flights[flight.id] = flight

            stale = [
                booking_id
                for booking_id, flight_id in self._flight_by_booking.items()
                if flight_id == flight.id
            ]
            for booking_id in stale:
                del self._flight_by_booking[booking_id]
            for booking in flight.bookings:
                self._flight_by_booking[booking.id] = flight.id

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        with self._lock:
            return self._flights.get(flight_id)

    def find_by_booking_id(self, booking_id: BookingId) -> Flight | None:
        with self._lock:
            flight_id = self._flight_by_booking.get(booking_id)
            if flight_id is None:
                return None
            return self._flights.get(flight_id)

    def find_all(self) -> list[Flight]:
        with self._lock:
            return list(self._flights.values())
