from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain import ResourceNotFoundException


class GetFlightService:
    """フライト取得サービス（座席予約状況の表示用）"""

    def __init__(self, flight_repository: FlightRepository) -> None:
        self._flight_repository = flight_repository

    def get(self, flight_id: FlightId) -> Flight:
        flight = self._flight_repository.find_by_id(flight_id)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {flight_id}")
        return flight
