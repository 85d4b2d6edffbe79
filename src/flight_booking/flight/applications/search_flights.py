from datetime import date, datetime, time, timedelta
from typing import NotRequired, TypedDict

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.repository import FlightRepository


class FlightSearchCriteria(TypedDict):
    """フライト検索条件"""

    origin: str
    destination: str
    departure_date: NotRequired[date | None]
    day_range: NotRequired[int]


class SearchFlightsService:
    """フライト検索サービス

    - 出発地・到着地は空港名または空港コードの部分一致（大文字小文字を区別しない）
    - 出発日は出発空港のタイムゾーンで解釈し、前後 day_range 日に広げる
    - 結果は出発時刻の昇順
    """

    def __init__(self, flight_repository: FlightRepository) -> None:
        self._flight_repository = flight_repository

    def search(self, criteria: FlightSearchCriteria) -> list[Flight]:
        origin = (criteria.get("origin") or "").strip()
        destination = (criteria.get("destination") or "").strip()
        if not origin or not destination:
            raise ValueError("Both origin and destination are required")

        departure_date = criteria.get("departure_date")
        day_range = criteria.get("day_range", 0)
        if day_range < 0:
            raise ValueError(f"Day range cannot be negative: {day_range}")

        flights = [
            flight
            for flight in self._flight_repository.find_all()
            if flight.origin.matches(origin)
            and flight.destination.matches(destination)
            and (
                departure_date is None
                or self._departs_within(flight, departure_date, day_range)
            )
        ]
        return sorted(flights, key=lambda flight: flight.departure_time)

    @staticmethod
    def _departs_within(flight: Flight, departure_date: date, day_range: int) -> bool:
        """出発空港の現地日付で departure_date ± day_range 日に出発するか"""
        zone = flight.origin.zone_info
        start = datetime.combine(departure_date, time.min, tzinfo=zone)
        end = datetime.combine(departure_date, time.max, tzinfo=zone)
        margin = timedelta(days=day_range)
        return start - margin <= flight.departure_time <= end + margin
