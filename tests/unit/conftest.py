from dataclasses import dataclass
from datetime import datetime
from unittest.mock import MagicMock

import pytest

from flight_booking.flight.domain.entity import AircraftType, Airport, Flight
from flight_booking.flight.domain.enum import CabinClass
from flight_booking.flight.domain.value_object import (
    AircraftTypeId,
    AirportId,
    Coordinates,
    FlightId,
    FlightName,
    SeatingZone,
    SeatPricing,
)
from flight_booking.flight.infrastructure import InMemoryFlightRepository
from flight_booking.shared.domain import UserId
from flight_booking.user.domain.entity import User
from flight_booking.user.domain.value_object import PasswordHash
from flight_booking.user.infrastructure import InMemoryUserRepository

B, P, E = CabinClass.BUSINESS, CabinClass.PREMIUM_ECONOMY, CabinClass.ECONOMY


def _zone(first_row: int, last_row: int, columns: str, cabin_class: CabinClass):
    return SeatingZone(
        first_row=first_row,
        last_row=last_row,
        columns=frozenset(columns),
        cabin_class=cabin_class,
    )


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def airports() -> dict[str, Airport]:
    """空港コード → Airport"""
    rows = [
        (1, "Auckland International Airport", "AKL", -37.008, 174.792, "Pacific/Auckland"),
        (2, "Sydney Kingsford Smith Airport", "SYD", -33.946, 151.177, "Australia/Sydney"),
        (3, "Tokyo Narita International Airport", "NRT", 35.765, 140.386, "Asia/Tokyo"),
        (4, "Singapore Changi Airport", "SIN", 1.356, 103.987, "Asia/Singapore"),
        (5, "Los Angeles International Airport", "LAX", 33.942, -118.408, "America/Los_Angeles"),
    ]
    return {
        code: Airport(
            id=AirportId(value=airport_id),
            name=name,
            code=code,
            coordinates=Coordinates(latitude=lat, longitude=lon),
            time_zone=tz,
        )
        for airport_id, name, code, lat, lon, tz in rows
    }


@pytest.fixture
def dreamliner() -> AircraftType:
    """Boeing 787-9 Dreamliner（302席）"""
    return AircraftType(
        id=AircraftTypeId(value=1),
        name="Boeing 787-9 Dreamliner",
        seating_zones=[
            _zone(1, 4, "ABJK", B),
            _zone(5, 7, "ABJK", B),
            _zone(20, 26, "ACDEFHK", P),
            _zone(37, 45, "ABCDEFHJK", E),
            _zone(46, 52, "ABCDEFHJK", E),
            _zone(53, 59, "ABCDEFHJK", E),
            _zone(60, 62, "ABCHJK", E),
        ],
    )


@pytest.fixture
def boeing_777() -> AircraftType:
    """Boeing 777-200ER（271席）"""
    return AircraftType(
        id=AircraftTypeId(value=2),
        name="Boeing 777-200ER",
        seating_zones=[
            _zone(1, 7, "ADGK", B),
            _zone(10, 12, "ACDEFGHK", P),
            _zone(16, 21, "ABCDEFGHJK", E),
            _zone(30, 35, "ABCDEFGHJK", E),
            _zone(36, 41, "ABCDEFGHJK", E),
            _zone(42, 44, "ABCHJK", E),
            _zone(50, 52, "ABCDEFG", E),
        ],
    )


@pytest.fixture
def create_flight(airports, dreamliner):
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: int = 43,
        name: str = "YJY-087",
        origin: str = "SIN",
        destination: str = "AKL",
        departure_time: str = "2022-09-01T11:00:00+00:00",
        arrival_time: str = "2022-09-01T22:00:00+00:00",
        aircraft_type: AircraftType | None = None,
        pricings: dict[CabinClass, int] | None = None,
    ) -> Flight:
        if pricings is None:
            pricings = {B: 3400, P: 1200, E: 350}
        return Flight(
            id=FlightId(value=flight_id),
            name=FlightName(value=name),
            origin=airports[origin],
            destination=airports[destination],
            departure_time=datetime.fromisoformat(departure_time),
            arrival_time=datetime.fromisoformat(arrival_time),
            aircraft_type=aircraft_type or dreamliner,
            seat_pricings=[
                SeatPricing(cabin_class=cabin_class, price=price)
                for cabin_class, price in pricings.items()
            ],
        )

    return _factory


@pytest.fixture
def flights(create_flight, boeing_777) -> dict[str, Flight]:
    """便名 → Flight"""
    fares_777 = {B: 2950, P: 980, E: 358}
    all_flights = [
        create_flight(
            1, "ZNJ-242", "AKL", "SYD",
            "2022-08-11T13:00:00+00:00", "2022-08-11T16:15:00+00:00",
            boeing_777, fares_777,
        ),
        create_flight(
            2, "WJF-883", "AKL", "SYD",
            "2022-08-23T19:00:00+00:00", "2022-08-23T22:15:00+00:00",
            boeing_777, fares_777,
        ),
        create_flight(
            3, "ZWZ-576", "AKL", "SYD",
            "2022-08-29T07:00:00+00:00", "2022-08-29T10:15:00+00:00",
            boeing_777, fares_777,
        ),
        create_flight(
            4, "YLJ-355", "AKL", "SYD",
            "2022-08-31T04:00:00+00:00", "2022-08-31T07:15:00+00:00",
        ),
        create_flight(
            37, "DPX-900", "NRT", "SIN",
            "2022-08-26T15:00:00+00:00", "2022-08-26T22:10:00+00:00",
            boeing_777, fares_777,
        ),
        create_flight(
            43, "YJY-087", "SIN", "AKL",
            "2022-09-01T11:00:00+00:00", "2022-09-01T22:00:00+00:00",
        ),
        create_flight(
            46, "VBR-241", "SIN", "SYD",
            "2022-09-03T02:00:00+00:00", "2022-09-03T09:45:00+00:00",
        ),
    ]
    return {str(flight.name): flight for flight in all_flights}


@pytest.fixture
def alice() -> User:
    return User(
        id=UserId(value=1),
        username="Alice",
        password_hash=PasswordHash.of("pa55word"),
    )


@pytest.fixture
def bob() -> User:
    return User(
        id=UserId(value=2),
        username="Bob",
        password_hash=PasswordHash.of("12345"),
    )


@pytest.fixture
def flight_repository(flights) -> InMemoryFlightRepository:
    return InMemoryFlightRepository(list(flights.values()))


@pytest.fixture
def user_repository(alice, bob) -> InMemoryUserRepository:
    return InMemoryUserRepository([alice, bob])


@dataclass
class LambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context() -> LambdaContext:
    """Logger.inject_lambda_context 用のダミーコンテキスト"""
    return LambdaContext()
