from __future__ import annotations

from pydantic import BaseModel

from flight_booking.flight.domain.entity import (
    AircraftType,
    Airport,
    Flight,
    FlightBooking,
)


class AirportData(BaseModel):
    """空港のレスポンスモデル"""

    id: int
    name: str
    code: str
    latitude: float
    longitude: float
    time_zone: str


class FlightData(BaseModel):
    """フライトのレスポンスモデル"""

    id: int
    name: str
    departure_time: str
    origin: AirportData
    arrival_time: str
    destination: AirportData
    aircraft_type: str


class BookingCreatedData(BaseModel):
    """作成された予約のレスポンスモデル"""

    id: str
    flight_id: int
    booked_seats: list[str]
    total_cost: int


class BookingData(BaseModel):
    """予約のレスポンスモデル"""

    id: str
    flight: FlightData
    booked_seats: list[str]
    total_cost: int


class SeatingZoneData(BaseModel):
    first_row: int
    last_row: int
    columns: list[str]
    cabin_class: str


class AircraftTypeData(BaseModel):
    id: int
    name: str
    total_num_seats: int
    seating_zones: list[SeatingZoneData]


class BookingInfoData(BaseModel):
    """フライトの座席予約状況のレスポンスモデル"""

    aircraft_type: AircraftTypeData
    booked_seats: list[str]
    num_seats_remaining: int
    seat_pricings: dict[str, int]


def to_airport_data(airport: Airport) -> AirportData:
    return AirportData(
        id=airport.id.value,
        name=airport.name,
        code=airport.code,
        latitude=airport.coordinates.latitude,
        longitude=airport.coordinates.longitude,
        time_zone=airport.time_zone,
    )


def to_flight_data(flight: Flight) -> FlightData:
    """Flight 集約をレスポンスモデルに変換する"""
    return FlightData(
        id=flight.id.value,
        name=str(flight.name),
        departure_time=flight.departure_time.isoformat(),
        origin=to_airport_data(flight.origin),
        arrival_time=flight.arrival_time.isoformat(),
        destination=to_airport_data(flight.destination),
        aircraft_type=flight.aircraft_type.name,
    )


def to_booking_created_data(booking: FlightBooking) -> BookingCreatedData:
    return BookingCreatedData(
        id=str(booking.id),
        flight_id=booking.flight_id.value,
        booked_seats=booking.seat_codes,
        total_cost=booking.price,
    )


def to_booking_data(flight: Flight, booking: FlightBooking) -> BookingData:
    """予約をレスポンスモデルに変換する（座席は列番号 → 座席記号の順）"""
    return BookingData(
        id=str(booking.id),
        flight=to_flight_data(flight),
        booked_seats=booking.seat_codes,
        total_cost=booking.price,
    )


def to_aircraft_type_data(aircraft_type: AircraftType) -> AircraftTypeData:
    return AircraftTypeData(
        id=aircraft_type.id.value,
        name=aircraft_type.name,
        total_num_seats=aircraft_type.total_num_seats,
        seating_zones=[
            SeatingZoneData(
                first_row=zone.first_row,
                last_row=zone.last_row,
                columns=sorted(zone.columns),
                cabin_class=zone.cabin_class.value,
            )
            for zone in aircraft_type.seating_zones
        ],
    )


def to_booking_info_data(flight: Flight) -> BookingInfoData:
    return BookingInfoData(
        aircraft_type=to_aircraft_type_data(flight.aircraft_type),
        booked_seats=[str(seat) for seat in flight.booked_seats],
        num_seats_remaining=flight.num_seats_remaining,
        seat_pricings={
            cabin_class.value: price
            for cabin_class, price in flight.seat_pricings.items()
        },
    )
