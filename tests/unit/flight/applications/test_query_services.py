from datetime import date

import pytest

from flight_booking.flight.applications.get_bookings import BookingQueryService
from flight_booking.flight.applications.get_flight import GetFlightService
from flight_booking.flight.applications.search_flights import SearchFlightsService
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain import BookingId, ResourceNotFoundException, UserId


def _book(flight, user, flight_repository, seat_codes):
    booking = flight.make_booking(user, seat_codes)
    flight_repository.save(flight)
    return booking


class TestBookingQueryService:
    """BookingQueryService のテスト"""

    @pytest.fixture
    def service(self, flight_repository, user_repository):
        return BookingQueryService(
            flight_repository=flight_repository, user_repository=user_repository
        )

    def test_get_own_booking(self, service, flights, flight_repository, alice):
        flight = flights["DPX-900"]
        booking = _book(flight, alice, flight_repository, ["31J", "41K", "52E"])

        found_flight, found_booking = service.get(alice.id, booking.id)

        assert found_flight is flight
        assert found_booking is booking
        assert found_booking.price == 1074

    def test_other_users_booking_is_not_found(
        self, service, flights, flight_repository, alice, bob
    ):
        booking = _book(flights["DPX-900"], alice, flight_repository, ["16A"])

        with pytest.raises(ResourceNotFoundException):
            service.get(bob.id, booking.id)

    def test_unknown_booking_is_not_found(self, service, alice):
        with pytest.raises(ResourceNotFoundException):
            service.get(alice.id, BookingId(value="unknown"))

    def test_list_is_ordered_by_departure_and_own_only(
        self, service, flights, flight_repository, alice, bob
    ):
        """自分の予約のみを出発時刻の昇順で返す"""
        later = _book(flights["YJY-087"], alice, flight_repository, ["1A"])
        earlier = _book(flights["ZNJ-242"], alice, flight_repository, ["16A"])
        _book(flights["WJF-883"], bob, flight_repository, ["16A"])

        results = service.list_for_user(alice.id)

        assert [booking for _, booking in results] == [earlier, later]
        assert [str(flight.name) for flight, _ in results] == ["ZNJ-242", "YJY-087"]

    def test_list_is_empty_without_bookings(self, service, bob):
        assert service.list_for_user(bob.id) == []

    def test_list_for_unknown_user(self, service):
        with pytest.raises(ResourceNotFoundException):
            service.list_for_user(UserId(value=99))


class TestGetFlightService:
    """GetFlightService のテスト"""

    def test_get(self, flight_repository, flights):
        service = GetFlightService(flight_repository=flight_repository)
        assert service.get(FlightId(value=37)) is flights["DPX-900"]

    def test_unknown_flight(self, mock_repository):
        mock_repository.find_by_id.return_value = None
        service = GetFlightService(flight_repository=mock_repository)

        with pytest.raises(ResourceNotFoundException):
            service.get(FlightId(value=999))


class TestSearchFlightsService:
    """SearchFlightsService のテスト"""

    @pytest.fixture
    def service(self, flight_repository):
        return SearchFlightsService(flight_repository=flight_repository)

    @pytest.mark.parametrize(
        "origin, destination",
        [
            ("Auckland", "Sydney"),
            ("auckland", "SYDNEY"),
            ("AKL", "SYD"),
            ("akl", "sydney"),
        ],
    )
    def test_search_by_name_or_code(self, service, origin, destination):
        """空港名・コードの部分一致（大文字小文字を区別しない）"""
        results = service.search({"origin": origin, "destination": destination})

        assert [str(flight.name) for flight in results] == [
            "ZNJ-242",
            "WJF-883",
            "ZWZ-576",
            "YLJ-355",
        ]

    def test_partial_match(self, service):
        results = service.search({"origin": "ng", "destination": "syd"})
        assert [str(flight.name) for flight in results] == ["VBR-241"]

    def test_search_with_departure_date_and_range(self, service):
        """出発日は出発空港の現地日付で解釈し、前後 day_range 日に広げる"""
        results = service.search(
            {
                "origin": "Auckland",
                "destination": "Sydney",
                "departure_date": date(2022, 8, 21),
                "day_range": 8,
            }
        )
        assert [str(flight.name) for flight in results] == ["WJF-883", "ZWZ-576"]

    def test_departure_date_uses_origin_time_zone(self, service):
        """UTC では 8/11 13:00 だが、オークランドでは 8/12 01:00"""
        on_11th = service.search(
            {"origin": "AKL", "destination": "SYD", "departure_date": date(2022, 8, 11)}
        )
        on_12th = service.search(
            {"origin": "AKL", "destination": "SYD", "departure_date": date(2022, 8, 12)}
        )

        assert on_11th == []
        assert [str(flight.name) for flight in on_12th] == ["ZNJ-242"]

    def test_no_match(self, service):
        assert service.search({"origin": "Sydney", "destination": "Auckland"}) == []

    @pytest.mark.parametrize(
        "criteria",
        [
            {"origin": "", "destination": "Sydney"},
            {"origin": "Auckland", "destination": "  "},
            {"origin": "Auckland", "destination": "Sydney", "day_range": -1},
        ],
    )
    def test_invalid_criteria_raise_error(self, service, criteria):
        with pytest.raises(ValueError):
            service.search(criteria)
