from abc import abstractmethod

from flight_booking.flight.domain.entity import Flight
from flight_booking.flight.domain.value_object import FlightId
from flight_booking.shared.domain import BookingId, Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトレポジトリ

    予約は Flight 集約の一部として読み書きされる。
    """

    @abstractmethod
    def save(self, flight: Flight) -> None:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: BookingId) -> Flight | None:
        """予約IDから所属フライトを検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Flight]:
        """全フライト"""
        raise NotImplementedError
