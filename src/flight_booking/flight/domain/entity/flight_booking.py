from collections.abc import Callable, Iterable

from flight_booking.flight.domain.value_object import FlightId, SeatCode
from flight_booking.shared.domain import (
    BookingId,
    BusinessRuleViolationException,
    Entity,
    UserId,
)

SeatPriceResolver = Callable[[SeatCode], int]


class FlightBooking(Entity[BookingId]):
    """フライト予約

    Flight.make_booking からのみ生成される。料金は保持せず、
    呼び出しのたびにフライトの現在の料金表から算出する。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: UserId,
        flight_id: FlightId,
        seats: Iterable[SeatCode],
        seat_price: SeatPriceResolver,
    ) -> None:
        super().__init__(id)

        self._user_id = user_id
        self._flight_id: FlightId | None = flight_id
        self._seats = frozenset(seats)
        self._seat_price: SeatPriceResolver | None = seat_price

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def flight_id(self) -> FlightId | None:
        """所属フライト。キャンセル後は None"""
        return self._flight_id

    @property
    def seats(self) -> frozenset[SeatCode]:
        return self._seats

    @property
    def seat_codes(self) -> list[str]:
        """座席コード（列番号 → 座席記号の順）"""
        return [str(seat) for seat in sorted(self._seats)]

    @property
    def is_cancelled(self) -> bool:
        return self._flight_id is None

    @property
    def price(self) -> int:
        """予約座席の料金合計"""
        if self._seat_price is None:
            raise BusinessRuleViolationException(
                f"Cannot price a cancelled booking: {self.id}"
            )
        return sum(self._seat_price(seat) for seat in self._seats)

    def detach(self) -> None:
        """フライトとの関連を切る（Flight.remove_booking から呼ばれる）"""
        self._flight_id = None
        self._seat_price = None
