from collections import Counter
from collections.abc import Iterable
from datetime import datetime, timezone

from flight_booking.flight.domain.enum import CabinClass
from flight_booking.flight.domain.event import BookingCancelled, SeatsBooked
from flight_booking.flight.domain.value_object import (
    FlightId,
    FlightName,
    Seat,
    SeatCode,
    SeatPricing,
)
from flight_booking.shared.domain import (
    AggregateRoot,
    BookingException,
    BookingId,
    BusinessRuleViolationException,
)
from flight_booking.user.domain.entity import User

from .aircraft_type import AircraftType
from .airport import Airport
from .flight_booking import FlightBooking


class Flight(AggregateRoot[FlightId]):
    """フライト（予約の集約ルート）

    座席の予約状態を変更できるのはこの集約のみ。
    不変条件: 全予約の座席集合は互いに素（同じ座席を2つの予約が持たない）。

    予約操作は「検証 → 変更」の順で行うため、呼び出し元はフライト単位で
    直列化する必要がある（FlightLockRegistry を参照）。
    """

    def __init__(
        self,
        id: FlightId,
        name: FlightName,
        origin: Airport,
        destination: Airport,
        departure_time: datetime,
        arrival_time: datetime,
        aircraft_type: AircraftType,
        seat_pricings: Iterable[SeatPricing] = (),
    ) -> None:
        super().__init__(id)

        self._name = name
        self._origin = origin
        self._destination = destination
        self._departure_time = self._to_utc(departure_time)
        self._arrival_time = self._to_utc(arrival_time)
        self._aircraft_type = aircraft_type
        self._seat_pricings: dict[CabinClass, SeatPricing] = {}
        self._bookings: dict[BookingId, FlightBooking] = {}

        for pricing in seat_pricings:
            if pricing.cabin_class in self._seat_pricings:
                raise BusinessRuleViolationException(
                    f"Duplicate seat pricing for {pricing.cabin_class.value} "
                    f"on {name}"
                )
            self._seat_pricings[pricing.cabin_class] = pricing

        self._validate_schedule()

    @staticmethod
    def _to_utc(value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError(f"Flight times must be timezone-aware: {value}")
        return value.astimezone(timezone.utc)

    def _validate_schedule(self) -> None:
        """出発時刻 < 到着時刻"""
        if not self._departure_time < self._arrival_time:
            raise BusinessRuleViolationException(
                "Departure time must be before arrival time"
            )

    @property
    def name(self) -> FlightName:
        return self._name

    @property
    def origin(self) -> Airport:
        return self._origin

    @property
    def destination(self) -> Airport:
        return self._destination

    @property
    def departure_time(self) -> datetime:
        return self._departure_time

    @property
    def arrival_time(self) -> datetime:
        return self._arrival_time

    @property
    def aircraft_type(self) -> AircraftType:
        return self._aircraft_type

    @property
    def bookings(self) -> tuple[FlightBooking, ...]:
        return tuple(self._bookings.values())

    def get_booking(self, booking_id: BookingId) -> FlightBooking | None:
        return self._bookings.get(booking_id)

    @property
    def booked_seats(self) -> list[SeatCode]:
        """全予約の座席（列番号 → 座席記号の順）"""
        return sorted(
            seat for booking in self._bookings.values() for seat in booking.seats
        )

    @property
    def total_num_seats(self) -> int:
        return self._aircraft_type.total_num_seats

    @property
    def num_seats_remaining(self) -> int:
        return self.total_num_seats - len(self.booked_seats)

    @property
    def seat_pricings(self) -> dict[CabinClass, int]:
        """客室クラス → 1席あたりの料金

        料金表に無いクラスは含まない（そのクラスの座席は無いものとみなす）。
        """
        return {
            cabin_class: pricing.price
            for cabin_class, pricing in self._seat_pricings.items()
        }

    def update_seat_pricing(self, pricing: SeatPricing) -> None:
        """客室クラスの料金を設定する（既存予約の料金にも反映される）"""
        self._seat_pricings[pricing.cabin_class] = pricing

    def price_for(self, cabin_class: CabinClass) -> int:
        pricing = self._seat_pricings.get(cabin_class)
        return pricing.price if pricing else 0

    def get_seat(self, seat_code: str | SeatCode) -> Seat:
        """座席コードを座席マップで解決する

        Raises:
            BookingException: 座席コードが不正、または座席マップに存在しない
        """
        try:
            code = (
                seat_code
                if isinstance(seat_code, SeatCode)
                else SeatCode.parse(seat_code)
            )
        except ValueError as e:
            raise BookingException("Invalid seat(s)", [str(seat_code)]) from e

        cabin_class = self._aircraft_type.cabin_class_of(code)
        if cabin_class is None:
            raise BookingException("Invalid seat(s)", [str(code)])
        return Seat(
            code=code, cabin_class=cabin_class, price=self.price_for(cabin_class)
        )

    def price_for_seat(self, seat_code: str | SeatCode) -> int:
        """1席の料金。料金表に無いクラスの座席は 0"""
        return self.get_seat(seat_code).price

    def make_booking(self, user: User, seat_codes: list[str] | None) -> FlightBooking:
        """座席を予約する

        全ての検証を通過した場合のみ状態を変更する（全か無か）。

        Args:
            user: 予約するユーザー（認証済みであることは呼び出し元の責務）
            seat_codes: 予約する座席コード

        Returns:
            FlightBooking: 作成された予約

        Raises:
            BookingException: 座席が0、不正な座席、予約済みの座席、
                リクエスト内で重複した座席を含む場合
        """
        if not seat_codes:
            raise BookingException("Cannot make a booking for 0 seats")

        seats = self._resolve_seats(seat_codes)
        self._ensure_unbooked(seats)
        self._ensure_no_duplicates(seats)

        booking = FlightBooking(
            id=BookingId.generate(),
            user_id=user.id,
            flight_id=self.id,
            seats=seats,
            seat_price=self.price_for_seat,
        )
        self._bookings[booking.id] = booking
        user.add_booking(booking.id)

        self.record_event(
            SeatsBooked(
                flight_id=self.id,
                booking_id=booking.id,
                user_id=user.id,
                seat_codes=tuple(booking.seat_codes),
            )
        )
        return booking

    def _resolve_seats(self, seat_codes: list[str]) -> list[SeatCode]:
        """全ての座席コードを解析し、座席マップに存在することを確認する"""
        seats: list[SeatCode] = []
        invalid: list[str] = []

        for raw in seat_codes:
            try:
                seat = SeatCode.parse(raw)
            except ValueError:
                invalid.append(str(raw))
                continue
            if not self._aircraft_type.contains(seat):
                invalid.append(str(raw))
                continue
            seats.append(seat)

        if invalid:
            raise BookingException("Invalid seat(s)", invalid)
        return seats

    def _ensure_unbooked(self, seats: list[SeatCode]) -> None:
        booked = set(self.booked_seats)
        already_booked = sorted({seat for seat in seats if seat in booked})
        if already_booked:
            raise BookingException(
                "Seat(s) already booked", [str(seat) for seat in already_booked]
            )

    def _ensure_no_duplicates(self, seats: list[SeatCode]) -> None:
        duplicates = sorted(seat for seat, n in Counter(seats).items() if n > 1)
        if duplicates:
            raise BookingException(
                "Seat(s) already booked in this request",
                [str(seat) for seat in duplicates],
            )

    def remove_booking(self, booking: FlightBooking) -> None:
        """予約を取り消し、座席を解放する

        Raises:
            BusinessRuleViolationException: このフライトの予約ではない場合
        """
        if self._bookings.get(booking.id) is not booking:
            raise BusinessRuleViolationException(
                f"Booking {booking.id} does not belong to flight {self.id}"
            )

        del self._bookings[booking.id]
        booking.detach()

        self.record_event(
            BookingCancelled(
                flight_id=self.id,
                booking_id=booking.id,
                user_id=booking.user_id,
                released_seat_codes=tuple(booking.seat_codes),
            )
        )
