from collections.abc import Iterable
from itertools import combinations

from flight_booking.flight.domain.enum import CabinClass
from flight_booking.flight.domain.value_object import (
    AircraftTypeId,
    SeatCode,
    SeatingZone,
)
from flight_booking.shared.domain import BusinessRuleViolationException, Entity


class AircraftType(Entity[AircraftTypeId]):
    """機材タイプ（座席マップ）

    座席ゾーンの順序付き集合。どの2つのゾーンも同じ座席を含まない。
    """

    def __init__(
        self,
        id: AircraftTypeId,
        name: str,
        seating_zones: Iterable[SeatingZone],
    ) -> None:
        super().__init__(id)

        self._name = name
        self._seating_zones = tuple(seating_zones)

        self._validate_zones()

    def _validate_zones(self) -> None:
        """ゾーン同士が座席を共有しないこと"""
        for a, b in combinations(self._seating_zones, 2):
            if a.overlaps(b):
                raise BusinessRuleViolationException(
                    f"Seating zones overlap on {self._name}: "
                    f"rows {a.first_row}-{a.last_row} and {b.first_row}-{b.last_row}"
                )

    @property
    def name(self) -> str:
        return self._name

    @property
    def seating_zones(self) -> tuple[SeatingZone, ...]:
        return self._seating_zones

    @property
    def total_num_seats(self) -> int:
        return sum(zone.num_seats for zone in self._seating_zones)

    def find_zone(self, seat: SeatCode) -> SeatingZone | None:
        return next(
            (zone for zone in self._seating_zones if zone.contains(seat)), None
        )

    def contains(self, seat: SeatCode) -> bool:
        return self.find_zone(seat) is not None

    def cabin_class_of(self, seat: SeatCode) -> CabinClass | None:
        """座席の客室クラス。座席マップに無い座席は None"""
        zone = self.find_zone(seat)
        return zone.cabin_class if zone else None

