from dataclasses import dataclass

from flight_booking.flight.domain.enum import CabinClass

from .seat_code import SeatCode


@dataclass(frozen=True)
class Seat:
    """フライト上の座席（座席マップから導出される）"""

    code: SeatCode
    cabin_class: CabinClass
    price: int

    def __str__(self) -> str:
        return str(self.code)
