from dataclasses import dataclass

from flight_booking.flight.domain.enum import CabinClass


@dataclass(frozen=True)
class SeatPricing:
    """客室クラスごとの1席あたりの料金（最小通貨単位の整数）"""

    cabin_class: CabinClass
    price: int

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError("Price cannot be negative")
