from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from flight_booking.flight.domain.enum import CabinClass

from .seat_code import SeatCode


@dataclass(frozen=True)
class SeatingZone:
    """座席ゾーン

    連続した列範囲（両端を含む）と座席記号の集合を客室クラスに対応付ける。
    """

    first_row: int
    last_row: int
    columns: frozenset[str]
    cabin_class: CabinClass

    def __post_init__(self) -> None:
        if self.first_row < 1 or self.last_row < self.first_row:
            raise ValueError(
                f"Invalid row range: {self.first_row}-{self.last_row}"
            )
        normalized = frozenset(c.upper() for c in self.columns)
        if not normalized:
            raise ValueError("Seating zone must have at least one column")
        if any(len(c) != 1 or not c.isalpha() for c in normalized):
            raise ValueError(f"Invalid seat columns: {sorted(normalized)}")
        object.__setattr__(self, "columns", normalized)

    @property
    def num_seats(self) -> int:
        return (self.last_row - self.first_row + 1) * len(self.columns)

    def contains(self, seat: SeatCode) -> bool:
        return (
            self.first_row <= seat.row <= self.last_row
            and seat.column in self.columns
        )

    def overlaps(self, other: SeatingZone) -> bool:
        """同じ (列, 座席記号) を含むかどうか"""
        rows_overlap = (
            self.first_row <= other.last_row and other.first_row <= self.last_row
        )
        return rows_overlap and not self.columns.isdisjoint(other.columns)

    def seat_codes(self) -> Iterator[SeatCode]:
        for row in range(self.first_row, self.last_row + 1):
            for column in sorted(self.columns):
                yield SeatCode(row=row, column=column)
