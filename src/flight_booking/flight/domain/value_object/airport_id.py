from dataclasses import dataclass


@dataclass(frozen=True)
class AirportId:
    """空港ID"""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError(f"AirportId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
