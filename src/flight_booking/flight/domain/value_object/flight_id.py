from dataclasses import dataclass


@dataclass(frozen=True)
class FlightId:
    """フライトID"""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError(f"FlightId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
