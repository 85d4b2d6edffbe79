import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightName:
    """便名

    航空会社コード（2-3文字）+ ハイフン（省略可）+ 便名番号（1-4桁）の形式。
    例: NZ-103, YJY-087, NH001
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^([A-Z]{2,3})-?(\d{1,4})$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid flight name format: {self.value}. "
                "Expected format: ABC-123 (2-3 letters + 1-4 digits)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def airline_code(self) -> str:
        """航空会社コード"""
        return self.PATTERN.match(self.value).group(1)

    @property
    def flight_num(self) -> str:
        """便名番号"""
        return self.PATTERN.match(self.value).group(2)
