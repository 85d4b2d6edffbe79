from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class SeatCode:
    """座席コード

    列番号 + 座席記号（1文字）の形式。
    例: 1A, 12K, 59A

    並び順は列番号 → 座席記号。
    """

    row: int
    column: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^(\d{1,4})([A-Z])$")

    def __post_init__(self) -> None:
        if self.row < 1:
            raise ValueError(f"Invalid seat row: {self.row}")
        if len(self.column) != 1 or not self.column.isalpha():
            raise ValueError(f"Invalid seat column: {self.column}")
        object.__setattr__(self, "column", self.column.upper())

    def __str__(self) -> str:
        return f"{self.row}{self.column}"

    @classmethod
    def parse(cls, code: str) -> SeatCode:
        """文字列から SeatCode を生成する（"012a" -> 12A）"""
        if not isinstance(code, str):
            raise ValueError(f"Invalid seat code: {code!r}")

        match = cls.PATTERN.match(code.strip().upper())
        if match is None:
            raise ValueError(
                f"Invalid seat code format: {code}. "
                "Expected format: 12A (row number + column letter)"
            )
        return cls(row=int(match.group(1)), column=match.group(2))
