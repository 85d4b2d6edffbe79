from __future__ import annotations

import hashlib
import hmac
import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class PasswordHash:
    """パスワードの SHA3-256 ハッシュ（16進文字列）"""

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9a-f]{64}$")

    def __post_init__(self) -> None:
        normalized = self.value.lower()
        if not self.PATTERN.match(normalized):
            raise ValueError("Password hash must be a SHA3-256 hex digest")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, password: str) -> PasswordHash:
        """平文パスワードからハッシュを生成する"""
        return cls(value=hashlib.sha3_256(password.encode("utf-8")).hexdigest())

    def matches(self, password: str) -> bool:
        """平文パスワードがこのハッシュに一致するか（定数時間比較）"""
        return hmac.compare_digest(self.of(password).value, self.value)
