from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    """ユーザーID（全コンテキスト共通）

    予約は User をオブジェクト参照ではなく UserId で参照する。
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError(f"UserId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
