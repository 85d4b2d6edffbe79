from collections.abc import Iterable


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class BookingException(BusinessRuleViolationException):
    """座席予約リクエストが検証に失敗した場合

    集約の状態は変更されていないため、呼び出し元で回復可能。
    """

    def __init__(self, message: str, seat_codes: Iterable[str] = ()) -> None:
        self.seat_codes: tuple[str, ...] = tuple(seat_codes)
        if self.seat_codes:
            message = f"{message}: {', '.join(self.seat_codes)}"
        super().__init__(message)
