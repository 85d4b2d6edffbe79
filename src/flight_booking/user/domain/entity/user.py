import uuid

from flight_booking.shared.domain import AggregateRoot, BookingId, UserId
from flight_booking.user.domain.value_object import PasswordHash


class User(AggregateRoot[UserId]):
    """ユーザー

    予約は所有せず BookingId で参照する。予約の生成は Flight 集約の責務。
    """

    def __init__(
        self,
        id: UserId,
        username: str,
        password_hash: PasswordHash,
        auth_token: str | None = None,
        booking_ids: frozenset[BookingId] = frozenset(),
    ) -> None:
        super().__init__(id)

        if not username or not username.strip():
            raise ValueError("Username cannot be empty")

        self._username = username
        self._password_hash = password_hash
        self._auth_token = auth_token
        self._booking_ids: set[BookingId] = set(booking_ids)

    @property
    def username(self) -> str:
        return self._username

    @property
    def password_hash(self) -> PasswordHash:
        return self._password_hash

    @property
    def auth_token(self) -> str | None:
        return self._auth_token

    @property
    def booking_ids(self) -> frozenset[BookingId]:
        return frozenset(self._booking_ids)

    def owns(self, booking_id: BookingId) -> bool:
        return booking_id in self._booking_ids

    def add_booking(self, booking_id: BookingId) -> None:
        self._booking_ids.add(booking_id)

    def remove_booking(self, booking_id: BookingId) -> None:
        self._booking_ids.discard(booking_id)

    def matches_password(self, password: str) -> bool:
        return self._password_hash.matches(password)

    def rotate_auth_token(self) -> str:
        """ログインごとに新しいトークンを発行し、以前のものを無効化する"""
        self._auth_token = str(uuid.uuid4())
        return self._auth_token
