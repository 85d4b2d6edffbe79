from flight_booking.shared.domain import UserId
from flight_booking.user.domain.entity import User
from flight_booking.user.domain.repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """ID をキーにしたインメモリの UserRepository 実装"""

    def __init__(self, users: list[User] | None = None) -> None:
        self._users: dict[UserId, User] = {}
        for user in users or []:
            self.save(user)

    def save(self, user: User) -> None:
        self._users[user.id] = user

    def find_by_id(self, user_id: UserId) -> User | None:
        return self._users.get(user_id)

    def find_by_username(self, username: str) -> User | None:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )
