from abc import abstractmethod

from flight_booking.shared.domain import Repository, UserId
from flight_booking.user.domain.entity import User


class UserRepository(Repository[User, UserId]):
    """ユーザーレポジトリ"""

    @abstractmethod
    def save(self, user: User) -> None:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_username(self, username: str) -> User | None:
        """ユーザー名で検索"""
        raise NotImplementedError
