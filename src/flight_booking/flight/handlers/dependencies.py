"""Lambda 実行環境内で共有するリポジトリとロック

コールドスタート時に一度だけ生成され、同一コンテナ内の呼び出しで再利用される。
"""

from flight_booking.flight.infrastructure import (
    FlightLockRegistry,
    InMemoryFlightRepository,
)
from flight_booking.user.infrastructure import InMemoryUserRepository

flight_repository = InMemoryFlightRepository()
user_repository = InMemoryUserRepository()
flight_locks = FlightLockRegistry()
