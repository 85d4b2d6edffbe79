import threading
from collections.abc import Iterator
from contextlib import contextmanager

from flight_booking.flight.domain.value_object import FlightId


class FlightLockRegistry:
    """フライト単位のロック

    予約の「読み込み → 検証 → 変更 → 保存」を同一フライトについて直列化する。
    異なるフライトへの予約は並行に進められる。
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[FlightId, threading.Lock] = {}

    def _lock_for(self, flight_id: FlightId) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(flight_id)
            if lock is None:
                lock = self._locks[flight_id] = threading.Lock()
            return lock

    @contextmanager
    def hold(self, flight_id: FlightId) -> Iterator[None]:
        """フライトのロックを取得している間だけ処理を実行する"""
        with self._lock_for(flight_id):
            yield
