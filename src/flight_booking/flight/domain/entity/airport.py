import re
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from flight_booking.flight.domain.value_object import AirportId, Coordinates
from flight_booking.shared.domain import Entity

_IATA_CODE = re.compile(r"^[A-Z]{3}$")


class Airport(Entity[AirportId]):
    """空港（不変の参照データ）"""

    def __init__(
        self,
        id: AirportId,
        name: str,
        code: str,
        coordinates: Coordinates,
        time_zone: str,
    ) -> None:
        super().__init__(id)

        code = code.strip().upper()
        if not _IATA_CODE.match(code):
            raise ValueError(f"Invalid airport code: {code}")
        try:
            self._zone_info = ZoneInfo(time_zone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {time_zone}") from e

        self._name = name
        self._code = code
        self._coordinates = coordinates
        self._time_zone = time_zone

    @property
    def name(self) -> str:
        return self._name

    @property
    def code(self) -> str:
        return self._code

    @property
    def coordinates(self) -> Coordinates:
        return self._coordinates

    @property
    def time_zone(self) -> str:
        return self._time_zone

    @property
    def zone_info(self) -> ZoneInfo:
        return self._zone_info

    def matches(self, query: str) -> bool:
        """名前または空港コードに query が含まれるか（大文字小文字を区別しない）"""
        needle = query.strip().casefold()
        return needle in self._name.casefold() or needle in self._code.casefold()
