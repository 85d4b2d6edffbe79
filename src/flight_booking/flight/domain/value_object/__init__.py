from .aircraft_type_id import AircraftTypeId
from .airport_id import AirportId
from .coordinates import Coordinates
from .flight_id import FlightId
from .flight_name import FlightName
from .seat import Seat
from .seat_code import SeatCode
from .seat_pricing import SeatPricing
from .seating_zone import SeatingZone

__all__ = [
    "AircraftTypeId",
    "AirportId",
    "Coordinates",
    "FlightId",
    "FlightName",
    "Seat",
    "SeatCode",
    "SeatPricing",
    "SeatingZone",
]
