from .aircraft_type import AircraftType
from .airport import Airport
from .flight import Flight
from .flight_booking import FlightBooking

__all__ = ["AircraftType", "Airport", "Flight", "FlightBooking"]
