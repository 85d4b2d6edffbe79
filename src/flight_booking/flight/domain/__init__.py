from .entity import AircraftType as AircraftType
from .entity import Airport as Airport
from .entity import Flight as Flight
from .entity import FlightBooking as FlightBooking
from .enum import CabinClass as CabinClass
from .event import BookingCancelled as BookingCancelled
from .event import SeatsBooked as SeatsBooked
from .repository import FlightRepository as FlightRepository
from .value_object import AircraftTypeId as AircraftTypeId
from .value_object import AirportId as AirportId
from .value_object import Coordinates as Coordinates
from .value_object import FlightId as FlightId
from .value_object import FlightName as FlightName
from .value_object import Seat as Seat
from .value_object import SeatCode as SeatCode
from .value_object import SeatingZone as SeatingZone
from .value_object import SeatPricing as SeatPricing
