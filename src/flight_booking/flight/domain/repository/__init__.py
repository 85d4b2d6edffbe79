from .flight_repository import FlightRepository

__all__ = ["FlightRepository"]
