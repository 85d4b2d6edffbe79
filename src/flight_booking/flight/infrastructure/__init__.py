from .flight_lock_registry import FlightLockRegistry
from .in_memory_flight_repository import InMemoryFlightRepository

__all__ = ["FlightLockRegistry", "InMemoryFlightRepository"]
