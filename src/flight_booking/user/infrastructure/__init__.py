from .in_memory_user_repository import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
