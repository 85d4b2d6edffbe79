from .password_hash import PasswordHash

__all__ = ["PasswordHash"]
