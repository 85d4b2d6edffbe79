from .exceptions import (
    BookingException,
    BusinessRuleViolationException,
    DomainException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "BookingException",
]
