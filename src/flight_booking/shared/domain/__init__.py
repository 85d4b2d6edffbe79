from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BookingException as BookingException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .value_object import (
    BookingId as BookingId,
)
from .value_object import (
    UserId as UserId,
)
