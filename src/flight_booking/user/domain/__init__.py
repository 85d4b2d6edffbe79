from .entity import User as User
from .repository import UserRepository as UserRepository
from .value_object import PasswordHash as PasswordHash
