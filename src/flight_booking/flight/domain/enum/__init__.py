from .cabin_class import CabinClass

__all__ = ["CabinClass"]
