from .positions import Position
from .staff import Staff

__all__ = ["Position", "Staff"]
