from .base import Base
from .program import CareerProgram
from .country import CountryPriorityProfile

__all__ = ["Base", "CareerProgram", "CountryPriorityProfile"]
