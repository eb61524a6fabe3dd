from .permit import Permit
from .person import Person

__all__ = ["Permit", "Person"]
