"""Constants for domain model field names"""

from .permit_fields import PermitFields
from .person_fields import PersonFields
from .media_constants import PHOTO_EXTENSIONS

__all__ = [
    "PermitFields",
    "PersonFields",
    "PHOTO_EXTENSIONS",
]
