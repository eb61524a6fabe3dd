from .permit_repository import PermitRepository
from .person_repository import PersonRepository
from .person_photo_provider import PersonPhotoProvider

__all__ = ["PermitRepository", "PersonRepository", "PersonPhotoProvider"]
