from abc import ABC, abstractmethod
from typing import Optional
from ..models.person import Person


class PersonPhotoProvider(ABC):
    """Interface for looking up the photo of a person"""
    
    @abstractmethod
    async def get_photo_data(self, person: Person) -> Optional[bytes]:
        """Raw JPEG/PNG bytes of the person's photo, or None if there is none"""
        pass
