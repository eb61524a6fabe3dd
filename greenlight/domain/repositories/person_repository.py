from abc import ABC, abstractmethod
from typing import Optional
from ..models.person import Person


class PersonRepository(ABC):
    """Repository interface - identity lookup for permit owners"""
    
    @abstractmethod
    async def find_by_id(self, person_id: str) -> Optional[Person]:
        """Find person by ID"""
        pass
