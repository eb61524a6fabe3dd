from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, List
from ..models.permit import Permit


class PermitRepository(ABC):
    """Repository interface - defines contract for permit data access"""
    
    @abstractmethod
    async def find_by_id(self, permit_id: str) -> Optional[Permit]:
        """Find permit by ID"""
        pass
    
    @abstractmethod
    async def find_by_person(self, person_id: str) -> List[Permit]:
        """Find all permits issued to a person"""
        pass
    
    @abstractmethod
    async def find_expired(self, now: datetime) -> List[Permit]:
        """Find all permits whose valid_until lies before now"""
        pass
    
    @abstractmethod
    async def save(self, permit: Permit) -> Permit:
        """Save permit (create or update)"""
        pass
    
    @abstractmethod
    async def delete(self, permit_id: str) -> bool:
        """Delete permit by ID, returning whether it existed"""
        pass
