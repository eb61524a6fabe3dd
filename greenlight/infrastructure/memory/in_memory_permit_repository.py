# Standard library imports
from dataclasses import replace
from datetime import datetime
from typing import Dict, Iterable, List, Optional

# Local application imports
from ...domain.models.permit import Permit
from ...domain.repositories.permit_repository import PermitRepository
from ...utils.datetime_utils import ensure_utc


class InMemoryPermitRepository(PermitRepository):
    """
    Process-local PermitRepository keyed by permit ID.

    Stores copies without the rendered image, mirroring what the Mongo
    repository persists. Contents are lost when the process exits.
    """
    
    def __init__(self, permits: Optional[Iterable[Permit]] = None) -> None:
        self._permits: Dict[str, Permit] = {}
        for permit in permits or []:
            self._permits[permit.id] = self._stored_copy(permit)
    
    @staticmethod
    def _stored_copy(permit: Permit) -> Permit:
        return replace(permit, image=b"")
    
    async def find_by_id(self, permit_id: str) -> Optional[Permit]:
        permit = self._permits.get(permit_id)
        return replace(permit) if permit else None
    
    async def find_by_person(self, person_id: str) -> List[Permit]:
        return [replace(p) for p in self._permits.values() if p.person_id == person_id]
    
    async def find_expired(self, now: datetime) -> List[Permit]:
        now = ensure_utc(now)
        return [replace(p) for p in self._permits.values() if p.is_expired(now)]
    
    async def save(self, permit: Permit) -> Permit:
        if not permit:
            raise ValueError("Permit cannot be None")
        self._permits[permit.id] = self._stored_copy(permit)
        return replace(self._permits[permit.id])
    
    async def delete(self, permit_id: str) -> bool:
        return self._permits.pop(permit_id, None) is not None
