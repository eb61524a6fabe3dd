# Standard library imports
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.permit_repository import PermitRepository
from ....domain.repositories.person_repository import PersonRepository
from .permit_access import get_owned_permit

logger = logging.getLogger(__name__)


class DeletePermitUseCase:
    """Use case for removing a permit owned by the calling person"""
    
    def __init__(
        self,
        permit_repository: PermitRepository,
        person_repository: PersonRepository,
    ) -> None:
        self.permit_repository = permit_repository
        self.person_repository = person_repository
    
    async def execute(self, permit_id: str, current_person_id: Optional[str]) -> None:
        """
        Delete a permit
        
        Raises:
            PermitNotFoundError: If the permit does not exist
            CurrentPersonNotFoundError: If the calling person is unknown
            PermitAccessDeniedError: If the permit belongs to someone else
        """
        permit, person = await get_owned_permit(
            self.permit_repository,
            self.person_repository,
            permit_id,
            current_person_id,
        )
        await self.permit_repository.delete(permit.id)
        logger.info(f"Person {person.id} removed permit {permit.id}")
