# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.repositories.permit_repository import PermitRepository
from ....domain.repositories.person_repository import PersonRepository
from ...dto.permit_dto import PermitResponse
from .permit_access import get_current_person


class ListPermitsUseCase:
    """Use case for listing the calling person's permits"""
    
    def __init__(
        self,
        permit_repository: PermitRepository,
        person_repository: PersonRepository,
    ) -> None:
        self.permit_repository = permit_repository
        self.person_repository = person_repository
    
    async def execute(self, current_person_id: Optional[str]) -> List[PermitResponse]:
        """
        List all permits issued to the calling person (without images)
        
        Raises:
            CurrentPersonNotFoundError: If the calling person is unknown
        """
        person = await get_current_person(self.person_repository, current_person_id)
        permits = await self.permit_repository.find_by_person(person.id)
        return [PermitResponse.from_permit(permit) for permit in permits]
