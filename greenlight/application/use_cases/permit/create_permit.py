# Standard library imports
import logging
import uuid
from datetime import timedelta
from typing import Optional

# Local application imports
from ....domain.models.permit import Permit
from ....domain.repositories.permit_repository import PermitRepository
from ....domain.repositories.person_repository import PersonRepository
from ....utils.datetime_utils import utc_now
from ...dto.permit_dto import PermitCreateRequest, PermitResponse
from .permit_access import get_current_person

logger = logging.getLogger(__name__)

DEFAULT_VALIDITY_HOURS = 12


class CreatePermitUseCase:
    """Use case for issuing a new permit to the calling person"""
    
    def __init__(
        self,
        permit_repository: PermitRepository,
        person_repository: PersonRepository,
        validity_hours: int = DEFAULT_VALIDITY_HOURS,
    ) -> None:
        self.permit_repository = permit_repository
        self.person_repository = person_repository
        self.validity_hours = validity_hours
    
    def _generate_permit_id(self) -> str:
        return str(uuid.uuid4())
    
    async def execute(
        self,
        request: PermitCreateRequest,
        current_person_id: Optional[str],
    ) -> PermitResponse:
        """
        Create a permit valid from now for `validity_hours`
        
        Args:
            request: Permit creation request
            current_person_id: ID of the calling person, who becomes the owner
            
        Returns:
            PermitResponse for the stored permit
            
        Raises:
            CurrentPersonNotFoundError: If the calling person is unknown
        """
        person = await get_current_person(self.person_repository, current_person_id)
        
        now = utc_now()
        permit = Permit(
            id=self._generate_permit_id(),
            person_id=person.id,
            valid_from=now,
            valid_until=now + timedelta(hours=self.validity_hours),
            consent_assurance=request.consent_assurance,
            manual_check_required=request.manual_check_required,
        )
        
        saved_permit = await self.permit_repository.save(permit)
        logger.info(
            f"Created permit {saved_permit.id} for person {person.id}, "
            f"valid until {saved_permit.valid_until.isoformat()}"
        )
        return PermitResponse.from_permit(saved_permit)
