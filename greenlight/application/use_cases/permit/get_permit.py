# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.permit_repository import PermitRepository
from ....domain.repositories.person_repository import PersonRepository
from ....domain.repositories.person_photo_provider import PersonPhotoProvider
from ....vizhash.service import VizHashService
from ...dto.permit_dto import PermitResponse
from .permit_access import get_owned_permit

logger = logging.getLogger(__name__)


class GetPermitUseCase:
    """Use case for reading a permit together with its VizHash image"""
    
    def __init__(
        self,
        permit_repository: PermitRepository,
        person_repository: PersonRepository,
        photo_provider: PersonPhotoProvider,
        vizhash_service: VizHashService,
        image_size: int,
    ) -> None:
        self.permit_repository = permit_repository
        self.person_repository = person_repository
        self.photo_provider = photo_provider
        self.vizhash_service = vizhash_service
        self.image_size = image_size
    
    async def execute(self, permit_id: str, current_person_id: Optional[str]) -> PermitResponse:
        """
        Get a permit owned by the calling person
        
        The image is rendered from the owner's photo and the current rolling
        input; a placeholder is used when the owner has no photo.
        
        Args:
            permit_id: ID of the permit
            current_person_id: ID of the calling person
            
        Returns:
            PermitResponse with the image as a data URI
            
        Raises:
            PermitNotFoundError: If the permit does not exist
            CurrentPersonNotFoundError: If the calling person is unknown
            PermitAccessDeniedError: If the permit belongs to someone else
            DecodeError: If the stored photo is not a valid image
            ConfigError: If no server secret is configured
        """
        permit, person = await get_owned_permit(
            self.permit_repository,
            self.person_repository,
            permit_id,
            current_person_id,
        )
        
        photo = await self.photo_provider.get_photo_data(person)
        rolling_input = self.vizhash_service.get_current_input()
        
        if photo is not None:
            permit.image = await asyncio.to_thread(
                self.vizhash_service.create_image_with_photo,
                rolling_input,
                photo,
                self.image_size,
            )
        else:
            logger.info(f"No photo for person {person.id}, using placeholder for permit {permit.id}")
            permit.image = await asyncio.to_thread(
                self.vizhash_service.create_image_missing_photo,
                rolling_input,
                self.image_size,
            )
        
        return PermitResponse.from_permit(permit)
