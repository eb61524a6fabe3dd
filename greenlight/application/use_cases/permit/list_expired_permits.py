# Standard library imports
from datetime import datetime
from typing import List, Optional

# Local application imports
from ....domain.repositories.permit_repository import PermitRepository
from ....utils.datetime_utils import utc_now
from ...dto.permit_dto import PermitResponse


class ListExpiredPermitsUseCase:
    """Use case for listing permits whose validity has ended"""
    
    def __init__(self, permit_repository: PermitRepository) -> None:
        self.permit_repository = permit_repository
    
    async def execute(self, now: Optional[datetime] = None) -> List[PermitResponse]:
        """
        List all permits with valid_until before `now` (default: current UTC time)
        """
        permits = await self.permit_repository.find_expired(now or utc_now())
        return [PermitResponse.from_permit(permit) for permit in permits]
