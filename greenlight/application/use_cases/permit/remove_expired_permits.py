# Standard library imports
import logging
from datetime import datetime
from typing import Optional

# Local application imports
from ....domain.repositories.permit_repository import PermitRepository
from ....utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class RemoveExpiredPermitsUseCase:
    """Use case for purging permits whose validity has ended"""
    
    def __init__(self, permit_repository: PermitRepository) -> None:
        self.permit_repository = permit_repository
    
    async def execute(self, now: Optional[datetime] = None) -> int:
        """
        Delete every permit with valid_until before `now`
        
        Returns:
            Number of permits removed
        """
        expired = await self.permit_repository.find_expired(now or utc_now())
        removed = 0
        for permit in expired:
            if await self.permit_repository.delete(permit.id):
                removed += 1
        logger.info(f"Removed {removed} expired permit(s)")
        return removed
