# Standard library imports
from typing import Optional, Tuple

# Local application imports
from ....domain.exceptions import (
    CurrentPersonNotFoundError,
    PermitAccessDeniedError,
    PermitNotFoundError,
)
from ....domain.models.permit import Permit
from ....domain.models.person import Person
from ....domain.repositories.permit_repository import PermitRepository
from ....domain.repositories.person_repository import PersonRepository


async def get_current_person(
    person_repository: PersonRepository,
    current_person_id: Optional[str],
) -> Person:
    """
    Resolve the calling person
    
    Raises:
        CurrentPersonNotFoundError: If the ID is empty or unknown
    """
    person = await person_repository.find_by_id(current_person_id) if current_person_id else None
    if person is None:
        raise CurrentPersonNotFoundError(current_person_id)
    return person


async def get_owned_permit(
    permit_repository: PermitRepository,
    person_repository: PersonRepository,
    permit_id: str,
    current_person_id: Optional[str],
) -> Tuple[Permit, Person]:
    """
    Load a permit and check that the calling person owns it
    
    Returns:
        (permit, owner)
        
    Raises:
        PermitNotFoundError: If the permit does not exist
        CurrentPersonNotFoundError: If the calling person is unknown
        PermitAccessDeniedError: If the permit belongs to someone else
    """
    permit = await permit_repository.find_by_id(permit_id)
    if permit is None:
        raise PermitNotFoundError(permit_id)
    
    person = await get_current_person(person_repository, current_person_id)
    if permit.person_id != person.id:
        raise PermitAccessDeniedError(permit_id, person.id)
    
    return permit, person
