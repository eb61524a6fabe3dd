# Standard library imports
from typing import Dict, Iterable, Optional

# Local application imports
from ...domain.models.person import Person
from ...domain.repositories.person_repository import PersonRepository


class InMemoryPersonRepository(PersonRepository):
    """Process-local PersonRepository, seeded at construction"""
    
    def __init__(self, persons: Optional[Iterable[Person]] = None) -> None:
        self._persons: Dict[str, Person] = {p.id: p for p in persons or []}
    
    def add(self, person: Person) -> None:
        self._persons[person.id] = person
    
    async def find_by_id(self, person_id: str) -> Optional[Person]:
        return self._persons.get(person_id)
