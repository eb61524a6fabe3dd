from .in_memory_permit_repository import InMemoryPermitRepository
from .in_memory_person_repository import InMemoryPersonRepository

__all__ = ["InMemoryPermitRepository", "InMemoryPersonRepository"]
