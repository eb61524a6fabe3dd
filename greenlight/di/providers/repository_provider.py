import logging
from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.permit_repository import PermitRepository
from ...domain.repositories.person_repository import PersonRepository
from ...domain.repositories.person_photo_provider import PersonPhotoProvider
from ...infrastructure.memory import InMemoryPermitRepository, InMemoryPersonRepository
from ...infrastructure.photos import FilesystemPersonPhotoProvider
from .database_provider import STORAGE_MEMORY

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository implementations for the configured storage backend,
        plus the filesystem photo provider.
        """
        settings = container.get(Settings)
        
        if settings.storage_backend == STORAGE_MEMORY:
            logger.info("Using in-memory permit storage; permits are lost on restart")
            container.register_singleton(PermitRepository, InMemoryPermitRepository())
            container.register_singleton(PersonRepository, InMemoryPersonRepository())
        else:
            from ...infrastructure.db.mongo_permit_repository import MongoPermitRepository
            from ...infrastructure.db.mongo_person_repository import MongoPersonRepository
            
            container.register_singleton(
                PermitRepository,
                MongoPermitRepository(permit_collection=container.get("permit_collection"))
            )
            container.register_singleton(
                PersonRepository,
                MongoPersonRepository(person_collection=container.get("person_collection"))
            )
        
        container.register_singleton(
            PersonPhotoProvider,
            FilesystemPersonPhotoProvider(settings.person_photo_dir)
        )
