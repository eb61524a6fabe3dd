from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.permit_repository import PermitRepository
from ...domain.repositories.person_repository import PersonRepository
from ...domain.repositories.person_photo_provider import PersonPhotoProvider
from ...application.use_cases.permit import (
    CreatePermitUseCase,
    DeletePermitUseCase,
    GetPermitUseCase,
    GetReferenceImageUseCase,
    ListExpiredPermitsUseCase,
    ListPermitsUseCase,
    RemoveExpiredPermitsUseCase,
)
from ...vizhash.service import VizHashService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PermitProvider:
    """Permit use case provider - registers all permit-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all permit use cases.
        Use cases are created on-demand via factories.
        """
        settings = container.get(Settings)
        
        container.register_factory(
            CreatePermitUseCase,
            lambda: CreatePermitUseCase(
                permit_repository=container.get(PermitRepository),
                person_repository=container.get(PersonRepository),
                validity_hours=settings.permit_validity_hours,
            )
        )
        
        container.register_factory(
            GetPermitUseCase,
            lambda: GetPermitUseCase(
                permit_repository=container.get(PermitRepository),
                person_repository=container.get(PersonRepository),
                photo_provider=container.get(PersonPhotoProvider),
                vizhash_service=container.get(VizHashService),
                image_size=settings.vizhash_image_size,
            )
        )
        
        container.register_factory(
            ListPermitsUseCase,
            lambda: ListPermitsUseCase(
                permit_repository=container.get(PermitRepository),
                person_repository=container.get(PersonRepository),
            )
        )
        
        container.register_factory(
            ListExpiredPermitsUseCase,
            lambda: ListExpiredPermitsUseCase(
                permit_repository=container.get(PermitRepository)
            )
        )
        
        container.register_factory(
            DeletePermitUseCase,
            lambda: DeletePermitUseCase(
                permit_repository=container.get(PermitRepository),
                person_repository=container.get(PersonRepository),
            )
        )
        
        container.register_factory(
            RemoveExpiredPermitsUseCase,
            lambda: RemoveExpiredPermitsUseCase(
                permit_repository=container.get(PermitRepository)
            )
        )
        
        container.register_factory(
            GetReferenceImageUseCase,
            lambda: GetReferenceImageUseCase(
                vizhash_service=container.get(VizHashService),
                image_size=settings.vizhash_image_size,
            )
        )
