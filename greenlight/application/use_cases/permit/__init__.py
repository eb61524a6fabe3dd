from .create_permit import CreatePermitUseCase
from .get_permit import GetPermitUseCase
from .list_permits import ListPermitsUseCase
from .list_expired_permits import ListExpiredPermitsUseCase
from .delete_permit import DeletePermitUseCase
from .remove_expired_permits import RemoveExpiredPermitsUseCase
from .get_reference_image import GetReferenceImageUseCase

__all__ = [
    "CreatePermitUseCase",
    "GetPermitUseCase",
    "ListPermitsUseCase",
    "ListExpiredPermitsUseCase",
    "DeletePermitUseCase",
    "RemoveExpiredPermitsUseCase",
    "GetReferenceImageUseCase",
]
