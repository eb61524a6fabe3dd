from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .vizhash_provider import VizHashProvider
from .permit_provider import PermitProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "VizHashProvider",
    "PermitProvider",
]
