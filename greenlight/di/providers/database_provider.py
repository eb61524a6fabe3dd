from typing import TYPE_CHECKING
from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer

STORAGE_MEMORY = "memory"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the MongoDB database and collections.
        Nothing is registered for the in-memory storage backend.
        """
        settings = container.get(Settings)
        if settings.storage_backend == STORAGE_MEMORY:
            return
        
        # Imported here so the in-memory backend does not need a Mongo driver connection
        from ...infrastructure.db.mongo_connection import (
            get_database,
            get_permit_collection,
            get_person_collection,
        )
        
        database = get_database(settings.mongo_uri, settings.mongo_database_name)
        container.register_singleton("database", database)
        container.register_singleton("permit_collection", get_permit_collection(database))
        container.register_singleton("person_collection", get_person_collection(database))
