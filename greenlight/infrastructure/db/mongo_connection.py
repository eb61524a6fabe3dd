# Standard library imports
from typing import Optional, Tuple

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None
# (uri, database name) the cached connection was opened with
_mongo_target: Optional[Tuple[str, str]] = None


def get_database(
    mongo_uri: Optional[str] = None,
    database_name: Optional[str] = None,
) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)
    
    Args:
        mongo_uri: Connection string; defaults to the global settings
        database_name: Database name; defaults to the global settings
    
    Returns:
        MongoDB database instance, reused while the target is unchanged
    """
    global _mongo_client, _mongo_database, _mongo_target
    
    if mongo_uri is None or database_name is None:
        settings = get_settings()
        mongo_uri = mongo_uri if mongo_uri is not None else settings.mongo_uri
        database_name = database_name if database_name is not None else settings.mongo_database_name
    
    target = (mongo_uri, database_name)
    if _mongo_database is not None and _mongo_target == target:
        return _mongo_database
    
    _mongo_client = AsyncIOMotorClient(mongo_uri, tz_aware=True)
    _mongo_database = _mongo_client[database_name]
    _mongo_target = target
    return _mongo_database


def get_permit_collection(database: Optional[AsyncIOMotorDatabase] = None) -> AsyncIOMotorCollection:
    """
    Get permits collection from MongoDB
    
    Returns:
        MongoDB collection for permits
    """
    return (database if database is not None else get_database())["permits"]


def get_person_collection(database: Optional[AsyncIOMotorDatabase] = None) -> AsyncIOMotorCollection:
    """
    Get persons collection from MongoDB
    
    Returns:
        MongoDB collection for persons
    """
    return (database if database is not None else get_database())["persons"]
