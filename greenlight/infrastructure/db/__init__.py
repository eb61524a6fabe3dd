from .mongo_connection import get_database, get_permit_collection, get_person_collection
from .mongo_permit_repository import MongoPermitRepository
from .mongo_person_repository import MongoPersonRepository

__all__ = [
    "get_database",
    "get_permit_collection",
    "get_person_collection",
    "MongoPermitRepository",
    "MongoPersonRepository",
]
