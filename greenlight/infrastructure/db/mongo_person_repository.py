# Standard library imports
from typing import Optional, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.person_repository import PersonRepository
from ...domain.models.person import Person
from ...domain.constants import PersonFields
from .mongo_connection import get_person_collection


class MongoPersonRepository(PersonRepository):
    """MongoDB implementation of PersonRepository"""
    
    def __init__(self, person_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.person_collection = person_collection if person_collection is not None else get_person_collection()
    
    async def find_by_id(self, person_id: str) -> Optional[Person]:
        """
        Find person by ID
        
        Args:
            person_id: The person ID to find
            
        Returns:
            Person domain model if found, None otherwise
        """
        if not person_id:
            return None
        
        try:
            document = await self.person_collection.find_one({PersonFields.ID: person_id})
        except Exception as e:
            raise RuntimeError(f"Error finding person by ID: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_person(document)
    
    def _document_to_person(self, document: Dict[str, Any]) -> Person:
        """Convert MongoDB document to Person domain model"""
        return Person(
            id=document.get(PersonFields.ID, ""),
            full_name=document.get(PersonFields.FULL_NAME, ""),
        )
