# Standard library imports
from datetime import datetime
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.repositories.permit_repository import PermitRepository
from ...domain.models.permit import Permit
from ...domain.constants import PermitFields
from ...utils.datetime_utils import ensure_utc
from .mongo_connection import get_permit_collection


class MongoPermitRepository(PermitRepository):
    """MongoDB implementation of PermitRepository"""
    
    def __init__(self, permit_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.permit_collection = permit_collection if permit_collection is not None else get_permit_collection()
    
    async def find_by_id(self, permit_id: str) -> Optional[Permit]:
        """
        Find permit by ID
        
        Args:
            permit_id: The permit ID to find
            
        Returns:
            Permit domain model if found, None otherwise
        """
        if not permit_id:
            return None
        
        try:
            document = await self.permit_collection.find_one({PermitFields.ID: permit_id})
        except Exception as e:
            raise RuntimeError(f"Error finding permit by ID: {str(e)}")
        
        if document is None:
            return None
        return self._document_to_permit(document)
    
    async def find_by_person(self, person_id: str) -> List[Permit]:
        """
        Find all permits issued to a person
        
        Args:
            person_id: The owning person ID
            
        Returns:
            List of Permit domain models
        """
        if not person_id:
            return []
        
        return await self._find_many({PermitFields.PERSON_ID: person_id}, "listing permits for person")
    
    async def find_expired(self, now: datetime) -> List[Permit]:
        """
        Find all permits that ended before `now`
        
        Args:
            now: Reference time (naive values are taken as UTC)
            
        Returns:
            List of expired Permit domain models
        """
        query = {PermitFields.VALID_UNTIL: {"$lt": ensure_utc(now)}}
        return await self._find_many(query, "listing expired permits")
    
    async def save(self, permit: Permit) -> Permit:
        """
        Save permit (create new or update existing), keyed by permit ID
        
        Args:
            permit: Permit domain model to save
            
        Returns:
            Saved Permit domain model as stored
        """
        if not permit:
            raise ValueError("Permit cannot be None")
        
        try:
            await self.permit_collection.update_one(
                {PermitFields.ID: permit.id},
                {"$set": self._permit_to_document(permit)},
                upsert=True,
            )
            document = await self.permit_collection.find_one({PermitFields.ID: permit.id})
        except Exception as e:
            raise RuntimeError(f"Error saving permit: {str(e)}")
        
        if document is None:
            raise RuntimeError("Permit was saved but could not be retrieved")
        return self._document_to_permit(document)
    
    async def delete(self, permit_id: str) -> bool:
        """
        Delete permit by ID
        
        Returns:
            True if a permit was removed
        """
        if not permit_id:
            return False
        
        try:
            result = await self.permit_collection.delete_one({PermitFields.ID: permit_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting permit: {str(e)}")
        return result.deleted_count > 0
    
    async def _find_many(self, query: Dict[str, Any], action: str) -> List[Permit]:
        try:
            cursor = self.permit_collection.find(query)
            permits = []
            async for document in cursor:
                permits.append(self._document_to_permit(document))
            return permits
        except Exception as e:
            raise RuntimeError(f"Error {action}: {str(e)}")
    
    def _document_to_permit(self, document: Dict[str, Any]) -> Permit:
        """
        Convert MongoDB document to Permit domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            Permit domain model (image left empty; it is rendered on demand)
        """
        if not document:
            raise ValueError("Invalid document: document is None or empty")
        
        return Permit(
            id=document.get(PermitFields.ID, ""),
            person_id=document.get(PermitFields.PERSON_ID, ""),
            valid_from=document.get(PermitFields.VALID_FROM),
            valid_until=document.get(PermitFields.VALID_UNTIL),
            consent_assurance=bool(document.get(PermitFields.CONSENT_ASSURANCE, False)),
            manual_check_required=bool(document.get(PermitFields.MANUAL_CHECK_REQUIRED, False)),
        )
    
    def _permit_to_document(self, permit: Permit) -> Dict[str, Any]:
        """
        Convert Permit domain model to MongoDB document
        
        Args:
            permit: Permit domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        return {
            PermitFields.ID: permit.id,
            PermitFields.PERSON_ID: permit.person_id,
            PermitFields.VALID_FROM: ensure_utc(permit.valid_from),
            PermitFields.VALID_UNTIL: ensure_utc(permit.valid_until),
            PermitFields.CONSENT_ASSURANCE: permit.consent_assurance,
            PermitFields.MANUAL_CHECK_REQUIRED: permit.manual_check_required,
        }
