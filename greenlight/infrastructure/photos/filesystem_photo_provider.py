"""
Person photos stored on disk: one file per person, named after the person ID
(<photo_dir>/<person_id>.jpg, .jpeg or .png).
"""

# Standard library imports
import asyncio
import logging
from pathlib import Path
from typing import Optional, Union

# Local application imports
from ...domain.constants.media_constants import PHOTO_EXTENSIONS
from ...domain.models.person import Person
from ...domain.repositories.person_photo_provider import PersonPhotoProvider

logger = logging.getLogger(__name__)


def safe_file_stem(person_id: str) -> str:
    """Return a file-safe stem: alphanumerics, dash and underscore only."""
    return "".join(c if c.isalnum() or c in "-_" else "_" for c in person_id.strip())[:120]


class FilesystemPersonPhotoProvider(PersonPhotoProvider):
    """PersonPhotoProvider reading photos from a directory"""
    
    def __init__(self, photo_dir: Union[str, Path]) -> None:
        self.photo_dir = Path(photo_dir)
    
    def _find_photo_path(self, person: Person) -> Optional[Path]:
        stem = safe_file_stem(person.id)
        if not stem:
            return None
        for extension in PHOTO_EXTENSIONS:
            candidate = self.photo_dir / f"{stem}{extension}"
            if candidate.is_file():
                return candidate
        return None
    
    async def get_photo_data(self, person: Person) -> Optional[bytes]:
        """
        Read the photo for a person
        
        Returns:
            Raw image bytes, or None if no photo file exists
        """
        path = self._find_photo_path(person)
        if path is None:
            logger.debug(f"No photo found for person {person.id} in {self.photo_dir}")
            return None
        return await asyncio.to_thread(path.read_bytes)
