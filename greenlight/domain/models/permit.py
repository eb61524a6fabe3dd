# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ...utils.datetime_utils import ensure_utc, utc_now


@dataclass
class Permit:
    """
    Pure domain model for Permit entity - no external dependencies.
    
    A permit is valid between valid_from and valid_until and belongs to one
    person. `image` holds the rendered VizHash JPEG when the permit is
    prepared for display; it is empty in storage.
    """
    id: str
    person_id: str
    valid_from: datetime
    valid_until: datetime
    consent_assurance: bool = False
    manual_check_required: bool = False
    image: bytes = b""
    
    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise ValueError("Permit ID is required")
        if not self.person_id:
            raise ValueError("Person ID is required")
        self.valid_from = ensure_utc(self.valid_from)
        self.valid_until = ensure_utc(self.valid_until)
        if self.valid_until < self.valid_from:
            raise ValueError("Permit cannot end before it starts")
    
    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """True once valid_until lies in the past"""
        now = ensure_utc(now) if now is not None else utc_now()
        return self.valid_until < now
