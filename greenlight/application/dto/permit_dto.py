import base64
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ...domain.models.permit import Permit


def image_data_uri(jpeg: bytes) -> Optional[str]:
    """Encode JPEG bytes as a data URI, or None when there is no image"""
    if not jpeg:
        return None
    return "data:image/jpeg;base64," + base64.b64encode(jpeg).decode("ascii")


class PermitCreateRequest(BaseModel):
    """DTO for permit creation request"""
    consent_assurance: bool = False
    manual_check_required: bool = False


class PermitResponse(BaseModel):
    """DTO for permit response"""
    id: str
    person_id: str
    valid_from: datetime
    valid_until: datetime
    consent_assurance: bool
    manual_check_required: bool
    image: Optional[str] = None  # VizHash JPEG as data URI, only on single-permit reads

    @classmethod
    def from_permit(cls, permit: Permit) -> "PermitResponse":
        return cls(
            id=permit.id,
            person_id=permit.person_id,
            valid_from=permit.valid_from,
            valid_until=permit.valid_until,
            consent_assurance=permit.consent_assurance,
            manual_check_required=permit.manual_check_required,
            image=image_data_uri(permit.image),
        )
