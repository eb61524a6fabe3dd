"""
Exception hierarchy for the permit service layer.

Every error carries a stable `error_id` so the web layer can map it to an
HTTP response without parsing messages.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class GreenlightError(Exception):
    """Base exception for all permit service errors."""

    error_id = "greenlight:error"

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Lookup and access
# -----------------------------------------------------------------------------


class PermitNotFoundError(GreenlightError):
    """Raised when no permit exists for an identifier."""

    error_id = "greenlight:permit-not-found"

    def __init__(self, permit_id: str):
        super().__init__(
            f"Permit {permit_id} was not found",
            user_message="Permit was not found!",
            details={"permit_id": permit_id},
        )


class CurrentPersonNotFoundError(GreenlightError):
    """Raised when the calling person cannot be resolved."""

    error_id = "greenlight:current-person-not-found"

    def __init__(self, person_id: Optional[str]):
        super().__init__(
            f"Current person {person_id!r} was not found",
            user_message="Current person wasn't found!",
            details={"person_id": person_id},
        )


class PermitAccessDeniedError(GreenlightError):
    """Raised when a person acts on a permit issued to someone else."""

    error_id = "greenlight:person-does-not-own-permit"

    def __init__(self, permit_id: str, person_id: str):
        super().__init__(
            f"Person {person_id} does not own permit {permit_id}",
            user_message="Current person doesn't own this permit!",
            details={"permit_id": permit_id, "person_id": person_id},
        )
