"""Constants for Permit model field names"""


class PermitFields:
    """Field name constants for Permit model"""
    ID = "id"
    PERSON_ID = "person_id"
    VALID_FROM = "valid_from"
    VALID_UNTIL = "valid_until"
    CONSENT_ASSURANCE = "consent_assurance"
    MANUAL_CHECK_REQUIRED = "manual_check_required"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
