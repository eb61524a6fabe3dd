"""Constants for Person model field names"""


class PersonFields:
    """Field name constants for Person model"""
    ID = "id"
    FULL_NAME = "full_name"
    
    # MongoDB specific
    MONGO_ID = "_id"
