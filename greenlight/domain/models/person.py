from dataclasses import dataclass


@dataclass
class Person:
    """Pure domain model for the person a permit is issued to"""
    id: str
    full_name: str = ""

    def __post_init__(self):
        """Business validations"""
        if not self.id:
            raise ValueError("Person ID is required")
