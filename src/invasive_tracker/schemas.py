"""
Domain vocabulary for the invasive species tables.

Records travel as plain dicts (fields vary per collection); the models here
cover the values this package itself derives or builds.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

UNKNOWN = "Unknown"
NOT_SPECIFIED = "Not specified"


class VerificationStatus(StrEnum):
    """Review state of a sighting report."""

    PENDING = "Pending"
    VERIFIED = "Verified"
    REJECTED = "Rejected"


#: Reports still considered live in the dashboard counts.
ACTIVE_STATUSES = frozenset({VerificationStatus.PENDING.value, VerificationStatus.VERIFIED.value})


class HabitatCategory(StrEnum):
    """Coarse habitat bucket derived from a report's free-text description."""

    FOREST = "Forest"
    WETLAND = "Wetland"
    GRASSLAND = "Grassland"
    COASTAL = "Coastal"
    RIPARIAN = "Riparian"
    URBAN = "Urban"
    AGRICULTURAL = "Agricultural"
    OTHER = "Other"


class ExpertiseLevel(StrEnum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERT = "Expert"


class NewUser(BaseModel):
    """User record provisioned on first login."""

    username: str
    email: str
    full_name: str
    user_type: str
    organization: str = NOT_SPECIFIED
    expertise_level: ExpertiseLevel = ExpertiseLevel.BEGINNER
    location: str = NOT_SPECIFIED
    specialization: list[str] = Field(default_factory=list)
    verified_identifier: bool = False

    @classmethod
    def from_email(cls, email: str, name: str, user_type: str) -> NewUser:
        """Build a profile whose username is the part of ``email`` before ``@``."""
        return cls(username=email.split("@")[0], email=email, full_name=name, user_type=user_type)
