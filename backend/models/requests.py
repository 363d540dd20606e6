"""Onboarding profile submitted by the discovery survey."""

from pydantic import Field

from models.schemas.base import CamelModel


class PersonalDetails(CamelModel):
    full_name: str = ""
    current_stage: str = ""  # e.g. "after-10th", "undergraduate", "working-professional"
    location: str = ""


class WorkPreferences(CamelModel):
    environment: str = ""
    work_life_balance: str = ""


class PersonalityProfile(CamelModel):
    primary_traits: list[str] = []
    work_style: str = ""
    communication_style: str = ""


class UserProfile(CamelModel):
    """Answers collected across the onboarding steps.

    ``motivations`` and ``work_preferences`` are carried for display only and
    do not influence scoring.
    """
    personal_details: PersonalDetails
    interests: list[str] = Field(default=[], max_length=100)
    strengths: list[str] = Field(default=[], max_length=100)
    motivations: list[str] = []
    work_preferences: WorkPreferences = WorkPreferences()
    personality_profile: PersonalityProfile = PersonalityProfile()
