"""Storage boundary for onboarding profiles.

``ProfileRepository`` is the contract a real database backend implements;
``InMemoryProfileRepository`` backs it with a dict for single-process
deployments and tests.
"""

import logging
import threading
import uuid
from abc import ABC, abstractmethod

from models.requests import UserProfile

logger = logging.getLogger(__name__)


class ProfileNotFoundError(KeyError):
    """Raised when a profile id is not present in the repository."""


class ProfileRepository(ABC):
    """Create/get/update store for ``UserProfile`` records.

    Subclasses must implement:
        - create(profile): persist and return the new id
        - get(profile_id): return the profile or None
        - update(profile_id, profile): replace, raising ProfileNotFoundError if absent
    """

    @abstractmethod
    def create(self, profile: UserProfile) -> str:
        """Store a new profile and return its id."""

    @abstractmethod
    def get(self, profile_id: str) -> UserProfile | None:
        """Return the stored profile, or None."""

    @abstractmethod
    def update(self, profile_id: str, profile: UserProfile) -> UserProfile:
        """Replace an existing profile."""


class InMemoryProfileRepository(ProfileRepository):
    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}
        self._lock = threading.Lock()

    def create(self, profile: UserProfile) -> str:
        profile_id = uuid.uuid4().hex
        with self._lock:
            self._profiles[profile_id] = profile.model_copy(deep=True)
        logger.info("Stored profile %s", profile_id)
        return profile_id

    def get(self, profile_id: str) -> UserProfile | None:
        with self._lock:
            profile = self._profiles.get(profile_id)
        return profile.model_copy(deep=True) if profile is not None else None

    def update(self, profile_id: str, profile: UserProfile) -> UserProfile:
        with self._lock:
            if profile_id not in self._profiles:
                raise ProfileNotFoundError(profile_id)
            self._profiles[profile_id] = profile.model_copy(deep=True)
        logger.info("Updated profile %s", profile_id)
        return profile
