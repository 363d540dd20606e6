"""Shared dependencies for API routes.

Process-wide services are created lazily on first request; tests replace
them through ``app.dependency_overrides``.
"""

from services.career_catalog import CareerCatalog, get_catalog
from services.career_matcher import CareerMatcher
from services.job_market import JobMarketService
from services.profile_store import InMemoryProfileRepository, ProfileRepository

_job_market: JobMarketService | None = None
_profiles: ProfileRepository | None = None


def get_career_catalog() -> CareerCatalog:
    return get_catalog()


def get_matcher() -> CareerMatcher:
    return CareerMatcher(get_catalog())


def get_job_market() -> JobMarketService:
    global _job_market
    if _job_market is None:
        _job_market = JobMarketService(get_catalog())
    return _job_market


def get_profile_repository() -> ProfileRepository:
    global _profiles
    if _profiles is None:
        _profiles = InMemoryProfileRepository()
    return _profiles
