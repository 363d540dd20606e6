import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import (
    get_career_catalog,
    get_job_market,
    get_matcher,
    get_profile_repository,
)
from config import settings
from models.requests import UserProfile
from models.responses import JobMarketTrends, MatchResult, ProfileSaved, Question
from models.schemas.career import CareerDefinition
from services.career_catalog import CareerCatalog
from services.career_matcher import CareerMatcher
from services.catalog_data import SKILL_CATEGORIES
from services.job_market import JobMarketService
from services.profile_store import ProfileNotFoundError, ProfileRepository
from services.skills_assessment import domains, skills_assessment_questions

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _parse_profile(body: Any) -> UserProfile:
    """Validate a raw JSON profile, rejecting it as a client error."""
    if not isinstance(body, dict) or body.get("personalDetails", body.get("personal_details")) is None:
        raise HTTPException(status_code=400, detail="User profile data is required")
    try:
        return UserProfile.model_validate(body)
    except ValidationError as e:
        logger.info("Rejected invalid profile: %d validation errors", e.error_count())
        raise HTTPException(status_code=400, detail="User profile data is required")


@router.get("/health")
async def health(catalog: CareerCatalog = Depends(get_career_catalog)):
    return {
        "status": "ok",
        "careers": len(catalog),
        "categories": catalog.category_names,
        "assessmentDomains": domains(),
    }


@router.post("/recommendations", response_model=list[MatchResult])
@limiter.limit(settings.recommendations_rate_limit)
async def recommendations(
    request: Request,
    body: Any = Body(default=None),
    matcher: CareerMatcher = Depends(get_matcher),
):
    profile = _parse_profile(body)
    try:
        return matcher.recommend(profile)
    except Exception:
        logger.exception("Error generating recommendations")
        raise HTTPException(status_code=500, detail="Failed to generate career recommendations")


@router.get(
    "/skills-assessment/{domain}",
    response_model=list[Question],
    response_model_exclude_none=True,
)
@limiter.limit(settings.lookup_rate_limit)
async def skills_assessment(request: Request, domain: str):
    return skills_assessment_questions(domain)


@router.get("/job-market/{career_title:path}", response_model=JobMarketTrends)
@limiter.limit(settings.lookup_rate_limit)
async def job_market(
    request: Request,
    career_title: str,
    market: JobMarketService = Depends(get_job_market),
):
    return market.trends(career_title)


@router.get("/career-categories", response_model=dict[str, list[CareerDefinition]])
async def career_categories(matcher: CareerMatcher = Depends(get_matcher)):
    return {name: list(careers) for name, careers in matcher.list_categories().items()}


@router.get("/skill-categories")
async def skill_categories():
    return SKILL_CATEGORIES


@router.post("/user/profile", response_model=ProfileSaved)
async def save_profile(
    body: Any = Body(default=None),
    repo: ProfileRepository = Depends(get_profile_repository),
):
    profile = _parse_profile(body)
    return ProfileSaved(profile_id=repo.create(profile))


@router.get("/user/profile/{profile_id}", response_model=UserProfile)
async def get_profile(
    profile_id: str,
    repo: ProfileRepository = Depends(get_profile_repository),
):
    profile = repo.get(profile_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.put("/user/profile/{profile_id}", response_model=ProfileSaved)
async def update_profile(
    profile_id: str,
    body: Any = Body(default=None),
    repo: ProfileRepository = Depends(get_profile_repository),
):
    profile = _parse_profile(body)
    try:
        repo.update(profile_id, profile)
    except ProfileNotFoundError:
        raise HTTPException(status_code=404, detail="Profile not found")
    return ProfileSaved(profile_id=profile_id, message="Profile updated successfully")
