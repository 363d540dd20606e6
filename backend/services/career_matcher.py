"""Rule-based career matcher.

Scores every career in the catalog against an onboarding profile, keeps the
careers above the match threshold and enriches each with skill gaps, a
three-phase learning path and a short human-readable explanation.

Score = weighted sum of five sub-scores, each in [0, 1]:

    interest     0.30  share of user interests found in the career text
    skill        0.25  user strengths matched against required skills
    personality  0.20  title-keyword rules over personality traits
    environment  0.15  fixed placeholder (catalog has no environment data)
    location     0.10  user location vs. key hiring locations

Pure functions over immutable inputs; safe to call from concurrent requests.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

from config import settings
from models.requests import PersonalityProfile, UserProfile
from models.responses import LearningPath, MatchResult
from models.schemas.career import CareerDefinition
from services.career_catalog import CareerCatalog

logger = logging.getLogger(__name__)

W_INTEREST = 0.30
W_SKILL = 0.25
W_PERSONALITY = 0.20
W_ENVIRONMENT = 0.15
W_LOCATION = 0.10

PERSONALITY_BASELINE = 0.5
# Catalog entries carry no work-environment metadata yet, so every career
# gets the same moderate environment fit regardless of user preference.
ENVIRONMENT_SCORE = 0.7

LOCATION_EXACT = 1.0
LOCATION_MAJOR_CITY = 0.8
LOCATION_OTHER = 0.4
MAJOR_CITIES = ("bangalore", "mumbai", "delhi", "chennai", "pune", "hyderabad", "kolkata")


@dataclass(frozen=True)
class PersonalityRule:
    """Bonus rule applied when a career title contains one of ``title_keywords``.

    ``trait`` must be an exact entry of the user's primary traits;
    ``style_fragment`` is a case-sensitive substring of the profile attribute
    named by ``style_field``. The two bonuses apply independently.
    """
    title_keywords: tuple[str, ...]
    trait: str
    style_field: str
    style_fragment: str
    trait_bonus: float = 0.3
    style_bonus: float = 0.2

    def applies_to(self, title: str) -> bool:
        return any(kw in title for kw in self.title_keywords)

    def bonus(self, personality: PersonalityProfile) -> float:
        total = 0.0
        if self.trait in personality.primary_traits:
            total += self.trait_bonus
        if self.style_fragment in getattr(personality, self.style_field):
            total += self.style_bonus
        return total


PERSONALITY_RULES: tuple[PersonalityRule, ...] = (
    PersonalityRule(("Manager", "Lead"), "Leadership-oriented", "communication_style", "presenter"),
    PersonalityRule(("Developer", "Engineer"), "Analytical", "work_style", "thorough"),
    PersonalityRule(("Designer", "Creative"), "Innovative", "communication_style", "Visual"),
)


def _overlaps(a: str, b: str) -> bool:
    """Case-insensitive substring match in either direction."""
    a, b = a.lower(), b.lower()
    return a in b or b in a


def _has_skill(strengths: Sequence[str], skill: str) -> bool:
    return any(_overlaps(s, skill) for s in strengths)


# ---------------------------------------------------------------------------
# Sub-scores
# ---------------------------------------------------------------------------

def interest_score(interests: Sequence[str], career: CareerDefinition) -> float:
    """Fraction of interests found in the career's title, description and skills."""
    if not interests:
        return 0.0
    haystack = " ".join(
        [career.title.lower(), career.description.lower()]
        + [s.lower() for s in career.required_skills]
    )
    matches = sum(1 for interest in interests if interest.lower() in haystack)
    return matches / len(interests)


def skill_score(strengths: Sequence[str], required_skills: Sequence[str]) -> float:
    """Matched strengths over required skills, capped at 1.0.

    Each strength counts at most once, on its first matching skill.
    """
    if not required_skills:
        return 0.0
    matches = 0
    for strength in strengths:
        for skill in required_skills:
            if _overlaps(strength, skill):
                matches += 1
                break
    return min(matches / len(required_skills), 1.0)


def personality_score(
    personality: PersonalityProfile,
    title: str,
    rules: Sequence[PersonalityRule] = PERSONALITY_RULES,
) -> float:
    score = PERSONALITY_BASELINE
    for rule in rules:
        if rule.applies_to(title):
            score += rule.bonus(personality)
    return min(score, 1.0)


def environment_score(profile: UserProfile, career: CareerDefinition) -> float:
    return ENVIRONMENT_SCORE


def location_score(location: str, key_locations: Sequence[str]) -> float:
    user_location = location.strip().lower()
    if not user_location:
        return LOCATION_OTHER

    for loc in key_locations:
        if _overlaps(user_location, loc):
            return LOCATION_EXACT

    if any(city in user_location for city in MAJOR_CITIES):
        return LOCATION_MAJOR_CITY
    return LOCATION_OTHER


def match_score(profile: UserProfile, career: CareerDefinition) -> float:
    """Weighted sum of the five sub-scores. Weights sum to 1.0."""
    return (
        W_INTEREST * interest_score(profile.interests, career)
        + W_SKILL * skill_score(profile.strengths, career.required_skills)
        + W_PERSONALITY * personality_score(profile.personality_profile, career.title)
        + W_ENVIRONMENT * environment_score(profile, career)
        + W_LOCATION * location_score(profile.personal_details.location, career.key_locations)
    )


# ---------------------------------------------------------------------------
# Enrichment
# ---------------------------------------------------------------------------

def identify_skill_gaps(strengths: Sequence[str], required_skills: Sequence[str]) -> list[str]:
    """Required skills not covered by any strength, in catalog order."""
    return [skill for skill in required_skills if not _has_skill(strengths, skill)]


def build_learning_path(
    career: CareerDefinition,
    skill_gaps: Sequence[str],
    current_stage: str,
) -> LearningPath:
    # 1-3 months
    immediate = [
        f"Research {career.title} role and responsibilities",
        "Complete online courses in basic skills",
        "Join relevant communities and forums",
    ]

    # 3-12 months
    short_term: list[str] = []
    if skill_gaps:
        short_term = [f"Learn {skill} through online courses" for skill in skill_gaps[:2]]
        short_term += [
            "Build a portfolio or project showcase",
            "Connect with professionals in the field",
        ]

    # 1-3 years
    if "10th" in current_stage or "12th" in current_stage:
        education = career.education_paths[0] if career.education_paths else "relevant"
        long_term = [
            f"Pursue {education} education",
            "Gain internship experience",
            "Develop leadership and communication skills",
        ]
    else:
        long_term = [
            "Gain professional experience through internships or entry-level positions",
            "Pursue advanced certifications or specializations",
            "Build a professional network in the industry",
        ]

    return LearningPath(immediate=immediate, short_term=short_term, long_term=long_term)


def build_reasoning(profile: UserProfile, career: CareerDefinition) -> str:
    reasons: list[str] = []

    title = career.title.lower()
    description = career.description.lower()
    matching_interests = [
        i for i in profile.interests
        if i.lower() in title or i.lower() in description
    ]
    if matching_interests:
        reasons.append(
            f"Your interests in {', '.join(matching_interests)} align well with this role"
        )

    matching_strengths = [
        s for s in profile.strengths
        if any(_overlaps(s, skill) for skill in career.required_skills)
    ]
    if matching_strengths:
        reasons.append(
            f"Your strengths in {', '.join(matching_strengths)} are valuable for this career"
        )

    location = profile.personal_details.location
    # One direction only: the user location must contain a key location
    if location.strip() and any(loc.lower() in location.lower() for loc in career.key_locations):
        reasons.append(f"Strong job market in your location ({location})")

    reasons.append(
        f"{career.growth_rate} expected growth rate with competitive salary range of {career.salary_range}"
    )
    return ". ".join(reasons) + "."


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

class CareerMatcher:
    """Ranks catalog careers for a profile. Holds no mutable state."""

    def __init__(
        self,
        catalog: CareerCatalog,
        max_results: int | None = None,
        min_score: float | None = None,
    ) -> None:
        self.catalog = catalog
        self.max_results = settings.max_recommendations if max_results is None else max_results
        self.min_score = settings.min_match_score if min_score is None else min_score

    def recommend(self, profile: UserProfile) -> list[MatchResult]:
        careers = self.catalog.all_careers()
        stage = profile.personal_details.current_stage

        results: list[MatchResult] = []
        for career in careers:
            score = match_score(profile, career)
            if score <= self.min_score:
                continue

            gaps = identify_skill_gaps(profile.strengths, career.required_skills)
            results.append(
                MatchResult(
                    career=career,
                    match_score=score,
                    reasoning=build_reasoning(profile, career),
                    skill_gaps=gaps,
                    learning_path=build_learning_path(career, gaps, stage),
                )
            )

        logger.debug(
            "Scored %d careers, %d above threshold %.2f",
            len(careers), len(results), self.min_score,
        )

        # sorted() is stable: ties keep catalog order
        results = sorted(results, key=lambda r: r.match_score, reverse=True)
        return results[: self.max_results]

    def list_categories(self) -> Mapping[str, tuple[CareerDefinition, ...]]:
        return self.catalog.list_categories()
