from pydantic import Field

from models.schemas.base import CamelModel
from models.schemas.career import CareerDefinition


class LearningPath(CamelModel):
    immediate: list[str] = []
    short_term: list[str] = []
    long_term: list[str] = []


class MatchResult(CamelModel):
    career: CareerDefinition
    match_score: float = Field(default=0.0, ge=0.0, le=1.0)
    reasoning: str = ""
    skill_gaps: list[str] = []
    learning_path: LearningPath = LearningPath()


class ScaleSpec(CamelModel):
    min: int = 1
    max: int = 5
    labels: list[str] = []


class Question(CamelModel):
    id: str
    question: str
    type: str  # scale, multiple-choice, single-choice
    options: list[str] = []
    scale: ScaleSpec | None = None


class JobMarketTrends(CamelModel):
    demand_level: str = "High"
    salary_trend: str = "Increasing"
    top_skills_in_demand: list[str] = ["Communication", "Problem Solving"]
    emerging_technologies: list[str] = []
    job_openings: int = 0
    top_companies: list[str] = []


class ProfileSaved(CamelModel):
    success: bool = True
    profile_id: str
    message: str = "Profile saved successfully"
