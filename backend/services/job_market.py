"""Job market trends per career.

Opening counts are placeholder figures until a job-portal integration
exists. The random source is injectable so tests and seeded deployments get
repeatable numbers.
"""

import logging
import random
from typing import Protocol

from config import settings
from models.responses import JobMarketTrends
from services.career_catalog import CareerCatalog

logger = logging.getLogger(__name__)

MIN_OPENINGS = 100
MAX_OPENINGS = 1099

# Checked in order; a later match replaces an earlier one.
_EMERGING_TECH_RULES: tuple[tuple[tuple[str, ...], list[str]], ...] = (
    (("Data", "AI"), ["AI/ML", "Big Data", "Cloud Computing"]),
    (("Digital", "Software"), ["Cloud Native", "DevOps", "Microservices"]),
)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class JobMarketService:
    def __init__(self, catalog: CareerCatalog, rng: RandomSource | None = None) -> None:
        self.catalog = catalog
        self.rng = rng if rng is not None else random.Random(settings.job_openings_seed)

    def trends(self, career_title: str) -> JobMarketTrends:
        """Trends for a career title. Unknown titles get the default placeholder."""
        career = self.catalog.find(career_title)
        if career is None:
            logger.debug("No catalog entry for %r, returning default trends", career_title)
            return JobMarketTrends()

        emerging: list[str] = []
        for keywords, technologies in _EMERGING_TECH_RULES:
            if any(kw in career.title for kw in keywords):
                emerging = list(technologies)

        return JobMarketTrends(
            top_skills_in_demand=list(career.required_skills),
            top_companies=list(career.top_employers),
            job_openings=self.rng.randint(MIN_OPENINGS, MAX_OPENINGS),
            emerging_technologies=emerging,
        )
