import random

from models.responses import JobMarketTrends
from services.job_market import MAX_OPENINGS, MIN_OPENINGS, JobMarketService


class FixedRandom:
    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.value


class TestJobMarketService:
    def setup_method(self):
        self.rng = FixedRandom(420)

    def test_known_career(self, catalog):
        trends = JobMarketService(catalog, rng=self.rng).trends("software developer")

        assert trends.top_skills_in_demand == [
            "Programming", "Problem Solving", "Database Management", "Version Control",
        ]
        assert trends.top_companies == ["TCS", "Infosys", "Google", "Microsoft", "Amazon"]
        assert trends.job_openings == 420
        assert trends.emerging_technologies == ["Cloud Native", "DevOps", "Microservices"]
        assert self.rng.calls == [(100, 1099)]

    def test_data_careers_get_ai_technologies(self, catalog):
        trends = JobMarketService(catalog, rng=self.rng).trends("Data Scientist")
        assert trends.emerging_technologies == ["AI/ML", "Big Data", "Cloud Computing"]

    def test_digital_careers(self, catalog):
        trends = JobMarketService(catalog, rng=self.rng).trends("Digital Marketing Manager")
        assert trends.emerging_technologies == ["Cloud Native", "DevOps", "Microservices"]

    def test_other_careers_have_no_emerging_technologies(self, catalog):
        trends = JobMarketService(catalog, rng=self.rng).trends("Medical Doctor")
        assert trends.emerging_technologies == []
        assert trends.demand_level == "High"
        assert trends.salary_trend == "Increasing"

    def test_unknown_career_gets_defaults(self, catalog):
        trends = JobMarketService(catalog, rng=self.rng).trends("Astronaut")
        assert trends == JobMarketTrends()
        assert trends.top_skills_in_demand == ["Communication", "Problem Solving"]
        assert trends.job_openings == 0
        assert trends.top_companies == []
        assert self.rng.calls == []

    def test_title_must_match_exactly(self, catalog):
        trends = JobMarketService(catalog, rng=self.rng).trends("Software")
        assert trends.job_openings == 0


def test_seeded_source_is_repeatable(catalog):
    first = JobMarketService(catalog, rng=random.Random(7)).trends("Product Manager")
    second = JobMarketService(catalog, rng=random.Random(7)).trends("Product Manager")
    assert first.job_openings == second.job_openings
    assert MIN_OPENINGS <= first.job_openings <= MAX_OPENINGS


def test_default_source_stays_in_range(catalog):
    service = JobMarketService(catalog)
    for _ in range(20):
        assert MIN_OPENINGS <= service.trends("Content Writer").job_openings <= MAX_OPENINGS
