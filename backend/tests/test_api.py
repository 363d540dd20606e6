from fastapi.testclient import TestClient

from api.dependencies import get_job_market, get_matcher
from main import app
from services.career_catalog import get_catalog
from services.job_market import JobMarketService

client = TestClient(app)


def _profile_payload(**overrides):
    payload = {
        "personalDetails": {
            "fullName": "Asha Rao",
            "currentStage": "undergraduate",
            "location": "Bangalore",
        },
        "interests": ["Technology & Programming"],
        "strengths": ["Programming", "Problem Solving"],
        "motivations": ["Growth"],
        "workPreferences": {"environment": "Remote", "workLifeBalance": "Balanced"},
        "personalityProfile": {
            "primaryTraits": ["Analytical"],
            "workStyle": "Detail-oriented and thorough",
            "communicationStyle": "Written",
        },
    }
    payload.update(overrides)
    return payload


class _FixedRandom:
    def randint(self, a, b):
        return 500


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["careers"] == 9
    assert data["categories"] == ["technology", "healthcare", "business", "creative"]
    assert data["assessmentDomains"] == ["technology", "business", "creative"]


def test_recommendations():
    response = client.post("/recommendations", json=_profile_payload())
    assert response.status_code == 200
    data = response.json()
    assert isinstance(data, list)
    assert 0 < len(data) <= 5

    top = data[0]
    assert top["career"]["title"] == "Software Developer"
    assert top["career"]["requiredSkills"][0] == "Programming"
    assert top["skillGaps"] == ["Database Management", "Version Control"]
    assert set(top["learningPath"]) == {"immediate", "shortTerm", "longTerm"}
    assert top["reasoning"].endswith(".")
    scores = [r["matchScore"] for r in data]
    assert scores == sorted(scores, reverse=True)


def test_recommendations_accept_snake_case():
    payload = {
        "personal_details": {"current_stage": "after-12th", "location": "Pune"},
        "strengths": ["Programming"],
    }
    response = client.post("/recommendations", json=payload)
    assert response.status_code == 200
    dev = next(r for r in response.json() if r["career"]["title"] == "Software Developer")
    assert dev["learningPath"]["longTerm"][0] == "Pursue Computer Science education"


def test_recommendations_empty_profile_returns_empty_list():
    payload = _profile_payload(interests=[], strengths=[], personalityProfile={})
    payload["personalDetails"]["location"] = "Unknown Town"
    response = client.post("/recommendations", json=payload)
    assert response.status_code == 200
    assert response.json() == []


def test_recommendations_require_personal_details():
    payload = _profile_payload()
    del payload["personalDetails"]
    response = client.post("/recommendations", json=payload)
    assert response.status_code == 400
    assert response.json()["detail"] == "User profile data is required"


def test_recommendations_accept_empty_personal_details():
    response = client.post(
        "/recommendations",
        json={"personalDetails": {}, "strengths": ["Programming"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert [r["career"]["title"] for r in data] == ["Software Developer"]
    assert data[0]["learningPath"]["longTerm"][0].startswith("Gain professional experience")


def test_recommendations_reject_null_personal_details():
    response = client.post("/recommendations", json=_profile_payload(personalDetails=None))
    assert response.status_code == 400


def test_recommendations_reject_missing_body():
    response = client.post("/recommendations")
    assert response.status_code == 400


def test_recommendations_reject_malformed_profile():
    response = client.post("/recommendations", json=_profile_payload(interests="coding"))
    assert response.status_code == 400


def test_recommendations_internal_failure():
    class BrokenMatcher:
        def recommend(self, profile):
            raise RuntimeError("boom")

    app.dependency_overrides[get_matcher] = lambda: BrokenMatcher()
    try:
        response = client.post("/recommendations", json=_profile_payload())
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate career recommendations"


def test_skills_assessment():
    response = client.get("/skills-assessment/technology")
    assert response.status_code == 200
    questions = response.json()
    assert [q["id"] for q in questions] == ["tech-1", "tech-2", "tech-3"]
    assert questions[0]["scale"]["max"] == 5
    assert "scale" not in questions[1]


def test_skills_assessment_unknown_domain():
    response = client.get("/skills-assessment/astrology")
    assert response.status_code == 200
    assert response.json() == []


def test_job_market_known_title():
    app.dependency_overrides[get_job_market] = lambda: JobMarketService(get_catalog(), rng=_FixedRandom())
    try:
        response = client.get("/job-market/UI%2FUX%20Designer")
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    trends = response.json()
    assert trends["jobOpenings"] == 500
    assert trends["topCompanies"][0] == "Zomato"
    assert trends["topSkillsInDemand"] == ["Design Tools", "User Research", "Prototyping", "Visual Design"]


def test_job_market_unknown_title():
    response = client.get("/job-market/Astronaut")
    assert response.status_code == 200
    assert response.json() == {
        "demandLevel": "High",
        "salaryTrend": "Increasing",
        "topSkillsInDemand": ["Communication", "Problem Solving"],
        "emergingTechnologies": [],
        "jobOpenings": 0,
        "topCompanies": [],
    }


def test_career_categories():
    response = client.get("/career-categories")
    assert response.status_code == 200
    categories = response.json()
    assert list(categories) == ["technology", "healthcare", "business", "creative"]
    assert categories["business"][1]["title"] == "Product Manager"
    assert categories["business"][1]["salaryRange"] == "₹8-35 LPA"


def test_skill_categories():
    response = client.get("/skill-categories")
    assert response.status_code == 200
    assert "Programming" in response.json()["technical"]


def test_profile_round_trip():
    created = client.post("/user/profile", json=_profile_payload())
    assert created.status_code == 200
    body = created.json()
    assert body["success"] is True
    profile_id = body["profileId"]

    fetched = client.get(f"/user/profile/{profile_id}")
    assert fetched.status_code == 200
    assert fetched.json()["personalDetails"]["fullName"] == "Asha Rao"

    updated = client.put(f"/user/profile/{profile_id}", json=_profile_payload(interests=["Design"]))
    assert updated.status_code == 200
    assert client.get(f"/user/profile/{profile_id}").json()["interests"] == ["Design"]


def test_profile_not_found():
    assert client.get("/user/profile/missing").status_code == 404
    assert client.put("/user/profile/missing", json=_profile_payload()).status_code == 404


def test_save_profile_requires_personal_details():
    response = client.post("/user/profile", json={"interests": ["Design"]})
    assert response.status_code == 400
