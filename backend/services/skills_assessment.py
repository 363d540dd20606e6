"""Static skills-assessment question bank, keyed by domain."""

from models.responses import Question

_QUESTIONS: dict[str, list[dict]] = {
    "technology": [
        {
            "id": "tech-1",
            "question": "How comfortable are you with programming concepts?",
            "type": "scale",
            "scale": {
                "min": 1,
                "max": 5,
                "labels": ["Never tried", "Basic understanding", "Comfortable", "Advanced", "Expert"],
            },
        },
        {
            "id": "tech-2",
            "question": "Which programming languages have you worked with?",
            "type": "multiple-choice",
            "options": ["Python", "Java", "JavaScript", "C++", "C#", "Go", "None"],
        },
        {
            "id": "tech-3",
            "question": "How do you prefer to solve complex problems?",
            "type": "single-choice",
            "options": ["Break into smaller parts", "Research similar solutions", "Collaborate with others", "Trial and error"],
        },
    ],
    "business": [
        {
            "id": "biz-1",
            "question": "How comfortable are you with data analysis and spreadsheets?",
            "type": "scale",
            "scale": {"min": 1, "max": 5, "labels": ["Never used", "Basic", "Comfortable", "Advanced", "Expert"]},
        },
        {
            "id": "biz-2",
            "question": "Which business areas interest you most?",
            "type": "multiple-choice",
            "options": ["Marketing", "Sales", "Finance", "Operations", "Strategy", "Human Resources"],
        },
    ],
    "creative": [
        {
            "id": "creative-1",
            "question": "Which creative tools have you used?",
            "type": "multiple-choice",
            "options": ["Photoshop", "Illustrator", "Figma", "Canva", "Video editing software", "None"],
        },
        {
            "id": "creative-2",
            "question": "How do you approach creative projects?",
            "type": "single-choice",
            "options": [
                "Start with inspiration and mood boards",
                "Research and analyze examples",
                "Dive right in and iterate",
                "Plan thoroughly before creating",
            ],
        },
    ],
}

QUESTION_BANK: dict[str, tuple[Question, ...]] = {
    domain: tuple(Question.model_validate(q) for q in questions)
    for domain, questions in _QUESTIONS.items()
}


def domains() -> list[str]:
    return list(QUESTION_BANK)


def skills_assessment_questions(domain: str) -> list[Question]:
    """Questions for a domain key; unknown keys yield an empty list."""
    return list(QUESTION_BANK.get(domain, ()))
