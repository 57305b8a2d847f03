"""Shared test configuration and fixtures."""

import copy

import pytest

SAMPLE_RESUME = """John Doe
john.doe@email.com | 555-123-4567
linkedin.com/in/johndoe | github.com/johndoe

Summary
Software engineer with 6 years building web applications in Python and React.js.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
• Developed REST APIs in Python serving 1M requests per day
• Led a migration to Docker and Kubernetes, reduced deploy time by 40%
• Implemented machine learning features with 25 production models

Software Engineer | StartupXYZ | 2019 - 2021
• Created React.js frontend components used by 300 customers
• Optimized PostgreSQL queries, improved latency by 35%

Education
B.S. Computer Science | State University | 2019

Skills
Python, React.js, Node.js, Docker, Kubernetes, PostgreSQL, Git
"""

SAMPLE_JD = """Senior Python Developer

We are looking for a Python developer with strong React.js and Docker skills.
Requirements:
- Python and Django for backend services
- React.js frontend development
- Docker, Kubernetes and AWS deployment
- Machine learning experience is a plus
- Project management and communication
"""

AI_PAYLOAD = {
    "keywordAnalysis": {
        "matched": ["python", "Docker"],
        "missing": ["django", "AWS"],
        "relevanceScore": 78,
    },
    "atsScore": {
        "overall": 82,
        "breakdown": {"formatting": 90, "keywords": 75, "structure": 85, "contact": 100},
    },
    "strengths": ["Strong Python background"],
    "weaknesses": ["No AWS experience listed"],
    "recommendations": [
        {
            "priority": "high",
            "category": "keywords",
            "title": "Mention Django",
            "description": "Add Django projects to your experience section",
            "example": "Built Django REST services",
        }
    ],
    "aiEnhancedSuggestions": [
        {
            "type": "bullet",
            "original": "Developed REST APIs",
            "improved": "Developed Django REST APIs serving 1M requests per day",
            "explanation": "Adds a missing keyword",
        }
    ],
}


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd() -> str:
    return SAMPLE_JD


@pytest.fixture
def ai_payload() -> dict:
    return copy.deepcopy(AI_PAYLOAD)
