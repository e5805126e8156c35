"""
Pytest configuration and shared fixtures for Assessment AI tests.

This module provides reusable fixtures for model instances, mocked
Gemini responses and a transport client that never touches the network.
"""
import json
import tempfile
from pathlib import Path
from typing import List
from unittest.mock import MagicMock, Mock

import pytest

from assessment_ai.core.client import GeminiClient, GeminiSettings
from assessment_ai.models.analysis_models import AnalyzeCandidateParams, CandidateAnswer
from assessment_ai.models.assessment_models import (
    GenerateTestParams,
    StoredQuestion,
    TestQuestion,
)


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


# ============================================================================
# ENVIRONMENT FIXTURES
# ============================================================================

@pytest.fixture
def mock_env_vars(monkeypatch, tmp_path):
    """Mock environment variables for testing, with no .env file in reach."""
    monkeypatch.chdir(tmp_path)
    test_api_key = "test-gemini-api-key-12345"
    monkeypatch.setenv("GEMINI_API_KEY", test_api_key)
    monkeypatch.setenv("GEMINI_MODEL", "")
    monkeypatch.delenv("GEMINI_MODEL")
    return {"GEMINI_API_KEY": test_api_key}


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clean environment with no API key set."""
    monkeypatch.chdir(tmp_path)
    # set first so teardown removes anything a .env file loads later
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ============================================================================
# MOCK GOOGLE AI API FIXTURES
# ============================================================================

def make_response(text):
    """Build a mock generate_content response carrying text."""
    response = Mock()
    response.text = text
    return response


@pytest.fixture
def mock_genai_client():
    """Create a mock Google GenAI client."""
    client = MagicMock()
    client.models = MagicMock()
    client.models.generate_content = MagicMock()
    return client


@pytest.fixture
def settings() -> GeminiSettings:
    return GeminiSettings(api_key="test-key", retry_initial_delay=1.0)


@pytest.fixture
def gemini_client(settings, mock_genai_client) -> GeminiClient:
    """Transport client wired to the mock GenAI client."""
    return GeminiClient(settings=settings, client=mock_genai_client)


@pytest.fixture
def sleeps() -> List[float]:
    """Records delays requested by the retry wrapper."""
    return []


@pytest.fixture
def fake_sleep(sleeps):
    return sleeps.append


# ============================================================================
# MODEL FIXTURES - Test generation
# ============================================================================

@pytest.fixture
def sample_params() -> GenerateTestParams:
    return GenerateTestParams(
        job_title="Backend Developer",
        job_description="Build and maintain REST APIs in Python",
        skills=["Python", "SQL"],
        difficulty="mixed",
        question_count=3,
    )


@pytest.fixture
def sample_questions() -> List[TestQuestion]:
    return [
        TestQuestion(
            question="What does GIL stand for?",
            type="multiple_choice",
            options=["Global Interpreter Lock", "General Input Loop",
                     "Global Import List", "Garbage Index Lock"],
            correct_answer="Global Interpreter Lock",
            explanation="The GIL serializes bytecode execution.",
            difficulty="easy",
            topic="Python",
            points=5,
        ),
        TestQuestion(
            question="A LEFT JOIN keeps unmatched rows from the left table.",
            type="true_false",
            options=["True", "False"],
            correct_answer="True",
            explanation="LEFT JOIN preserves all left rows.",
            difficulty="medium",
            topic="SQL",
            points=10,
        ),
    ]


@pytest.fixture
def generation_payload() -> dict:
    """Raw model output for a three-question test."""
    return {
        "questions": [
            {
                "question": "What is a Python decorator?",
                "type": "multiple_choice",
                "options": ["A function wrapper", "A class", "A module", "A loop"],
                "correct_answer": "A function wrapper",
                "explanation": "Decorators wrap callables.",
                "difficulty": "easy",
                "topic": "Python",
                "points": 5,
            },
            {
                "question": "Which SQL clause filters grouped rows?",
                "type": "multiple_choice",
                "options": ["WHERE", "HAVING", "ORDER BY", "LIMIT"],
                "correct_answer": "HAVING",
                "explanation": "HAVING applies after GROUP BY.",
                "difficulty": "medium",
                "topic": "SQL",
                "points": 10,
            },
            {
                "question": "Explain database indexing trade-offs.",
                "type": "essay",
                "correct_answer": "Faster reads, slower writes, more storage.",
                "explanation": "Indexes cost write throughput and space.",
                "difficulty": "hard",
                "topic": "SQL",
                "points": 15,
            },
        ],
        "metadata": {"totalPoints": 999, "estimatedDuration": 1},
    }


# ============================================================================
# MODEL FIXTURES - Candidate analysis
# ============================================================================

@pytest.fixture
def half_correct_answers() -> List[CandidateAnswer]:
    """Two of four answers correct, 10 points each."""
    rows = [
        ("q1", "Python", True),
        ("q2", "Python", False),
        ("q3", "SQL", True),
        ("q4", "SQL", False),
    ]
    return [
        CandidateAnswer(
            question_id=qid,
            question=f"Question {qid}",
            candidate_answer="A" if correct else "B",
            correct_answer="A",
            is_correct=correct,
            points=10,
            earned_points=10 if correct else 0,
            topic=topic,
            difficulty="medium",
        )
        for qid, topic, correct in rows
    ]


@pytest.fixture
def analysis_params(half_correct_answers) -> AnalyzeCandidateParams:
    return AnalyzeCandidateParams(
        candidate_name="Jordan Lee",
        job_title="Backend Developer",
        answers=half_correct_answers,
        total_points=40,
        earned_points=20,
        test_duration=60,
        actual_duration=45,
    )


@pytest.fixture
def analysis_payload() -> dict:
    """Raw model output for a candidate analysis."""
    return {
        "strengths": [
            {"topic": "Python", "score": 80, "description": "Solid fundamentals"},
        ],
        "weaknesses": [
            {
                "topic": "SQL",
                "score": 40,
                "description": "Struggles with aggregation",
                "improvementSuggestions": ["Practice GROUP BY", "Study HAVING"],
            },
        ],
        "recommendations": [
            {
                "priority": "high",
                "category": "Learning",
                "title": "SQL aggregation",
                "description": "Work through aggregation exercises",
                "resources": ["SQLBolt"],
            },
        ],
        "summary": "A promising candidate with gaps in SQL.",
        "detailedFeedback": "Python answers were strong; SQL needs work.",
        "estimatedSkillLevel": "intermediate",
        "readinessScore": 62,
        "overallScore": 99,
        "percentile": 99,
    }


@pytest.fixture
def stored_questions() -> List[StoredQuestion]:
    return [
        StoredQuestion(id="q1", question_text="Pick A", correct_answer="A",
                       explanation="Python: basics", points=5),
        StoredQuestion(id="q2", question_text="Pick both", question_type="multiple_choice",
                       correct_answer=["A", "C"], explanation="SQL: joins", points=10),
        StoredQuestion(id="q3", question_text="Is it true?", question_type="true_false",
                       correct_answer="True", explanation=None, points=15),
    ]


def as_json(payload) -> str:
    return json.dumps(payload)
