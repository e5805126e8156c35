"""
Unit tests for analysis models (analysis_models.py).

Tests cover:
- Field constraints
- camelCase aliases
- Topic performance percentages
"""
import pytest
from pydantic import ValidationError

from assessment_ai.models.analysis_models import (
    AnalysisResult,
    CandidateAnswer,
    Recommendation,
    Strength,
    TopicPerformance,
    Weakness,
)


@pytest.mark.unit
class TestAnalysisModels:
    """Test analysis models."""

    def test_candidate_answer_aliases(self):
        answer = CandidateAnswer.model_validate({
            "questionId": "q1",
            "question": "Q",
            "candidateAnswer": ["a", "b"],
            "correctAnswer": ["a", "b"],
            "isCorrect": True,
            "points": 10,
            "earnedPoints": 10,
            "topic": "SQL",
            "difficulty": "medium",
        })

        assert answer.question_id == "q1"
        assert answer.candidate_answer == ["a", "b"]
        assert answer.earned_points == 10

    def test_strength_score_range(self):
        with pytest.raises(ValidationError):
            Strength(topic="x", score=101)

    def test_weakness_defaults(self):
        weakness = Weakness(topic="SQL", score=30)

        assert weakness.improvement_suggestions == []
        assert weakness.model_dump(by_alias=True)["improvementSuggestions"] == []

    def test_recommendation_priority(self):
        with pytest.raises(ValidationError):
            Recommendation(priority="urgent")

    def test_analysis_result_requires_local_numbers(self):
        with pytest.raises(ValidationError):
            AnalysisResult(summary="s", readiness_score=50)

    def test_analysis_result_readiness_range(self):
        with pytest.raises(ValidationError):
            AnalysisResult(overall_score=50, percentile=40, summary="s", readiness_score=150)

    def test_topic_performance_percentage(self):
        assert TopicPerformance(points=15, max_points=20).percentage == 75.0
        assert TopicPerformance().percentage == 0.0
