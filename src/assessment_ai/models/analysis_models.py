"""
Pydantic models for candidate performance analysis.
"""
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from assessment_ai.models.assessment_models import AnswerValue

SkillLevel = Literal["beginner", "intermediate", "advanced", "expert"]
Priority = Literal["high", "medium", "low"]

_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CandidateAnswer(BaseModel):
    """One answered question, already scored."""
    model_config = _CONFIG

    question_id: str
    question: str
    candidate_answer: AnswerValue
    correct_answer: AnswerValue
    is_correct: bool
    points: int
    earned_points: int
    topic: str = "General"
    difficulty: str = "medium"


class AnalyzeCandidateParams(BaseModel):
    """Inputs for analysing a candidate's test result."""
    model_config = _CONFIG

    candidate_name: str
    job_title: str
    answers: List[CandidateAnswer]
    total_points: int
    earned_points: int
    test_duration: int = Field(description="Allotted duration in minutes")
    actual_duration: int = Field(description="Actual duration in minutes")


class TopicPerformance(BaseModel):
    """Correctness and points for one topic."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    correct: int = 0
    total: int = 0
    points: int = 0
    max_points: int = 0

    @property
    def percentage(self) -> float:
        if not self.max_points:
            return 0.0
        return self.points / self.max_points * 100


class Strength(BaseModel):
    """An area where the candidate performed well."""
    model_config = _CONFIG

    topic: str
    score: float = Field(ge=0.0, le=100.0)
    description: str = ""


class Weakness(BaseModel):
    """An area needing improvement."""
    model_config = _CONFIG

    topic: str
    score: float = Field(ge=0.0, le=100.0)
    description: str = ""
    improvement_suggestions: List[str] = Field(default_factory=list)


class Recommendation(BaseModel):
    """A prioritized, actionable recommendation."""
    model_config = _CONFIG

    priority: Priority = "medium"
    category: str = ""
    title: str = ""
    description: str = ""
    resources: List[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Complete analysis of a candidate's performance."""
    model_config = _CONFIG

    overall_score: float = Field(
        description="Percentage score computed from earned and total points")
    percentile: int = Field(
        description="Estimated percentile computed from the overall score")
    strengths: List[Strength] = Field(default_factory=list)
    weaknesses: List[Weakness] = Field(default_factory=list)
    recommendations: List[Recommendation] = Field(default_factory=list)
    summary: str
    detailed_feedback: str = ""
    estimated_skill_level: SkillLevel = "intermediate"
    readiness_score: int = Field(ge=0, le=100)


class LearningPhase(BaseModel):
    """One phase of a learning path."""
    model_config = _CONFIG

    phase: int
    title: str
    duration: str = ""
    topics: List[str] = Field(default_factory=list)
    resources: List[str] = Field(default_factory=list)
    milestones: List[str] = Field(default_factory=list)


class LearningPath(BaseModel):
    """A phased study plan addressing a candidate's weaknesses."""
    model_config = _CONFIG

    phases: List[LearningPhase] = Field(default_factory=list)
