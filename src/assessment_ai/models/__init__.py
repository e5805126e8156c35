"""
Data models for assessment generation and candidate analysis.
"""

from assessment_ai.models.profile_models import GenerationProfile
from assessment_ai.models.assessment_models import (
    TestQuestion,
    GenerateTestParams,
    AdditionalQuestionsParams,
    TestMetadata,
    GeneratedTestResult,
    StoredQuestion,
)
from assessment_ai.models.analysis_models import (
    CandidateAnswer,
    AnalyzeCandidateParams,
    TopicPerformance,
    Strength,
    Weakness,
    Recommendation,
    AnalysisResult,
    LearningPhase,
    LearningPath,
)

__all__ = [
    "GenerationProfile",
    "TestQuestion",
    "GenerateTestParams",
    "AdditionalQuestionsParams",
    "TestMetadata",
    "GeneratedTestResult",
    "StoredQuestion",
    "CandidateAnswer",
    "AnalyzeCandidateParams",
    "TopicPerformance",
    "Strength",
    "Weakness",
    "Recommendation",
    "AnalysisResult",
    "LearningPhase",
    "LearningPath",
]
