"""
Core functionality for assessment generation and candidate analysis.
"""

from assessment_ai.core.client import GeminiClient, GeminiSettings
from assessment_ai.core.retry import with_retry
from assessment_ai.core.parser import parse_structured
from assessment_ai.core.generator import AssessmentGenerator
from assessment_ai.core.analyzer import CandidateAnalyzer

__all__ = [
    "GeminiClient",
    "GeminiSettings",
    "with_retry",
    "parse_structured",
    "AssessmentGenerator",
    "CandidateAnalyzer",
]
