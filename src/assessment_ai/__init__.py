"""
Assessment AI.

A Python package for generating technical skill assessments and
analysing candidate results with Google Gemini.
"""

__version__ = "1.0.0"
__author__ = "Assessment AI Development Team"

from assessment_ai.core.generator import AssessmentGenerator
from assessment_ai.core.analyzer import CandidateAnalyzer

__all__ = [
    "AssessmentGenerator",
    "CandidateAnalyzer",
]
