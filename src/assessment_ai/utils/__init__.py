"""
Utility helpers.
"""

from assessment_ai.utils.env_loader import load_env

__all__ = ["load_env"]
