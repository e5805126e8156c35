"""
Configuration file for the Assessment AI core.

Modify these values to customize generation and scoring behavior.
"""
from assessment_ai.models.profile_models import GenerationProfile

# Model Configuration
MODEL_NAME = "gemini-2.0-flash-exp"
API_KEY_ENV_VAR = "GEMINI_API_KEY"
MODEL_ENV_VAR = "GEMINI_MODEL"

# Generation profiles, keyed by call purpose
GENERATION_PROFILES = {
    "testGeneration": GenerationProfile(
        temperature=0.9,
        top_p=0.95,
        top_k=40,
        max_output_tokens=8192,
    ),
    "candidateAnalysis": GenerationProfile(
        temperature=0.4,
        top_p=0.8,
        top_k=20,
        max_output_tokens=4096,
    ),
    "quickResponse": GenerationProfile(
        temperature=0.7,
        top_p=0.9,
        top_k=30,
        max_output_tokens=2048,
    ),
}
DEFAULT_PROFILE = "quickResponse"

# Content safety thresholds sent with every request
SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"
SAFETY_CATEGORIES = [
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
]

# Retry Configuration
RETRY_COUNT = 3
RETRY_INITIAL_DELAY_SECONDS = 1.0

# Output Configuration
OUTPUT_DIR = "output"
TEST_OUTPUT_FILE = "generated_test.json"

# Test Generation Settings
DEFAULT_QUESTION_TYPE = "multiple_choice"
DEFAULT_DIFFICULTY = "medium"
DEFAULT_TOPIC = "General"
POINTS_BY_DIFFICULTY = {
    "easy": 5,
    "medium": 10,
    "hard": 15,
}
MINUTES_PER_QUESTION = 2
MAX_EXISTING_QUESTIONS_IN_PROMPT = 5

# Candidate Analysis Settings
DEFAULT_SUMMARY = "Analysis completed."
DEFAULT_SKILL_LEVEL = "intermediate"
DEFAULT_RECOMMENDATION_PRIORITY = "medium"
CORRECT_FEEDBACK = "Correct! Well done."

# (minimum score, percentile) steps, checked top-down
PERCENTILE_STEPS = [
    (90, 95),
    (80, 85),
    (70, 70),
    (60, 55),
    (50, 40),
    (40, 25),
]
FLOOR_PERCENTILE = 10

# Scoring helpers
DEFAULT_CANDIDATE_NAME = "Candidate"
DEFAULT_JOB_TITLE = "Position"
DEFAULT_TEST_DURATION_MINUTES = 60
TOPIC_PREFIX_MAX_LENGTH = 30
