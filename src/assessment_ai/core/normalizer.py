"""
Normalization of loosely-typed model output into validated records.

Model responses are only instructed, not guaranteed, to follow the
requested JSON shape. Every per-field default lives here so the policy
is visible in one place:

Questions
    type -> multiple_choice, options -> [], difficulty -> medium,
    topic -> General, points -> 5/10/15 by difficulty,
    explanation -> "", correct_answer -> "".
    Entries without question text are dropped.

Analysis
    strengths/weaknesses/recommendations -> [], summary -> fixed
    fallback, detailed feedback -> summary, skill level -> intermediate,
    readiness -> rounded overall score. Overall score and percentile
    are always supplied by the caller, never read from the model.

Anything that still fails validation raises ParseError.
"""
import json
import logging
import math
from typing import Any, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from assessment_ai import config
from assessment_ai.errors import ParseError
from assessment_ai.models.analysis_models import (
    AnalysisResult,
    LearningPath,
    LearningPhase,
    Recommendation,
    Strength,
    Weakness,
)
from assessment_ai.models.assessment_models import TestQuestion

logger = logging.getLogger(__name__)

QUESTION_TYPES = ("multiple_choice", "true_false", "code", "essay")
DIFFICULTIES = ("easy", "medium", "hard")
SKILL_LEVELS = ("beginner", "intermediate", "advanced", "expert")
PRIORITIES = ("high", "medium", "low")


def _dump(raw: Any) -> str:
    return json.dumps(raw, default=str, ensure_ascii=False)


def _get(raw: Mapping[str, Any], *keys: str) -> Any:
    """First non-None value among camelCase/snake_case spellings."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any, default: str = "") -> str:
    if value is None:
        return default
    text = value.strip() if isinstance(value, str) else str(value).strip()
    return text or default


def _choice(value: Any, allowed: Iterable[str], default: str, field: str) -> str:
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in allowed:
            return candidate
    if value not in (None, ""):
        logger.warning("Unexpected %s %r, using %r", field, value, default)
    return default


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            number = float(value.strip().rstrip("%"))
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return None


def _clamp_score(value: Any, default: float = 0.0) -> float:
    number = _number(value)
    if number is None:
        return default
    return min(100.0, max(0.0, number))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [_text(item) for item in value if item is not None and _text(item)]


def _mappings(value: Any, field: str) -> List[Mapping[str, Any]]:
    if value is None:
        return []
    if not isinstance(value, list):
        logger.warning("Expected a list for %s, got %s", field, type(value).__name__)
        return []
    items = [item for item in value if isinstance(item, Mapping)]
    if len(items) != len(value):
        logger.warning("Dropped %d non-object entries from %s", len(value) - len(items), field)
    return items


# ============================================================================
# QUESTIONS
# ============================================================================

def default_points(difficulty: str) -> int:
    return config.POINTS_BY_DIFFICULTY.get(
        difficulty, config.POINTS_BY_DIFFICULTY[config.DEFAULT_DIFFICULTY])


def normalize_question(raw: Mapping[str, Any]) -> Optional[TestQuestion]:
    """
    Fill defaults for one raw question.

    Returns:
        TestQuestion, or None when the entry has no question text

    Raises:
        ParseError: The entry cannot be turned into a valid question
    """
    question_text = _text(raw.get("question"))
    if not question_text:
        logger.warning("Dropping generated question without text: %s", _dump(raw))
        return None

    difficulty = _choice(raw.get("difficulty"), DIFFICULTIES,
                         config.DEFAULT_DIFFICULTY, "difficulty")
    points = _number(raw.get("points"))
    points = round_half_up(points) if points is not None else 0
    if points <= 0:
        points = default_points(difficulty)

    correct_answer = _get(raw, "correct_answer", "correctAnswer")

    try:
        return TestQuestion(
            question=question_text,
            type=_choice(raw.get("type"), QUESTION_TYPES,
                         config.DEFAULT_QUESTION_TYPE, "question type"),
            options=_string_list(raw.get("options")),
            correct_answer="" if correct_answer is None else correct_answer,
            explanation=_text(raw.get("explanation")),
            difficulty=difficulty,
            topic=_text(raw.get("topic"), config.DEFAULT_TOPIC),
            points=points,
        )
    except ValidationError as e:
        raise ParseError(f"Invalid generated question: {e}", raw_text=_dump(raw)) from e


def extract_question_list(parsed: Any) -> List[Any]:
    """Accept either a bare JSON array or an object with a questions key."""
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, Mapping):
        questions = parsed.get("questions")
        if questions is None:
            return []
        if isinstance(questions, list):
            return questions
    raise ParseError("AI response does not contain a question list", raw_text=_dump(parsed))


def normalize_questions(parsed: Any) -> List[TestQuestion]:
    """Normalize every question in a parsed generation response."""
    questions = []
    for raw in _mappings(extract_question_list(parsed), "questions"):
        question = normalize_question(raw)
        if question is not None:
            questions.append(question)
    return questions


# ============================================================================
# ANALYSIS
# ============================================================================

def _normalize_strength(raw: Mapping[str, Any]) -> Optional[Strength]:
    topic = _text(raw.get("topic"))
    if not topic:
        return None
    return Strength(
        topic=topic,
        score=_clamp_score(raw.get("score")),
        description=_text(raw.get("description")),
    )


def _normalize_weakness(raw: Mapping[str, Any]) -> Optional[Weakness]:
    topic = _text(raw.get("topic"))
    if not topic:
        return None
    return Weakness(
        topic=topic,
        score=_clamp_score(raw.get("score")),
        description=_text(raw.get("description")),
        improvement_suggestions=_string_list(
            _get(raw, "improvementSuggestions", "improvement_suggestions")),
    )


def _normalize_recommendation(raw: Mapping[str, Any]) -> Optional[Recommendation]:
    title = _text(raw.get("title"))
    description = _text(raw.get("description"))
    if not title and not description:
        return None
    return Recommendation(
        priority=_choice(raw.get("priority"), PRIORITIES,
                         config.DEFAULT_RECOMMENDATION_PRIORITY, "priority"),
        category=_text(raw.get("category")),
        title=title,
        description=description,
        resources=_string_list(raw.get("resources")),
    )


def normalize_analysis(
    parsed: Any,
    overall_score: float,
    percentile: int
) -> AnalysisResult:
    """
    Build an AnalysisResult from parsed model output.

    Args:
        parsed: Decoded model response
        overall_score: Locally computed percentage score
        percentile: Locally computed percentile

    Returns:
        AnalysisResult with defaults applied

    Raises:
        ParseError: The response is not a JSON object
    """
    if not isinstance(parsed, Mapping):
        raise ParseError("AI analysis response is not a JSON object", raw_text=_dump(parsed))

    strengths = [s for s in map(_normalize_strength,
                                _mappings(parsed.get("strengths"), "strengths")) if s]
    weaknesses = [w for w in map(_normalize_weakness,
                                 _mappings(parsed.get("weaknesses"), "weaknesses")) if w]
    recommendations = [r for r in map(_normalize_recommendation,
                                      _mappings(parsed.get("recommendations"), "recommendations")) if r]

    model_summary = _text(parsed.get("summary"))
    readiness = _number(_get(parsed, "readinessScore", "readiness_score"))
    if readiness is None:
        readiness = overall_score

    try:
        return AnalysisResult(
            overall_score=overall_score,
            percentile=percentile,
            strengths=strengths,
            weaknesses=weaknesses,
            recommendations=recommendations,
            summary=model_summary or config.DEFAULT_SUMMARY,
            detailed_feedback=_text(
                _get(parsed, "detailedFeedback", "detailed_feedback"), model_summary),
            estimated_skill_level=_choice(
                _get(parsed, "estimatedSkillLevel", "estimated_skill_level"),
                SKILL_LEVELS, config.DEFAULT_SKILL_LEVEL, "skill level"),
            readiness_score=round_half_up(min(100.0, max(0.0, readiness))),
        )
    except ValidationError as e:
        raise ParseError(f"Invalid analysis response: {e}", raw_text=_dump(parsed)) from e


# ============================================================================
# LEARNING PATH
# ============================================================================

def normalize_learning_path(parsed: Any) -> LearningPath:
    """Build a LearningPath, numbering phases that lack a phase number."""
    if not isinstance(parsed, Mapping):
        raise ParseError("AI learning path response is not a JSON object", raw_text=_dump(parsed))

    phases = []
    for index, raw in enumerate(_mappings(parsed.get("phases"), "phases"), start=1):
        number = _number(raw.get("phase"))
        phase_number = int(number) if number is not None else index
        phases.append(LearningPhase(
            phase=phase_number,
            title=_text(raw.get("title"), f"Phase {phase_number}"),
            duration=_text(raw.get("duration")),
            topics=_string_list(raw.get("topics")),
            resources=_string_list(raw.get("resources")),
            milestones=_string_list(raw.get("milestones")),
        ))
    return LearningPath(phases=phases)
