"""
Scoring helpers that turn stored questions and raw submissions into
the analyzer's input.
"""
import json
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Union

from assessment_ai import config
from assessment_ai.core.normalizer import round_half_up
from assessment_ai.models.analysis_models import AnalyzeCandidateParams, CandidateAnswer
from assessment_ai.models.assessment_models import StoredQuestion


def answers_match(candidate_answer: Any, correct_answer: Any) -> bool:
    """
    Strict comparison of a submission against the correct answer.

    Values are compared by their JSON encoding, so ``1`` does not match
    ``"1"`` and list order matters.
    """
    return json.dumps(candidate_answer) == json.dumps(correct_answer)


def extract_topic(explanation: Optional[str]) -> str:
    """
    Read a topic label from an explanation such as ``"SQL: Joins ..."``.

    Falls back to General when there is no short prefix before a colon.
    """
    if not explanation:
        return config.DEFAULT_TOPIC

    colon_index = explanation.find(":")
    if 0 < colon_index < config.TOPIC_PREFIX_MAX_LENGTH:
        return explanation[:colon_index].strip()

    return config.DEFAULT_TOPIC


def infer_difficulty(points: int) -> str:
    if points <= config.POINTS_BY_DIFFICULTY["easy"]:
        return "easy"
    if points <= config.POINTS_BY_DIFFICULTY["medium"]:
        return "medium"
    return "hard"


def build_candidate_answers(
    questions: Iterable[Union[StoredQuestion, Mapping[str, Any]]],
    submissions: Mapping[str, Any]
) -> List[CandidateAnswer]:
    """
    Score each stored question against the candidate's submissions.

    Args:
        questions: Questions in test order
        submissions: Mapping of question id to submitted answer

    Returns:
        One CandidateAnswer per question; unanswered questions score zero
    """
    answers = []
    for question in questions:
        if not isinstance(question, StoredQuestion):
            question = StoredQuestion.model_validate(question)

        submitted = submissions.get(question.id)
        if submitted is None:
            submitted = ""
        is_correct = answers_match(submitted, question.correct_answer)

        answers.append(CandidateAnswer(
            question_id=question.id,
            question=question.question_text,
            candidate_answer=submitted,
            correct_answer=question.correct_answer,
            is_correct=is_correct,
            points=question.points,
            earned_points=question.points if is_correct else 0,
            topic=extract_topic(question.explanation),
            difficulty=infer_difficulty(question.points),
        ))
    return answers


def elapsed_minutes(started_at: datetime, completed_at: Optional[datetime] = None) -> int:
    """Whole minutes between start and completion (or now, if still running)."""
    if completed_at is None:
        completed_at = datetime.now(started_at.tzinfo)
    seconds = (completed_at - started_at).total_seconds()
    return round_half_up(seconds / 60)


def build_analysis_params(
    questions: Sequence[Union[StoredQuestion, Mapping[str, Any]]],
    submissions: Mapping[str, Any],
    started_at: datetime,
    completed_at: Optional[datetime] = None,
    total_points: Optional[int] = None,
    candidate_name: Optional[str] = None,
    job_title: Optional[str] = None,
    test_duration: Optional[int] = None
) -> AnalyzeCandidateParams:
    """
    Assemble analyzer input from a stored test result.

    Args:
        questions: Stored questions in test order
        submissions: Mapping of question id to submitted answer
        started_at: When the candidate started
        completed_at: When the candidate finished, if they did
        total_points: Test total; defaults to the sum of question points
        candidate_name: Defaults to "Candidate"
        job_title: Defaults to "Position"
        test_duration: Allotted minutes; defaults to 60

    Returns:
        AnalyzeCandidateParams ready for CandidateAnalyzer
    """
    answers = build_candidate_answers(questions, submissions)
    if total_points is None:
        total_points = sum(a.points for a in answers)

    return AnalyzeCandidateParams(
        candidate_name=candidate_name or config.DEFAULT_CANDIDATE_NAME,
        job_title=job_title or config.DEFAULT_JOB_TITLE,
        answers=answers,
        total_points=total_points,
        earned_points=sum(a.earned_points for a in answers),
        test_duration=test_duration or config.DEFAULT_TEST_DURATION_MINUTES,
        actual_duration=elapsed_minutes(started_at, completed_at),
    )
