"""
AI Candidate Analyzer.

Turns a scored answer set into a Gemini analysis prompt and combines
the model's qualitative assessment with a locally computed score and
percentile.
"""
import json
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from assessment_ai import config, prompts
from assessment_ai.core.client import GeminiClient, GeminiSettings
from assessment_ai.core.normalizer import normalize_analysis, normalize_learning_path
from assessment_ai.core.parser import parse_structured
from assessment_ai.core.retry import with_retry
from assessment_ai.models.analysis_models import (
    AnalysisResult,
    AnalyzeCandidateParams,
    CandidateAnswer,
    LearningPath,
    TopicPerformance,
    Weakness,
)

logger = logging.getLogger(__name__)


def calculate_score_percentage(earned_points: float, total_points: float) -> float:
    """Percentage of points earned; 0 when the test carries no points."""
    if total_points <= 0:
        return 0.0
    return earned_points / total_points * 100


def estimate_percentile(score: float) -> int:
    for minimum, percentile in config.PERCENTILE_STEPS:
        if score >= minimum:
            return percentile
    return config.FLOOR_PERCENTILE


def summarize_topics(answers: Sequence[CandidateAnswer]) -> Dict[str, TopicPerformance]:
    """Group answers by topic, counting correctness and points."""
    performance: Dict[str, TopicPerformance] = {}
    for answer in answers:
        stats = performance.setdefault(answer.topic, TopicPerformance())
        stats.total += 1
        stats.max_points += answer.points
        stats.points += answer.earned_points
        if answer.is_correct:
            stats.correct += 1
    return performance


def _format_answer(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def build_analysis_prompt(params: AnalyzeCandidateParams) -> str:
    """
    Render the analysis prompt.

    Only incorrect answers are included in full; correct ones are
    represented by the per-topic totals.
    """
    topic_summary = "\n".join(
        prompts.TOPIC_LINE.format(
            topic=topic,
            correct=stats.correct,
            total=stats.total,
            percentage=stats.percentage,
        )
        for topic, stats in summarize_topics(params.answers).items()
    )

    incorrect_answers = "\n\n".join(
        prompts.INCORRECT_ANSWER_BLOCK.format(
            question=answer.question,
            candidate_answer=_format_answer(answer.candidate_answer),
            correct_answer=_format_answer(answer.correct_answer),
            topic=answer.topic,
        )
        for answer in params.answers
        if not answer.is_correct
    )

    if params.test_duration > 0:
        time_efficiency = params.actual_duration / params.test_duration * 100
    else:
        time_efficiency = 0.0

    return prompts.CANDIDATE_ANALYSIS_PROMPT.format(
        job_title=params.job_title,
        candidate_name=params.candidate_name,
        earned_points=params.earned_points,
        total_points=params.total_points,
        score_percentage=calculate_score_percentage(params.earned_points, params.total_points),
        time_efficiency=time_efficiency,
        actual_duration=params.actual_duration,
        test_duration=params.test_duration,
        question_count=len(params.answers),
        topic_summary=topic_summary,
        incorrect_answers=incorrect_answers or prompts.NO_INCORRECT_ANSWERS,
    )


def build_learning_path_prompt(weaknesses: Sequence[Weakness], target_role: str) -> str:
    weakness_topics = ", ".join(f"{w.topic} (score: {w.score:g}%)" for w in weaknesses)
    return prompts.LEARNING_PATH_PROMPT.format(
        target_role=target_role,
        weakness_topics=weakness_topics,
    )


class CandidateAnalyzer:
    """Analyze candidate test performance with Gemini."""

    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        settings: Optional[GeminiSettings] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the analyzer.

        Args:
            client: Transport client. If not provided, one is built from settings.
            settings: Client settings. If not provided, read from the environment.
            sleep: Wait function used between rate-limited retries.
        """
        self.client = client or GeminiClient(settings)
        self.sleep = sleep

    def _call(self, prompt: str, profile: str, response_mime_type: Optional[str] = None) -> str:
        settings = self.client.settings
        return with_retry(
            lambda: self.client.generate_content(prompt, profile, response_mime_type=response_mime_type),
            retries=settings.retry_count,
            initial_delay=settings.retry_initial_delay,
            sleep=self.sleep,
        )

    def analyze_candidate_performance(
        self,
        params: Union[AnalyzeCandidateParams, Mapping[str, Any]]
    ) -> AnalysisResult:
        """
        Analyze a candidate's performance and generate insights.

        Args:
            params: Candidate, role, scored answers, points and durations

        Returns:
            AnalysisResult whose overall score and percentile are computed locally

        Raises:
            UpstreamError, MalformedResponseError, ParseError
        """
        if not isinstance(params, AnalyzeCandidateParams):
            params = AnalyzeCandidateParams.model_validate(params)

        logger.info(
            "Analyzing %s for '%s' (%d answers)",
            params.candidate_name, params.job_title, len(params.answers),
        )
        response_text = self._call(
            build_analysis_prompt(params), "candidateAnalysis",
            response_mime_type="application/json",
        )
        parsed = parse_structured(response_text)

        overall_score = calculate_score_percentage(params.earned_points, params.total_points)
        return normalize_analysis(
            parsed,
            overall_score=overall_score,
            percentile=estimate_percentile(overall_score),
        )

    def generate_quick_feedback(
        self,
        question: str,
        candidate_answer: Any,
        correct_answer: Any,
        is_correct: bool
    ) -> str:
        """
        Short constructive feedback for a single answer.

        Correct answers get a fixed message without calling the model.
        """
        if is_correct:
            return config.CORRECT_FEEDBACK

        prompt = prompts.QUICK_FEEDBACK_PROMPT.format(
            question=question,
            candidate_answer=candidate_answer if isinstance(candidate_answer, str)
            else _format_answer(candidate_answer),
            correct_answer=correct_answer if isinstance(correct_answer, str)
            else _format_answer(correct_answer),
        )
        return self._call(prompt, "quickResponse").strip()

    def generate_learning_path(
        self,
        weaknesses: Sequence[Union[Weakness, Mapping[str, Any]]],
        target_role: str
    ) -> LearningPath:
        """
        Turn a list of weaknesses into a 3-phase study plan.

        Args:
            weaknesses: Weaknesses from a previous analysis
            target_role: Role the candidate is preparing for

        Returns:
            LearningPath with Foundation, Intermediate and Advanced phases
        """
        weaknesses = [
            w if isinstance(w, Weakness) else Weakness.model_validate(w)
            for w in weaknesses
        ]
        response_text = self._call(
            build_learning_path_prompt(weaknesses, target_role), "candidateAnalysis",
            response_mime_type="application/json",
        )
        return normalize_learning_path(parse_structured(response_text))


def analyze_candidate_performance(
    params: Union[AnalyzeCandidateParams, Mapping[str, Any]],
    client: Optional[GeminiClient] = None
) -> AnalysisResult:
    """Analyze a candidate with a default-configured analyzer."""
    return CandidateAnalyzer(client=client).analyze_candidate_performance(params)
