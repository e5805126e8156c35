"""
AI Test Generator.

Builds an assessment prompt from job parameters, asks Gemini for a
question list, normalizes the questions and computes the test metadata
locally (total points, estimated duration, topic distribution).
"""
import json
import logging
import os
import time
from collections import Counter
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from assessment_ai import config, prompts
from assessment_ai.core.client import GeminiClient, GeminiSettings
from assessment_ai.core.normalizer import normalize_questions
from assessment_ai.core.parser import parse_structured
from assessment_ai.core.retry import with_retry
from assessment_ai.models.assessment_models import (
    AdditionalQuestionsParams,
    GeneratedTestResult,
    GenerateTestParams,
    TestMetadata,
    TestQuestion,
)
from assessment_ai.utils.env_loader import load_env

logger = logging.getLogger(__name__)

PROFILE = "testGeneration"


def allowed_question_types(params: GenerateTestParams) -> List[str]:
    question_types = ["multiple_choice", "true_false"]
    if params.include_code:
        question_types.append("code")
    if params.include_essay:
        question_types.append("essay")
    return question_types


def build_test_generation_prompt(params: GenerateTestParams) -> str:
    """Render the generation prompt for a new assessment."""
    if params.topics:
        topics_text = prompts.TOPICS_FOCUS_TEXT.format(topics=", ".join(params.topics))
    else:
        topics_text = prompts.TOPICS_BROAD_TEXT

    if params.difficulty == "mixed":
        difficulty_text = prompts.MIXED_DIFFICULTY_TEXT
    else:
        difficulty_text = prompts.SINGLE_DIFFICULTY_TEXT.format(difficulty=params.difficulty)

    return prompts.TEST_GENERATION_PROMPT.format(
        job_title=params.job_title,
        job_description=params.job_description,
        skills=", ".join(params.skills),
        difficulty=params.difficulty,
        question_count=params.question_count,
        topics_text=topics_text,
        question_types=", ".join(allowed_question_types(params)),
        difficulty_text=difficulty_text,
    )


def build_additional_questions_prompt(
    existing_questions: Sequence[TestQuestion],
    params: AdditionalQuestionsParams
) -> str:
    """Render the prompt asking for questions that avoid the existing ones."""
    context_lines = []
    if params.job_title:
        context_lines.append(f"Job Title: {params.job_title}")
    if params.skills:
        context_lines.append(f"Skills: {', '.join(params.skills)}")
    if params.difficulty:
        context_lines.append(f"Difficulty: {params.difficulty}")

    sample = existing_questions[:config.MAX_EXISTING_QUESTIONS_IN_PROMPT]
    return prompts.ADDITIONAL_QUESTIONS_PROMPT.format(
        question_count=params.question_count,
        existing_topics=", ".join(q.topic for q in existing_questions),
        existing_questions="\n".join(q.question for q in sample),
        context_lines="\n".join(context_lines),
    )


def compute_metadata(questions: Sequence[TestQuestion]) -> TestMetadata:
    """Derive total points, duration and topic histogram from the questions."""
    return TestMetadata(
        total_points=sum(q.points for q in questions),
        estimated_duration=len(questions) * config.MINUTES_PER_QUESTION,
        topic_distribution=dict(Counter(q.topic for q in questions)),
    )


class AssessmentGenerator:
    """Generate technical assessment tests with Gemini."""

    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        settings: Optional[GeminiSettings] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the generator.

        Args:
            client: Transport client. If not provided, one is built from settings.
            settings: Client settings. If not provided, read from the environment.
            sleep: Wait function used between rate-limited retries.
        """
        self.client = client or GeminiClient(settings)
        self.sleep = sleep

    def _generate(self, prompt: str) -> Any:
        settings = self.client.settings
        response_text = with_retry(
            lambda: self.client.generate_content(
                prompt, PROFILE, response_mime_type="application/json"),
            retries=settings.retry_count,
            initial_delay=settings.retry_initial_delay,
            sleep=self.sleep,
        )
        return parse_structured(response_text)

    def generate_test(
        self,
        params: Union[GenerateTestParams, Mapping[str, Any]]
    ) -> GeneratedTestResult:
        """
        Generate a technical assessment.

        Args:
            params: Job parameters (title, description, skills, difficulty, ...)

        Returns:
            GeneratedTestResult with normalized questions and local metadata

        Raises:
            UpstreamError, MalformedResponseError, ParseError
        """
        if not isinstance(params, GenerateTestParams):
            params = GenerateTestParams.model_validate(params)

        logger.info(
            "Generating %d %s questions for '%s'",
            params.question_count, params.difficulty, params.job_title,
        )
        parsed = self._generate(build_test_generation_prompt(params))
        questions = normalize_questions(parsed)

        if len(questions) != params.question_count:
            logger.warning(
                "Requested %d questions, model returned %d",
                params.question_count, len(questions),
            )

        return GeneratedTestResult(
            questions=questions,
            metadata=compute_metadata(questions),
        )

    def generate_additional_questions(
        self,
        existing_questions: Sequence[TestQuestion],
        params: Union[AdditionalQuestionsParams, Mapping[str, Any]]
    ) -> List[TestQuestion]:
        """
        Generate more questions for an existing test.

        Duplicates are discouraged through the prompt only; nothing here
        filters them out.

        Args:
            existing_questions: Questions already in the test
            params: Question count and optional job context

        Returns:
            List of normalized TestQuestion objects
        """
        if not isinstance(params, AdditionalQuestionsParams):
            params = AdditionalQuestionsParams.model_validate(params)

        logger.info(
            "Generating %d additional questions (%d existing)",
            params.question_count, len(existing_questions),
        )
        parsed = self._generate(build_additional_questions_prompt(existing_questions, params))
        return normalize_questions(parsed)

    def save_to_file(self, result: GeneratedTestResult, output_file: Optional[Union[str, Path]] = None) -> Path:
        """
        Save a generated test to a JSON file.

        Args:
            result: GeneratedTestResult to save
            output_file: Output file path (defaults to output/generated_test.json)

        Returns:
            Path of the written file
        """
        if output_file is None:
            output_file = Path(config.OUTPUT_DIR) / config.TEST_OUTPUT_FILE

        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(result.model_dump(by_alias=True), f,
                      indent=2, ensure_ascii=False)

        logger.info("Saved generated test to %s", output_path)
        return output_path

    def display_summary(self, result: GeneratedTestResult):
        """
        Print a summary of a generated test.

        Args:
            result: GeneratedTestResult to summarize
        """
        metadata = result.metadata

        print("\n" + "="*70)
        print("GENERATED TEST SUMMARY")
        print("="*70)

        print(f"\nTotal Questions: {len(result.questions)}")
        print(f"Total Points: {metadata.total_points}")
        print(f"Estimated Duration: {metadata.estimated_duration} minutes")
        print("\nTopics:")
        for topic, count in metadata.topic_distribution.items():
            print(f"  • {topic}: {count} question(s)")

        if result.questions:
            q = result.questions[0]
            print("\n" + "-"*70)
            print("SAMPLE QUESTION")
            print("-"*70)
            print(f"\n[{q.type}, {q.difficulty}, {q.points} pts] {q.topic}")
            print(f"\nQuestion: {q.question}")
            if q.options:
                print("\nOptions:")
                for i, option in enumerate(q.options, 1):
                    marker = "✓" if option == q.correct_answer else " "
                    print(f"  {marker} {i}. {option}")
            print(f"\nExplanation: {q.explanation}")

        print("\n" + "="*70 + "\n")


def generate_test(
    params: Union[GenerateTestParams, Mapping[str, Any]],
    client: Optional[GeminiClient] = None
) -> GeneratedTestResult:
    """Generate a test with a default-configured generator."""
    return AssessmentGenerator(client=client).generate_test(params)


def generate_additional_questions(
    existing_questions: Sequence[TestQuestion],
    params: Union[AdditionalQuestionsParams, Mapping[str, Any]],
    client: Optional[GeminiClient] = None
) -> List[TestQuestion]:
    """Generate additional questions with a default-configured generator."""
    return AssessmentGenerator(client=client).generate_additional_questions(
        existing_questions, params)


def main():
    """Generate a sample assessment and save it to the output directory."""
    print("="*70)
    print("AI TECHNICAL ASSESSMENT GENERATOR")
    print("="*70 + "\n")

    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    load_env()

    if not os.environ.get(config.API_KEY_ENV_VAR):
        print(f"ERROR: {config.API_KEY_ENV_VAR} environment variable not set.")
        print(f"Please set it using: export {config.API_KEY_ENV_VAR}='your-api-key'")
        return

    params = GenerateTestParams(
        job_title=os.environ.get("JOB_TITLE", "Backend Python Developer"),
        job_description=os.environ.get(
            "JOB_DESCRIPTION",
            "Build and maintain REST APIs, data pipelines and integrations."),
        skills=[s.strip() for s in os.environ.get("JOB_SKILLS", "Python, SQL, REST APIs").split(",")
                if s.strip()],
        difficulty=os.environ.get("TEST_DIFFICULTY", "mixed"),
        question_count=int(os.environ.get("QUESTION_COUNT", "10")),
    )

    try:
        generator = AssessmentGenerator()
        print(f"Generating {params.question_count} questions for: {params.job_title}")
        print("This may take a few moments...\n")

        result = generator.generate_test(params)
        generator.display_summary(result)
        output_path = generator.save_to_file(result)

        print(f"✓ Test saved to: {output_path}")

    except Exception as e:
        print(f"\n✗ ERROR: {e}")
        import traceback
        traceback.print_exc()


if __name__ == "__main__":
    main()
