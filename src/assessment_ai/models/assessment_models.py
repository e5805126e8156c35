"""
Pydantic models for AI-generated assessments.
"""
from typing import Any, ClassVar, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

QuestionType = Literal["multiple_choice", "true_false", "code", "essay"]
QuestionDifficulty = Literal["easy", "medium", "hard"]
TestDifficulty = Literal["easy", "medium", "hard", "mixed"]

# Single value, or a list for multi-select answers
AnswerValue = Union[str, bool, int, float, List[Any]]


class TestQuestion(BaseModel):
    """Represents a single assessment question."""
    __test__: ClassVar[bool] = False
    model_config = ConfigDict(frozen=True)

    question: str = Field(description="The question text")
    type: QuestionType = Field(
        default="multiple_choice",
        description="One of multiple_choice, true_false, code, essay")
    options: List[str] = Field(
        default_factory=list,
        description="Answer options for choice-based questions")
    correct_answer: AnswerValue = Field(
        default="",
        description="The correct answer, or a list of answers for multi-select")
    explanation: str = Field(
        default="",
        description="Why the correct answer is correct")
    difficulty: QuestionDifficulty = Field(
        default="medium",
        description="Difficulty tag: easy, medium or hard")
    topic: str = Field(
        default="General",
        description="The specific topic or skill being tested")
    points: int = Field(
        default=10,
        gt=0,
        description="Point value of the question")


class GenerateTestParams(BaseModel):
    """Inputs for generating a new assessment."""
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True)

    job_title: str
    job_description: str
    skills: List[str] = Field(min_length=1)
    difficulty: TestDifficulty = "medium"
    question_count: int = 10
    topics: Optional[List[str]] = None
    include_code: bool = False
    include_essay: bool = False


class AdditionalQuestionsParams(BaseModel):
    """Inputs for extending an existing assessment."""
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True)

    question_count: int
    job_title: Optional[str] = None
    skills: Optional[List[str]] = None
    difficulty: Optional[TestDifficulty] = None


class TestMetadata(BaseModel):
    """Aggregates derived from the final question list."""
    __test__: ClassVar[bool] = False
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True)

    total_points: int
    estimated_duration: int = Field(description="Estimated duration in minutes")
    topic_distribution: Dict[str, int] = Field(default_factory=dict)


class GeneratedTestResult(BaseModel):
    """A generated assessment and its locally computed metadata."""
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True)

    questions: List[TestQuestion]
    metadata: TestMetadata


class StoredQuestion(BaseModel):
    """A question as persisted by the caller and read back for scoring."""
    model_config = ConfigDict(frozen=True)

    id: str
    question_text: str
    question_type: QuestionType = "multiple_choice"
    options: List[str] = Field(default_factory=list)
    correct_answer: AnswerValue = ""
    explanation: Optional[str] = None
    points: int = 10
    order_index: int = 0
