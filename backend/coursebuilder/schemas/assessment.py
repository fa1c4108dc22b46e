from pydantic import Field

from coursebuilder.schemas.common import CamelModel


class AssessmentQuestion(CamelModel):
    question_id: str
    correct_answer_index: int
    prompt: str = ""
    options: list[str] = Field(default_factory=list)


class AssessmentScore(CamelModel):
    correct: int
    total: int
    percentage: int
    passed: bool
