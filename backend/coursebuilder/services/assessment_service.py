"""Assessment scoring.

Pure function over the question key and the learner's answers:
  correct    = answers matching the correct option index
  percentage = correct / total * 100, rounded half up
  passed     = percentage >= passing threshold (inclusive)
"""

from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal

from coursebuilder.schemas.assessment import AssessmentQuestion, AssessmentScore

DEFAULT_PASSING_THRESHOLD = 70


def score_assessment(
    questions: Sequence[AssessmentQuestion],
    answers: Mapping[str, int],
    passing_threshold: int = DEFAULT_PASSING_THRESHOLD,
) -> AssessmentScore:
    total = len(questions)
    if total == 0:
        return AssessmentScore(correct=0, total=0, percentage=0, passed=False)

    correct = sum(
        1 for q in questions
        if answers.get(q.question_id) == q.correct_answer_index
    )
    percentage = int(
        (Decimal(correct * 100) / Decimal(total)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    )
    return AssessmentScore(
        correct=correct,
        total=total,
        percentage=percentage,
        passed=percentage >= passing_threshold,
    )
