from dataclasses import dataclass
from typing import Iterable, Mapping


@dataclass(frozen=True)
class ScoreResult:
    """Correctness tallies for one answer set against one question set"""

    correct_answers: int
    total_questions: int
    percentage: float


def score(questions: Iterable, answers: Mapping[int, int]) -> ScoreResult:
    """
    Score an answer set against a quiz's questions.

    A question is correct only when the answer for its id equals its
    ``correct_option_index``. Unanswered questions count as wrong, answers for
    unknown question ids are ignored and out-of-range indices are simply wrong.
    A quiz without questions scores 0.0.
    """
    total = 0
    correct = 0
    for question in questions:
        total += 1
        if answers.get(question.id) == question.correct_option_index:
            correct += 1

    percentage = (correct * 100.0) / total if total > 0 else 0.0
    return ScoreResult(correct_answers=correct, total_questions=total, percentage=percentage)
