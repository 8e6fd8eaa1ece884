from typing import Mapping

from app.domain.scoring import ScoreResult
from app.models.attempt import Attempt
from app.models.quiz import Quiz
from app.schemas.attempt import AttemptResponse


class AttemptDomain:
    """Domain logic for Attempt entities"""

    @staticmethod
    def to_response(
        attempt: Attempt,
        quiz: Quiz,
        result: ScoreResult,
        user_answers: Mapping[int, int],
    ) -> AttemptResponse:
        """
        Convert an Attempt row to AttemptResponse schema

        ``score`` always comes from the stored row; the tallies come from
        ``result``, which the caller computes against the quiz's questions.
        """
        return AttemptResponse(
            id=attempt.id,
            quiz_id=quiz.id,
            quiz_title=quiz.title,
            score=attempt.score,
            total_questions=result.total_questions,
            correct_answers=result.correct_answers,
            submitted_at=attempt.submitted_at,
            user_answers=dict(user_answers),
        )
