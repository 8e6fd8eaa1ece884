import logging
from typing import Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    CodecError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    QuizAppError,
)
from app.core.logging import log_service_call
from app.core.security import RequestContext
from app.domain import answer_codec
from app.domain.attempt_domain import AttemptDomain
from app.domain.scoring import score
from app.repositories.attempt_repository import AttemptRepository
from app.repositories.quiz_repository import QuizRepository
from app.repositories.user_repository import UserRepository
from app.schemas.attempt import AttemptResponse
from app.services.notification import NotificationService

logger = logging.getLogger(__name__)


class AttemptService:
    def __init__(self, db: Session, notifier: Optional[NotificationService] = None):
        self.db = db
        self.attempt_repository = AttemptRepository(db)
        self.quiz_repository = QuizRepository(db)
        self.user_repository = UserRepository(db)
        self.notifier = notifier

    @log_service_call
    def submit_attempt(
        self, context: RequestContext, quiz_id: int, answers: Mapping[int, int]
    ) -> AttemptResponse:
        """
        Grade and record one attempt, then notify the user in the background.

        Reading the quiz and inserting the attempt happen in a single
        transaction. The notification is scheduled only after the commit and
        its outcome never affects the returned result.
        """
        username = context.username
        logger.info(f"📝 User {username} attempting quiz {quiz_id}")

        try:
            user = self.user_repository.get_by_username(username)
            if not user:
                raise NotFoundError("user", username)

            quiz = self.quiz_repository.get_for_scoring(quiz_id)
            if not quiz:
                raise NotFoundError("quiz", quiz_id)

            quiz_title = quiz.title
            result = score(quiz.questions, answers)
            logger.info(
                f"🎯 User {username} scored {result.correct_answers}/{result.total_questions} "
                f"({result.percentage}%) on quiz '{quiz_title}'"
            )

            try:
                encoded_answers = answer_codec.encode(answers)
            except CodecError as e:
                logger.error(f"❌ Error encoding answers for quiz {quiz_id}: {e}")
                raise InternalError("Error processing answers") from e

            attempt = self.attempt_repository.create(
                {
                    "user_id": user.id,
                    "quiz_id": quiz.id,
                    "score": result.percentage,
                    "answers": encoded_answers,
                }
            )
        except (QuizAppError, SQLAlchemyError):
            # Nothing is persisted and the lock on the quiz row is released
            self.db.rollback()
            raise

        logger.info(f"✅ Quiz attempt saved with ID: {attempt.id}")

        if self.notifier is None:
            logger.warning(f"⚠️ No notifier configured, skipping notification for attempt {attempt.id}")
            return AttemptDomain.to_response(attempt, quiz, result, answers)

        try:
            self.notifier.send_quiz_attempt_notification(
                username, quiz_title, result.percentage
            )
        except Exception as e:
            logger.error(f"❌ Failed to schedule notification for attempt {attempt.id}: {e}")

        return AttemptDomain.to_response(attempt, quiz, result, answers)

    @log_service_call
    def get_attempt_result(self, context: RequestContext, attempt_id: int) -> AttemptResponse:
        """
        Return a stored attempt to its owner.

        The stored score is returned as recorded. Correct/total counts are
        re-derived from the quiz's current questions, so they can differ from
        the score if the quiz was edited after submission.
        """
        logger.info(f"🔍 Fetching attempt result for ID: {attempt_id}")

        attempt = self.attempt_repository.get_by_id(attempt_id)
        if not attempt:
            raise NotFoundError("attempt", attempt_id)

        owner = attempt.user.username
        if owner != context.username:
            logger.warning(
                f"⚠️ User {context.username} attempted to view attempt {attempt_id} "
                f"belonging to {owner}"
            )
            raise ForbiddenError("You can only view your own attempts")

        try:
            user_answers = answer_codec.decode(attempt.answers)
        except CodecError as e:
            logger.error(f"❌ Stored answers for attempt {attempt_id} are corrupt: {e}")
            raise InternalError("Error processing answers") from e

        result = score(attempt.quiz.questions, user_answers)
        return AttemptDomain.to_response(attempt, attempt.quiz, result, user_answers)
