import logging
import math
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ForbiddenError, NotFoundError
from app.core.logging import log_service_call
from app.core.security import RequestContext
from app.models.quiz import Difficulty, Quiz
from app.models.user import UserRole
from app.repositories.quiz_repository import QuizRepository
from app.repositories.user_repository import UserRepository
from app.schemas.quiz import (
    DifficultyEnum,
    QuestionCreate,
    QuestionResponse,
    QuizCreate,
    QuizPageResponse,
    QuizResponse,
)

logger = logging.getLogger(__name__)


class QuizService:
    def __init__(self, db: Session):
        self.db = db
        self.quiz_repository = QuizRepository(db)
        self.user_repository = UserRepository(db)

    def _require_admin(self, context: RequestContext) -> None:
        """Only administrators may author quizzes"""
        user = self.user_repository.get_by_username(context.username)
        if not user:
            raise NotFoundError("user", context.username)
        if user.role != UserRole.ADMIN:
            logger.warning(f"⚠️ User {context.username} tried to author a quiz without ADMIN role")
            raise ForbiddenError("Only administrators can manage quizzes")

    @staticmethod
    def _to_response(quiz: Quiz, with_questions: bool = False) -> QuizResponse:
        questions = []
        if with_questions:
            questions = [
                QuestionResponse(id=q.id, text=q.text, options=list(q.options or []))
                for q in quiz.questions
            ]
        return QuizResponse(
            id=quiz.id,
            title=quiz.title,
            category=quiz.category,
            difficulty=DifficultyEnum(quiz.difficulty.value),
            created_at=quiz.created_at,
            questions=questions,
        )

    @log_service_call
    def create_quiz(self, context: RequestContext, quiz: QuizCreate) -> QuizResponse:
        """Create an empty quiz"""
        self._require_admin(context)

        db_quiz = self.quiz_repository.create(
            {
                "title": quiz.title,
                "category": quiz.category,
                "difficulty": Difficulty(quiz.difficulty.value),
            }
        )
        logger.info(f"✅ Quiz created with ID: {db_quiz.id}")
        return self._to_response(db_quiz, with_questions=True)

    @log_service_call
    def add_questions(
        self, context: RequestContext, quiz_id: int, questions: List[QuestionCreate]
    ) -> QuizResponse:
        """Append questions to an existing quiz"""
        self._require_admin(context)

        quiz = self.quiz_repository.get_for_update(quiz_id)
        if not quiz:
            raise NotFoundError("quiz", quiz_id)

        quiz = self.quiz_repository.add_questions(
            quiz,
            [
                {
                    "text": q.text,
                    "options": list(q.options),
                    "correct_option_index": q.correct_option_index,
                }
                for q in questions
            ],
        )
        logger.info(f"✅ Added {len(questions)} questions to quiz {quiz_id}")
        return self._to_response(quiz, with_questions=True)

    @log_service_call
    def get_quizzes(
        self,
        category: Optional[str] = None,
        difficulty: Optional[DifficultyEnum] = None,
        page: int = 0,
        size: Optional[int] = None,
    ) -> QuizPageResponse:
        """List quizzes (without questions), optionally filtered"""
        if size is None:
            size = settings.QUIZ_PAGE_SIZE_DEFAULT
        if page < 0:
            raise ValueError("page must be >= 0")
        if size < 1 or size > settings.QUIZ_PAGE_SIZE_MAX:
            raise ValueError(f"size must be between 1 and {settings.QUIZ_PAGE_SIZE_MAX}")

        quizzes, total = self.quiz_repository.get_page(
            category=category,
            difficulty=Difficulty(difficulty.value) if difficulty else None,
            skip=page * size,
            limit=size,
        )
        return QuizPageResponse(
            content=[self._to_response(q) for q in quizzes],
            page=page,
            size=size,
            total_elements=total,
            total_pages=math.ceil(total / size) if total else 0,
        )

    @log_service_call
    def get_quiz(self, quiz_id: int) -> QuizResponse:
        """Get a quiz with its questions, hiding the correct answers"""
        quiz = self.quiz_repository.get_by_id(quiz_id)
        if not quiz:
            raise NotFoundError("quiz", quiz_id)
        return self._to_response(quiz, with_questions=True)
