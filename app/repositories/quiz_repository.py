from typing import List, Optional, Tuple

from sqlalchemy.orm import Session, selectinload

from app.models.quiz import Difficulty, Question, Quiz


class QuizRepository:
    """Repository for Quiz database operations following DDD pattern"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, quiz_id: int) -> Optional[Quiz]:
        """Get a quiz with its questions loaded"""
        return (
            self.db.query(Quiz)
            .options(selectinload(Quiz.questions))
            .filter(Quiz.id == quiz_id)
            .first()
        )

    def get_for_scoring(self, quiz_id: int) -> Optional[Quiz]:
        """
        Get a quiz for grading, holding a shared row lock until the transaction ends.

        Question authoring takes an exclusive lock on the same row, so the
        question set cannot change while an attempt is being scored.
        """
        return (
            self.db.query(Quiz)
            .options(selectinload(Quiz.questions))
            .filter(Quiz.id == quiz_id)
            .with_for_update(read=True)
            .first()
        )

    def get_for_update(self, quiz_id: int) -> Optional[Quiz]:
        """Get a quiz holding an exclusive row lock"""
        return (
            self.db.query(Quiz)
            .options(selectinload(Quiz.questions))
            .filter(Quiz.id == quiz_id)
            .with_for_update()
            .first()
        )

    def create(self, quiz_data: dict) -> Quiz:
        """Create a new quiz entry"""
        db_quiz = Quiz(**quiz_data)
        self.db.add(db_quiz)
        self.db.commit()
        self.db.refresh(db_quiz)
        return db_quiz

    def add_questions(self, quiz: Quiz, questions_data: List[dict]) -> Quiz:
        """Append questions to a quiz"""
        for question_data in questions_data:
            quiz.questions.append(Question(**question_data))
        self.db.commit()
        self.db.refresh(quiz)
        return quiz

    def get_page(
        self,
        category: Optional[str] = None,
        difficulty: Optional[Difficulty] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Tuple[List[Quiz], int]:
        """Get quizzes matching the optional filters, plus the total match count"""
        query = self.db.query(Quiz)
        if category is not None:
            query = query.filter(Quiz.category == category)
        if difficulty is not None:
            query = query.filter(Quiz.difficulty == difficulty)

        total = query.count()
        quizzes = query.order_by(Quiz.id).offset(skip).limit(limit).all()
        return quizzes, total
