from typing import Optional

from sqlalchemy.orm import Session, joinedload

from app.models.attempt import Attempt
from app.models.quiz import Quiz


class AttemptRepository:
    """
    Repository for Attempt rows.

    Attempts are write-once, so rows are only ever inserted and read.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, attempt_id: int) -> Optional[Attempt]:
        """Get an attempt with its owner, quiz and the quiz's current questions"""
        return (
            self.db.query(Attempt)
            .options(
                joinedload(Attempt.user),
                joinedload(Attempt.quiz).selectinload(Quiz.questions),
            )
            .filter(Attempt.id == attempt_id)
            .first()
        )

    def create(self, attempt_data: dict) -> Attempt:
        """Persist a new attempt and commit the surrounding transaction"""
        db_attempt = Attempt(**attempt_data)
        self.db.add(db_attempt)
        self.db.commit()
        self.db.refresh(db_attempt)
        return db_attempt
