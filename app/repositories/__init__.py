from .attempt_repository import AttemptRepository
from .quiz_repository import QuizRepository
from .user_repository import UserRepository

__all__ = ["AttemptRepository", "QuizRepository", "UserRepository"]
