from .attempt import Attempt
from .quiz import Difficulty, Question, Quiz
from .user import User, UserRole

__all__ = ["Attempt", "Difficulty", "Question", "Quiz", "User", "UserRole"]
