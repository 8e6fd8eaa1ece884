from .attempt import AttemptService
from .notification import NotificationService
from .quiz import QuizService

__all__ = ["AttemptService", "NotificationService", "QuizService"]
