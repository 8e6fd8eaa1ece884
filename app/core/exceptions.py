class QuizAppError(Exception):
    """Base class for errors raised by the quiz services"""


class NotFoundError(QuizAppError):
    """A user, quiz or attempt could not be resolved"""

    def __init__(self, resource: str, identifier=None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource.capitalize()} not found")


class ForbiddenError(QuizAppError):
    """The caller is not allowed to perform the operation"""


class CodecError(QuizAppError):
    """Answer set text could not be encoded or decoded"""


class InternalError(QuizAppError):
    """Stored data failed an integrity check"""
