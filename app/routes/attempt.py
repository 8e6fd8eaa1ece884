from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import ForbiddenError, InternalError, NotFoundError
from app.core.security import RequestContext, get_request_context
from app.schemas.attempt import AttemptRequest, AttemptResponse
from app.services.attempt import AttemptService
from app.services.notification import NotificationService, get_notification_service

router = APIRouter(tags=["attempt"])


@router.post(
    "/quizzes/{quiz_id}/attempt",
    response_model=AttemptResponse,
    status_code=status.HTTP_201_CREATED,
)
def submit_attempt(
    quiz_id: int,
    request: AttemptRequest,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
    notifier: NotificationService = Depends(get_notification_service),
):
    """
    Submit answers for a quiz

    The attempt is graded and stored. E-mail/SMS notifications are queued on
    the request's background tasks and run after the response is sent.
    Answers are keyed by question ID; unanswered questions count as wrong.
    """
    try:
        service = AttemptService(db, notifier)
        return service.submit_attempt(context, quiz_id, request.answers)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InternalError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.get(
    "/results/{attempt_id}",
    response_model=AttemptResponse,
    status_code=status.HTTP_200_OK,
)
def get_attempt_result(
    attempt_id: int,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Get the result of one of the caller's own attempts"""
    try:
        service = AttemptService(db)
        return service.get_attempt_result(context, attempt_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except InternalError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )
