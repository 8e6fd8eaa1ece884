from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import ForbiddenError, NotFoundError
from app.core.security import RequestContext, get_request_context
from app.schemas.quiz import (
    DifficultyEnum,
    QuestionCreate,
    QuizCreate,
    QuizPageResponse,
    QuizResponse,
)
from app.services.quiz import QuizService

router = APIRouter(tags=["quiz"], prefix="/quizzes")


@router.post(
    "",
    response_model=QuizResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_quiz(
    request: QuizCreate,
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Create a quiz (ADMIN only)"""
    try:
        service = QuizService(db)
        return service.create_quiz(context, request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.post(
    "/{quiz_id}/questions",
    response_model=QuizResponse,
    status_code=status.HTTP_200_OK,
)
def add_questions_to_quiz(
    quiz_id: int,
    request: List[QuestionCreate],
    context: RequestContext = Depends(get_request_context),
    db: Session = Depends(get_db),
):
    """Append questions to a quiz (ADMIN only)"""
    try:
        service = QuizService(db)
        return service.add_questions(context, quiz_id, request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        )


@router.get(
    "",
    response_model=QuizPageResponse,
    status_code=status.HTTP_200_OK,
)
def get_quizzes(
    category: Optional[str] = None,
    difficulty: Optional[DifficultyEnum] = None,
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    """List quizzes, optionally filtered by category and difficulty"""
    try:
        service = QuizService(db)
        return service.get_quizzes(category, difficulty, page, size)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get(
    "/{quiz_id}",
    response_model=QuizResponse,
    status_code=status.HTTP_200_OK,
)
def get_quiz(quiz_id: int, db: Session = Depends(get_db)):
    """Get a quiz with its questions (correct answers are not included)"""
    try:
        service = QuizService(db)
        return service.get_quiz(quiz_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
