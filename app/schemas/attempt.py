from datetime import datetime
from typing import Dict

from pydantic import BaseModel, Field


class AttemptRequest(BaseModel):
    answers: Dict[int, int] = Field(
        ..., description="Selected option index (0-based) keyed by question ID"
    )


class AttemptResponse(BaseModel):
    id: int = Field(..., description="Attempt ID")
    quiz_id: int = Field(..., description="ID of the attempted quiz")
    quiz_title: str = Field(..., description="Title of the attempted quiz")
    score: float = Field(..., description="Score in percent (0.0 - 100.0)")
    total_questions: int = Field(..., description="Number of questions in the quiz")
    correct_answers: int = Field(..., description="Number of correctly answered questions")
    submitted_at: datetime = Field(..., description="Server-side submission time")
    user_answers: Dict[int, int] = Field(
        ..., description="Submitted option index keyed by question ID"
    )
