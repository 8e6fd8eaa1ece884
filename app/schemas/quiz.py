from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, validator


class DifficultyEnum(str, Enum):
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class QuizCreate(BaseModel):
    title: str = Field(..., description="Quiz title", min_length=1, max_length=255)
    category: str = Field(..., description="Quiz category", min_length=1, max_length=100)
    difficulty: DifficultyEnum = Field(..., description="Quiz difficulty")

    @validator("title", "category")
    def validate_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("Value cannot be blank")
        return v.strip()


class QuestionCreate(BaseModel):
    text: str = Field(..., description="Question text", min_length=1)
    options: List[str] = Field(..., description="Answer options in display order", min_length=1)
    correct_option_index: int = Field(
        ..., description="0-based index of the correct option", ge=0
    )

    @validator("text")
    def validate_text(cls, v):
        if not v.strip():
            raise ValueError("Question text cannot be blank")
        return v.strip()

    @validator("correct_option_index")
    def validate_correct_option_index(cls, v, values):
        options = values.get("options")
        if options is not None and v >= len(options):
            raise ValueError(
                f"correct_option_index {v} is out of range for {len(options)} options"
            )
        return v


class QuestionResponse(BaseModel):
    # The correct option index is never exposed here
    id: int
    text: str
    options: List[str]


class QuizResponse(BaseModel):
    id: int
    title: str
    category: str
    difficulty: DifficultyEnum
    created_at: Optional[datetime] = None
    questions: List[QuestionResponse] = Field(default_factory=list)


class QuizPageResponse(BaseModel):
    content: List[QuizResponse]
    page: int
    size: int
    total_elements: int
    total_pages: int
