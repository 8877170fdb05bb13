"""Task 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, field_validator
from typing import Literal, Optional
from datetime import date

TaskPriority = Literal["low", "medium", "high"]

DEFAULT_COLUMN = "todo"
DEFAULT_PRIORITY = "medium"


class TaskCreate(BaseModel):
    title: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    column_id: str = DEFAULT_COLUMN
    priority: TaskPriority = DEFAULT_PRIORITY
    assignee: Optional[str] = None
    due_date: Optional[date] = None

    # 빈 문자열이나 null은 기본값으로 채운다.
    @field_validator("column_id", mode="before")
    @classmethod
    def _default_column(cls, value):
        return value or DEFAULT_COLUMN

    @field_validator("priority", mode="before")
    @classmethod
    def _default_priority(cls, value):
        return value or DEFAULT_PRIORITY


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    column_id: Optional[str] = None
    priority: Optional[TaskPriority] = None
    assignee: Optional[str] = None
    due_date: Optional[date] = None
