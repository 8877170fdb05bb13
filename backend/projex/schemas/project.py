"""Project 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional
from datetime import date, datetime
from projex.schemas.items import CalendarItem, DepartmentItem, TaskItem, TimelineItem

ProjectPriority = Literal["Low", "Medium", "High"]


class TaskStats(BaseModel):
    completed: int = 0
    total: int = 0


class ProjectBase(BaseModel):
    name: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    color: Optional[str] = None
    priority: ProjectPriority = "Medium"


class ProjectCreate(ProjectBase):
    tasks: List[TaskItem] = Field(default_factory=list)
    columns: List[Dict[str, Any]] = Field(default_factory=list)
    timeline: List[TimelineItem] = Field(default_factory=list)
    calendar: List[CalendarItem] = Field(default_factory=list)
    team: List[DepartmentItem] = Field(default_factory=list)


class ProjectUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    color: Optional[str] = None
    priority: Optional[ProjectPriority] = None
    tasks: Optional[List[TaskItem]] = None
    columns: Optional[List[Dict[str, Any]]] = None
    timeline: Optional[List[TimelineItem]] = None
    calendar: Optional[List[CalendarItem]] = None
    team: Optional[List[DepartmentItem]] = None


class ProjectOut(ProjectBase):
    project_id: str
    owner_id: int
    progress: int
    task_stats: TaskStats
    tasks: List[Dict[str, Any]] = Field(default_factory=list)
    columns: List[Dict[str, Any]] = Field(default_factory=list)
    timeline: List[Dict[str, Any]] = Field(default_factory=list)
    calendar: List[Dict[str, Any]] = Field(default_factory=list)
    team: List[Dict[str, Any]] = Field(default_factory=list)
    version: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
