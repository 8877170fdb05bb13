"""Timeline/Calendar 이벤트 요청 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional


class TimelineEventCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    timestamp: Optional[float] = None


class TimelineEventUpdate(TimelineEventCreate):
    pass


class CalendarEventCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None


class CalendarEventUpdate(CalendarEventCreate):
    pass
