"""Timeline/Calendar 기능 API 라우터입니다."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from projex.database import get_db
from projex.schemas.account import MessageResponse
from projex.schemas.event import CalendarEventCreate, CalendarEventUpdate, TimelineEventCreate, TimelineEventUpdate
from projex.schemas.project import ProjectOut
from projex.services import event_service
from projex.services.event_service import CALENDAR, TIMELINE
from projex.middleware.auth_middleware import get_current_account
from projex.models.account import Account

router = APIRouter(prefix="/api/projects/{project_id}", tags=["events"])


@router.post("/timeline", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def add_timeline_event(
    project_id: str,
    data: TimelineEventCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return event_service.add_event(db, project_id, TIMELINE, data, current_account)


@router.put("/timeline/{event_id}", response_model=ProjectOut)
def update_timeline_event(
    project_id: str,
    event_id: str,
    data: TimelineEventUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return event_service.update_event(db, project_id, TIMELINE, event_id, data, current_account)


@router.delete("/timeline/{event_id}", response_model=MessageResponse)
def delete_timeline_event(
    project_id: str,
    event_id: str,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    event_service.delete_event(db, project_id, TIMELINE, event_id, current_account)
    return {"message": "Timeline event deleted successfully"}


@router.post("/calendar", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def add_calendar_event(
    project_id: str,
    data: CalendarEventCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return event_service.add_event(db, project_id, CALENDAR, data, current_account)


@router.put("/calendar/{event_id}", response_model=ProjectOut)
def update_calendar_event(
    project_id: str,
    event_id: str,
    data: CalendarEventUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return event_service.update_event(db, project_id, CALENDAR, event_id, data, current_account)


@router.delete("/calendar/{event_id}", response_model=MessageResponse)
def delete_calendar_event(
    project_id: str,
    event_id: str,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    event_service.delete_event(db, project_id, CALENDAR, event_id, current_account)
    return {"message": "Calendar event deleted successfully"}
