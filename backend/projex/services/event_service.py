"""Timeline/Calendar 이벤트 서비스 레이어입니다.

두 컬렉션은 구조가 같고 각자 독립적인 순번 식별자를 사용합니다.
"""

from sqlalchemy.orm import Session
from projex.exceptions import NotFoundError
from projex.models.account import Account
from projex.models.project import Project
from projex.services.project_service import get_owned_project, save_project
from projex.utils.helpers import find_index, merge_fields, next_sequential_id
from pydantic import BaseModel

TIMELINE = "timeline"
CALENDAR = "calendar"

EVENT_LABELS = {
    TIMELINE: "Timeline event",
    CALENDAR: "Calendar event",
}


def _find_event_index(events: list, event_id: str, collection: str) -> int:
    index = find_index(events, event_id)
    if index < 0:
        raise NotFoundError(f"{EVENT_LABELS[collection]} not found")
    return index


def add_event(db: Session, project_id: str, collection: str, data: BaseModel, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    events = getattr(project, collection) or []
    event = data.model_dump(mode="json")
    event["id"] = next_sequential_id(events)
    events.append(event)
    setattr(project, collection, events)
    return save_project(db, project, f"add_{collection}_event", collection)


def update_event(
    db: Session,
    project_id: str,
    collection: str,
    event_id: str,
    data: BaseModel,
    account: Account,
) -> Project:
    project = get_owned_project(db, project_id, account)
    events = getattr(project, collection) or []
    event = events[_find_event_index(events, event_id, collection)]
    merge_fields(event, data.model_dump(exclude_unset=True, mode="json"))
    return save_project(db, project, f"update_{collection}_event", collection)


def delete_event(db: Session, project_id: str, collection: str, event_id: str, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    events = getattr(project, collection) or []
    events.pop(_find_event_index(events, event_id, collection))
    setattr(project, collection, events)
    return save_project(db, project, f"delete_{collection}_event", collection)
