"""Project Service 도메인 서비스 레이어입니다. 비즈니스 규칙과 데이터 접근 흐름을 캡슐화합니다.

모든 조회/변경은 (project_id, owner_id) 조건으로만 수행합니다. 다른 계정의 과제는
존재하지 않는 과제와 똑같이 404로 응답합니다.
"""

import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.orm.exc import StaleDataError
from projex.exceptions import NotFoundError, PersistenceError, ProjectConflictError, ValidationError
from projex.models.account import Account
from projex.models.project import Project
from projex.schemas.items import to_documents
from projex.schemas.project import ProjectCreate, ProjectUpdate
from projex.utils.helpers import calculate_progress, fill_sequential_ids, fill_team_ids, summarize_tasks
from typing import List, Optional

logger = logging.getLogger(__name__)

COLLECTION_FIELDS = ("tasks", "columns", "timeline", "calendar", "team")


def _parse_project_id(value: str) -> Optional[str]:
    try:
        return uuid.UUID(str(value)).hex
    except ValueError:
        return None


def get_owned_project(db: Session, project_id: str, account: Account) -> Project:
    key = _parse_project_id(project_id)
    project = None
    if key is not None:
        project = (
            db.query(Project)
            .filter(Project.project_id == key, Project.owner_id == account.account_id)
            .first()
        )
    if not project:
        raise NotFoundError("Project not found")
    return project


def _commit(db: Session, action: str, project_id: Optional[str]) -> None:
    try:
        db.commit()
    except StaleDataError:
        db.rollback()
        logger.warning("[projects] %s lost a concurrent update on project %s", action, project_id)
        raise ProjectConflictError()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[projects] %s failed for project %s", action, project_id)
        raise PersistenceError()


def save_project(db: Session, project: Project, action: str, *changed: str) -> Project:
    # JSON 컬럼은 in-place 변경을 추적하지 않으므로 변경된 필드를 직접 표시한다.
    for field in changed:
        flag_modified(project, field)
    _commit(db, action, project.project_id)
    db.refresh(project)
    return project


def recalculate_task_stats(project: Project) -> None:
    stats = summarize_tasks(project.tasks)
    project.task_stats = stats
    project.progress = calculate_progress(stats["completed"], stats["total"])


def collection_documents(field: str, items) -> list:
    """Convert a whole-collection request value into stored documents with ids filled in."""
    if field == "columns":
        return list(items or [])
    documents = to_documents(items)
    if field == "team":
        return fill_team_ids(documents)
    return fill_sequential_ids(documents)


def _require_name(value: Optional[str]) -> None:
    if not (value or "").strip():
        raise ValidationError("Project name is required")


def create_project(db: Session, account: Account, data: ProjectCreate) -> Project:
    payload = data.model_dump(exclude=set(COLLECTION_FIELDS))
    _require_name(payload.get("name"))
    for field in COLLECTION_FIELDS:
        payload[field] = collection_documents(field, getattr(data, field))
    project = Project(project_id=uuid.uuid4().hex, owner_id=account.account_id, **payload)
    recalculate_task_stats(project)
    db.add(project)
    save_project(db, project, "create_project")
    logger.info("[projects] account %s created project %s", account.account_id, project.project_id)
    return project


def get_projects(db: Session, account: Account) -> List[Project]:
    return (
        db.query(Project)
        .filter(Project.owner_id == account.account_id)
        .order_by(Project.created_at)
        .all()
    )


def get_project(db: Session, project_id: str, account: Account) -> Project:
    return get_owned_project(db, project_id, account)


def update_project(db: Session, project_id: str, data: ProjectUpdate, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    updates = data.model_dump(exclude_unset=True, exclude=set(COLLECTION_FIELDS))
    for field in COLLECTION_FIELDS:
        if field in data.model_fields_set:
            updates[field] = collection_documents(field, getattr(data, field))
    if "name" in updates:
        _require_name(updates["name"])

    changed = []
    for key, value in updates.items():
        if key in COLLECTION_FIELDS:
            # 컬렉션 필드는 부분 병합 없이 통째로 교체한다.
            changed.append(key)
        elif key == "priority" and value is None:
            continue
        setattr(project, key, value)

    if "tasks" in updates:
        recalculate_task_stats(project)
        changed.append("task_stats")
    return save_project(db, project, "update_project", *changed)


def delete_project(db: Session, project_id: str, account: Account) -> None:
    project = get_owned_project(db, project_id, account)
    key = project.project_id
    db.delete(project)
    _commit(db, "delete_project", key)
    logger.info("[projects] account %s deleted project %s", account.account_id, key)


def get_dashboard(db: Session, account: Account) -> dict:
    projects = get_projects(db, account)
    total = sum(int((p.task_stats or {}).get("total", 0)) for p in projects)
    completed = sum(int((p.task_stats or {}).get("completed", 0)) for p in projects)
    return {
        "message": f"Hello user {account.email}, welcome to your dashboard!",
        "project_count": len(projects),
        "total_tasks": total,
        "completed_tasks": completed,
    }
