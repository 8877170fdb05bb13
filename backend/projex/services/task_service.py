"""Task Service 도메인 서비스 레이어입니다. 태스크 변경과 함께 task_stats/progress 를 갱신합니다."""

from datetime import datetime, timezone
from sqlalchemy.orm import Session
from projex.exceptions import NotFoundError
from projex.models.account import Account
from projex.models.project import Project
from projex.schemas.task import TaskCreate, TaskUpdate
from projex.services.project_service import get_owned_project, save_project
from projex.utils.helpers import calculate_progress, find_index, is_done, merge_fields, next_sequential_id

# null 로 덮어쓰면 기본값 의미가 깨지는 필드
NON_NULLABLE_FIELDS = ("column_id", "priority")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _apply_stats(project: Project, total_delta: int = 0, completed_delta: int = 0) -> None:
    stats = dict(project.task_stats or {})
    total = max(int(stats.get("total", 0)) + total_delta, 0)
    completed = min(max(int(stats.get("completed", 0)) + completed_delta, 0), total)
    project.task_stats = {"completed": completed, "total": total}
    project.progress = calculate_progress(completed, total)


def _find_task_index(project: Project, task_id: str) -> int:
    index = find_index(project.tasks or [], task_id)
    if index < 0:
        raise NotFoundError("Task not found")
    return index


def add_task(db: Session, project_id: str, data: TaskCreate, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    tasks = project.tasks or []
    now = _now()
    task = data.model_dump(mode="json")
    task.update(id=next_sequential_id(tasks), created_at=now, updated_at=now)
    tasks.append(task)
    project.tasks = tasks
    _apply_stats(project, total_delta=1, completed_delta=1 if is_done(task) else 0)
    return save_project(db, project, "add_task", "tasks", "task_stats")


def update_task(db: Session, project_id: str, task_id: str, data: TaskUpdate, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    task = project.tasks[_find_task_index(project, task_id)]
    was_completed = is_done(task)

    updates = data.model_dump(exclude_unset=True, mode="json")
    for key in NON_NULLABLE_FIELDS:
        if key in updates and updates[key] is None:
            updates.pop(key)
    merge_fields(task, updates)
    task["updated_at"] = _now()

    will_be_completed = is_done(task)
    delta = 0
    if not was_completed and will_be_completed:
        delta = 1
    elif was_completed and not will_be_completed:
        delta = -1
    _apply_stats(project, completed_delta=delta)
    return save_project(db, project, "update_task", "tasks", "task_stats")


def delete_task(db: Session, project_id: str, task_id: str, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    task = project.tasks.pop(_find_task_index(project, task_id))
    _apply_stats(project, total_delta=-1, completed_delta=-1 if is_done(task) else 0)
    return save_project(db, project, "delete_task", "tasks", "task_stats")
