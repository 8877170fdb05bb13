"""Team Service 도메인 서비스 레이어입니다. 과제 내 부서와 팀원 구성을 관리합니다."""

import uuid
from typing import Any, Dict, List

from sqlalchemy.orm import Session
from projex.exceptions import NotFoundError, ValidationError
from projex.models.account import Account
from projex.models.project import Project
from projex.schemas.team import (
    DepartmentCreate,
    DepartmentUpdate,
    TeamMemberCreate,
    TeamMemberUpdate,
    TeamUpdate,
)
from projex.schemas.items import to_documents
from projex.services.project_service import get_owned_project, save_project
from projex.utils.helpers import fill_team_ids, find_by_id, find_index, merge_fields

DEFAULT_DEPARTMENT_TITLE = "New Department"
DEFAULT_DEPARTMENT_COLOR = "#4A6CFA"


def _generate_id() -> str:
    return uuid.uuid4().hex


def _text(value: Any):
    return None if value is None else str(value)


def _team(project: Project) -> List[Dict[str, Any]]:
    if project.team is None:
        project.team = []
    return project.team


def _get_department(project: Project, department_id: str) -> Dict[str, Any]:
    department = find_by_id(_team(project), department_id)
    if department is None:
        raise NotFoundError("Department not found")
    return department


def _members(department: Dict[str, Any]) -> List[Dict[str, Any]]:
    members = department.get("members")
    if not isinstance(members, list):
        members = department["members"] = []
    return members


def _find_member_index(department: Dict[str, Any], member_id: str) -> int:
    index = find_index(_members(department), member_id)
    if index < 0:
        raise NotFoundError("Team member not found")
    return index


def add_department(db: Session, project_id: str, data: DepartmentCreate, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    _team(project).append({
        "id": data.id or _generate_id(),
        "title": data.title or DEFAULT_DEPARTMENT_TITLE,
        "color": data.color or DEFAULT_DEPARTMENT_COLOR,
        "members": [],
    })
    return save_project(db, project, "add_department", "team")


def update_department(
    db: Session, project_id: str, department_id: str, data: DepartmentUpdate, account: Account
) -> Project:
    project = get_owned_project(db, project_id, account)
    department = _get_department(project, department_id)
    # 빈 값은 기존 값을 유지한다.
    if data.title:
        department["title"] = data.title
    if data.color:
        department["color"] = data.color
    return save_project(db, project, "update_department", "team")


def delete_department(db: Session, project_id: str, department_id: str, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    team = _team(project)
    index = find_index(team, department_id)
    if index < 0:
        raise NotFoundError("Department not found")
    team.pop(index)
    return save_project(db, project, "delete_department", "team")


def add_member(
    db: Session, project_id: str, department_id: str, data: TeamMemberCreate, account: Account
) -> Project:
    if not (data.name or "").strip():
        raise ValidationError("Team member name is required")
    project = get_owned_project(db, project_id, account)
    department = _get_department(project, department_id)
    _members(department).append({
        "id": data.id or _generate_id(),
        "name": data.name,
        "role": data.role,
        "status": data.status,
        "department": data.department,
    })
    return save_project(db, project, "add_member", "team")


def update_member(
    db: Session,
    project_id: str,
    department_id: str,
    member_id: str,
    data: TeamMemberUpdate,
    account: Account,
) -> Project:
    project = get_owned_project(db, project_id, account)
    department = _get_department(project, department_id)
    member = _members(department)[_find_member_index(department, member_id)]
    merge_fields(member, data.model_dump(exclude_unset=True))
    return save_project(db, project, "update_member", "team")


def remove_member(
    db: Session, project_id: str, department_id: str, member_id: str, account: Account
) -> Project:
    project = get_owned_project(db, project_id, account)
    department = _get_department(project, department_id)
    _members(department).pop(_find_member_index(department, member_id))
    return save_project(db, project, "remove_member", "team")


def replace_team(db: Session, project_id: str, data: TeamUpdate, account: Account) -> Project:
    project = get_owned_project(db, project_id, account)
    project.team = fill_team_ids(to_documents(data.team))
    return save_project(db, project, "replace_team", "team")


def search_members(db: Session, project_id: str, query: str, account: Account) -> List[Dict[str, Any]]:
    needle = (query or "").strip().lower()
    if not needle:
        raise ValidationError("Search query is required")
    project = get_owned_project(db, project_id, account)

    results = []
    for department in _team(project):
        for member in _members(department):
            name = str(member.get("name") or "").lower()
            member_id = str(member.get("id") or "").lower()
            if needle in name or needle in member_id:
                results.append({
                    **member,
                    "id": _text(member.get("id")),
                    "department_id": _text(department.get("id")),
                    "department_title": _text(department.get("title")),
                })
    return results
