"""Team(부서/팀원) 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import List, Optional
from projex.database import get_db
from projex.schemas.account import MessageResponse
from projex.schemas.project import ProjectOut
from projex.schemas.team import (
    DepartmentCreate,
    DepartmentUpdate,
    TeamMemberCreate,
    TeamMemberSearchResult,
    TeamMemberUpdate,
    TeamUpdate,
)
from projex.services import team_service
from projex.middleware.auth_middleware import get_current_account
from projex.models.account import Account

router = APIRouter(prefix="/api/projects/{project_id}", tags=["team"])


@router.post("/departments", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def add_department(
    project_id: str,
    data: DepartmentCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return team_service.add_department(db, project_id, data, current_account)


@router.put("/departments/{department_id}", response_model=ProjectOut)
def update_department(
    project_id: str,
    department_id: str,
    data: DepartmentUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return team_service.update_department(db, project_id, department_id, data, current_account)


@router.delete("/departments/{department_id}", response_model=MessageResponse)
def delete_department(
    project_id: str,
    department_id: str,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    team_service.delete_department(db, project_id, department_id, current_account)
    return {"message": "Department deleted successfully"}


@router.post("/departments/{department_id}/members", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def add_member(
    project_id: str,
    department_id: str,
    data: TeamMemberCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return team_service.add_member(db, project_id, department_id, data, current_account)


@router.delete("/departments/{department_id}/members/{member_id}", response_model=MessageResponse)
def remove_member(
    project_id: str,
    department_id: str,
    member_id: str,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    team_service.remove_member(db, project_id, department_id, member_id, current_account)
    return {"message": "Team member removed successfully"}


@router.put("/team", response_model=ProjectOut)
def replace_team(
    project_id: str,
    data: TeamUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return team_service.replace_team(db, project_id, data, current_account)


@router.get("/team/search", response_model=List[TeamMemberSearchResult])
def search_members(
    project_id: str,
    query: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return team_service.search_members(db, project_id, query, current_account)


@router.put("/team/{department_id}/members/{member_id}", response_model=ProjectOut)
def update_member(
    project_id: str,
    department_id: str,
    member_id: str,
    data: TeamMemberUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return team_service.update_member(db, project_id, department_id, member_id, data, current_account)


@router.delete("/team/{department_id}/members/{member_id}", response_model=MessageResponse)
def delete_member(
    project_id: str,
    department_id: str,
    member_id: str,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    team_service.remove_member(db, project_id, department_id, member_id, current_account)
    return {"message": "Team member deleted successfully"}
