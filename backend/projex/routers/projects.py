"""Projects 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from projex.database import get_db
from projex.schemas.account import MessageResponse
from projex.schemas.project import ProjectCreate, ProjectUpdate, ProjectOut
from projex.services import project_service
from projex.middleware.auth_middleware import get_current_account
from projex.models.account import Account

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(
    data: ProjectCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return project_service.create_project(db, current_account, data)


@router.get("", response_model=List[ProjectOut])
def list_projects(db: Session = Depends(get_db), current_account: Account = Depends(get_current_account)):
    return project_service.get_projects(db, current_account)


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: str, db: Session = Depends(get_db), current_account: Account = Depends(get_current_account)):
    return project_service.get_project(db, project_id, current_account)


@router.put("/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: str,
    data: ProjectUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return project_service.update_project(db, project_id, data, current_account)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(project_id: str, db: Session = Depends(get_db), current_account: Account = Depends(get_current_account)):
    project_service.delete_project(db, project_id, current_account)
    return {"message": "Project deleted successfully"}
