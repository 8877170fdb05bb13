from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from projex.database import get_db
from projex.schemas.account import MessageResponse
from projex.schemas.project import ProjectOut
from projex.schemas.task import TaskCreate, TaskUpdate
from projex.services import task_service
from projex.middleware.auth_middleware import get_current_account
from projex.models.account import Account

router = APIRouter(prefix="/api/projects/{project_id}/tasks", tags=["tasks"])


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def add_task(
    project_id: str,
    data: TaskCreate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return task_service.add_task(db, project_id, data, current_account)


@router.put("/{task_id}", response_model=ProjectOut)
def update_task(
    project_id: str,
    task_id: str,
    data: TaskUpdate,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    return task_service.update_task(db, project_id, task_id, data, current_account)


@router.delete("/{task_id}", response_model=MessageResponse)
def delete_task(
    project_id: str,
    task_id: str,
    db: Session = Depends(get_db),
    current_account: Account = Depends(get_current_account),
):
    task_service.delete_task(db, project_id, task_id, current_account)
    return {"message": "Task deleted successfully"}
