from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from projex.database import get_db
from projex.schemas.account import DashboardOut
from projex.services import project_service
from projex.middleware.auth_middleware import get_current_account
from projex.models.account import Account

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardOut)
def dashboard(db: Session = Depends(get_db), current_account: Account = Depends(get_current_account)):
    return project_service.get_dashboard(db, current_account)
