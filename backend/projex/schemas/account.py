"""Account/Auth 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AccountOut(BaseModel):
    account_id: int
    email: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    account: AccountOut


class MessageResponse(BaseModel):
    message: str


class DashboardOut(BaseModel):
    message: str
    project_count: int
    total_tasks: int
    completed_tasks: int
