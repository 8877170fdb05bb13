"""Auth 기능 API 라우터입니다. 요청을 검증하고 서비스 레이어로 비즈니스 로직을 위임합니다."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from projex.database import get_db
from projex.schemas.account import AccountOut, LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from projex.services import auth_service
from projex.middleware.auth_middleware import get_current_account
from projex.models.account import Account

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    auth_service.register(db, request.email, request.password)
    return {"message": "User registered successfully"}


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    account, token = auth_service.login(db, request.email, request.password)
    return TokenResponse(access_token=token, account=AccountOut.model_validate(account))


@router.get("/me", response_model=AccountOut)
def me(current_account: Account = Depends(get_current_account)):
    return current_account
