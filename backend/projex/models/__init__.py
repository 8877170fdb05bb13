"""SQLAlchemy 모델 패키지 초기화 모듈입니다."""

from projex.models.account import Account
from projex.models.project import Project

__all__ = [
    "Account",
    "Project",
]
