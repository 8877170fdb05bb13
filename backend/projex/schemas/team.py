"""Team(부서/팀원) 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel, field_validator
from typing import List, Optional

from projex.schemas.items import DepartmentItem


class DepartmentCreate(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    color: Optional[str] = None


class DepartmentUpdate(BaseModel):
    title: Optional[str] = None
    color: Optional[str] = None


class TeamMemberCreate(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None


class TeamMemberUpdate(BaseModel):
    name: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None


class TeamUpdate(BaseModel):
    team: List[DepartmentItem] = []


class TeamMemberSearchResult(BaseModel):
    department_id: Optional[str] = None
    department_title: Optional[str] = None
    id: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    department: Optional[str] = None

    model_config = {"extra": "allow"}

    # 저장된 문서의 값이 문자열이 아니어도 검색 결과는 내려준다.
    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        return str(value)
