"""프로젝트 문서에 통째로 저장되는 하위 컬렉션 항목 스키마입니다.

과제 생성/수정, 팀 전체 교체처럼 컬렉션을 한 번에 받는 요청에서 사용합니다.
식별자는 항상 문자열로 저장하고, 정의되지 않은 필드는 그대로 보존합니다.
"""

from pydantic import BaseModel, field_validator
from typing import Any, Dict, List, Optional


def _stringify_id(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class CollectionItem(BaseModel):
    id: Optional[str] = None

    model_config = {"extra": "allow"}

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return _stringify_id(value)

    def to_document(self) -> Dict[str, Any]:
        # 요청에 없던 선언 필드는 저장하지 않는다.
        keep = set(self.model_fields_set) | set(self.model_extra or {})
        return {key: value for key, value in self.model_dump().items() if key in keep}


class TaskItem(CollectionItem):
    column_id: Optional[str] = None


class TimelineItem(CollectionItem):
    pass


class CalendarItem(CollectionItem):
    pass


class MemberItem(CollectionItem):
    name: Optional[str] = None


class DepartmentItem(CollectionItem):
    title: Optional[str] = None
    members: List[MemberItem] = []

    def to_document(self) -> Dict[str, Any]:
        document = super().to_document()
        document["members"] = [member.to_document() for member in self.members]
        return document


def to_documents(items: Optional[List[CollectionItem]]) -> List[Dict[str, Any]]:
    return [item.to_document() for item in items or []]
