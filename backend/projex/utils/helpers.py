"""프로젝트 문서의 하위 컬렉션을 다루는 공용 유틸리티 헬퍼입니다."""

import uuid

from typing import Any, Dict, Iterable, List, Optional

DONE_COLUMN = "done"
IMMUTABLE_KEYS = ("id",)


def _numeric_id(value: Any) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return 0


def next_sequential_id(items: Optional[Iterable[Dict[str, Any]]]) -> str:
    """Return ``max(numeric ids) + 1`` as a string.

    Non-numeric or missing ids count as 0, so an empty collection starts at "1".
    Removing the current maximum lets the next insert reuse that numeral.
    """
    highest = max((_numeric_id(item.get("id")) for item in items or []), default=0)
    return str(highest + 1)


def fill_sequential_ids(items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Give every item without an id the next sequential id, in list order."""
    for item in items:
        if not item.get("id"):
            item["id"] = next_sequential_id(items)
    return items


def fill_team_ids(team: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    for department in team:
        if not department.get("id"):
            department["id"] = uuid.uuid4().hex
        members = department.get("members")
        department["members"] = members = list(members) if isinstance(members, list) else []
        for member in members:
            if isinstance(member, dict) and not member.get("id"):
                member["id"] = uuid.uuid4().hex
    return team


def find_index(items: List[Dict[str, Any]], item_id: str) -> int:
    for index, item in enumerate(items):
        if item.get("id") == item_id:
            return index
    return -1


def find_by_id(items: List[Dict[str, Any]], item_id: str) -> Optional[Dict[str, Any]]:
    index = find_index(items, item_id)
    return items[index] if index >= 0 else None


def merge_fields(entity: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    # 식별자는 생성 이후 변경하지 않는다.
    for key, value in updates.items():
        if key in IMMUTABLE_KEYS:
            continue
        entity[key] = value
    return entity


def is_done(task: Optional[Dict[str, Any]]) -> bool:
    return bool(task) and task.get("column_id") == DONE_COLUMN


def calculate_progress(completed: int, total: int) -> int:
    if total <= 0:
        return 0
    # half-up: 12.5 -> 13
    return (completed * 200 + total) // (2 * total)


def summarize_tasks(tasks: Iterable[Dict[str, Any]]) -> Dict[str, int]:
    tasks = list(tasks or [])
    return {
        "completed": sum(1 for task in tasks if is_done(task)),
        "total": len(tasks),
    }
