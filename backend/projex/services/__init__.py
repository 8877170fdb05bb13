"""서비스 레이어 패키지 초기화 모듈입니다."""

from projex.services import (
    auth_service,
    project_service,
    task_service,
    event_service,
    team_service,
)
