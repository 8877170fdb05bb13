"""API 전반에서 사용하는 도메인 예외입니다. 각 예외는 HTTP 상태 코드를 함께 가집니다."""

from fastapi import HTTPException, status


class ValidationError(HTTPException):
    def __init__(self, detail: str = "Invalid request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    """Duplicate registration."""

    def __init__(self, detail: str = "User already exists."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class Unauthorized(HTTPException):
    def __init__(self, detail: str = "Invalid or expired token"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class InvalidCredentials(HTTPException):
    # 계정 존재 여부를 노출하지 않도록 메시지를 하나로 고정한다.
    def __init__(self):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ProjectConflictError(HTTPException):
    def __init__(self, detail: str = "Project was modified by another request. Reload and try again."):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class PersistenceError(HTTPException):
    def __init__(self):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error")
