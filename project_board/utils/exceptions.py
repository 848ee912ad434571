"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these directly; FastAPI turns them into responses, so route
handlers need no per-call translation.

Usage:
    from project_board.utils.exceptions import NotFoundError, CannotBindRepoToRepoProjectError
    raise NotFoundError("Project not found")
    if isinstance(err, CannotBindRepoToRepoProjectError): ...
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외: 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (project, column, repository) does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ColumnNotFoundError(NotFoundError):
    """프로젝트 컬럼을 찾을 수 없음: Project board column does not exist."""

    def __init__(self, column_id: int) -> None:
        self.column_id = column_id
        super().__init__(f"Project column not found: {column_id}")


class ProjectNotFoundError(NotFoundError):
    """프로젝트를 찾을 수 없음: Project does not exist."""

    def __init__(self, project_id: int) -> None:
        self.project_id = project_id
        super().__init__(f"Project not found: {project_id}")


class DuplicateError(HTTPException):
    """409 Conflict 예외: 중복 리소스 생성 시도 시 사용.

    409 Conflict exception.
    Raised when attempting to create a resource that violates a uniqueness constraint
    (e.g. linking the same repository to a column twice).

    Args:
        detail: 오류 메시지 (Error message, default: "Resource already exists")
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외: 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. business rule violations).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class CannotBindRepoToRepoProjectError(BadRequestError):
    """저장소 프로젝트의 컬럼에는 저장소를 연결할 수 없음.

    Raised when a repository is attached to a column whose project is scoped
    to a single repository. Only organization projects hold repository links.
    """

    def __init__(self) -> None:
        super().__init__("cannot bind repository to repository project")
