"""
core/exceptions.py - 통합 예외 계층 구조

애플리케이션 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    FPError (베이스)
    ├── AuthError (인증 관련) - core.auth.types에서 정의
    │   ├── NotAuthenticatedError
    │   ├── ConfigurationError
    │   └── ProviderError
    └── RegistryError (프로젝트 목록 조회)

Note:
    빈 후보 목록은 예외가 아닙니다. 선택 플로우는 None을 반환합니다.
    취소(Ctrl-C)는 KeyboardInterrupt 그대로 전파됩니다.
    Provider/Registry 오류는 플로우에서 잡지 않고 호출자(cli.app)까지 전파됩니다.

Usage:
    from core.exceptions import RegistryError

    try:
        output = subprocess.run(cmd, capture_output=True, check=True)
    except subprocess.CalledProcessError as e:
        raise RegistryError("firebase-cli", "projects:list", cause=e)
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class FPError(Exception):
    """fireprompt 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 프로젝트 레지스트리 관련 예외
# =============================================================================


class RegistryError(FPError):
    """프로젝트 목록 조회 실패 예외

    Attributes:
        registry: 레지스트리 이름
        operation: 실패한 작업 (예: "projects:list")
    """

    def __init__(
        self,
        registry: str,
        operation: str,
        message: str = "프로젝트 목록 조회 실패",
        cause: Optional[Exception] = None,
    ):
        full_message = f"[{registry}] {operation}: {message}"
        super().__init__(full_message, cause)
        self.registry = registry
        self.operation = operation
        self.details.update({"registry": registry, "operation": operation})


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, FPError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    if isinstance(error, FileNotFoundError):
        return f"파일 또는 명령을 찾을 수 없습니다: {error.filename or error}"

    if isinstance(error, PermissionError):
        return f"권한이 없습니다: {error.filename or error}"

    return f"{error.__class__.__name__}: {error}"
