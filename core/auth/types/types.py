# core/auth/types/types.py
"""
core/auth/types/types.py - 인증 모듈의 핵심 타입 정의

이 모듈은 인증 시스템 전체에서 사용되는 기본 타입들을 정의합니다.

포함 항목:
    - ProviderType: 인증 Provider 타입 열거형 (STATIC, CONFIGSTORE)
    - AccountInfo: 인증된 Firebase 계정 정보 데이터 클래스
    - ALL_ACCOUNTS: "전체 계정"을 나타내는 센티널
    - Provider: 모든 인증 Provider가 구현해야 하는 추상 기본 클래스 (ABC)
    - 에러 클래스: AuthError, NotAuthenticatedError, ConfigurationError, ProviderError
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from core.exceptions import FPError

logger = logging.getLogger(__name__)


# =============================================================================
# Provider Type Enum
# =============================================================================


class ProviderType(Enum):
    """인증 Provider 타입을 나타내는 열거형

    - STATIC: 메모리 기반 계정 목록 (테스트, 헤드리스 실행)
    - CONFIGSTORE: Firebase CLI 계정 저장소 (firebase-tools.json)
    """

    STATIC = "static"
    CONFIGSTORE = "configstore"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Account Info
# =============================================================================

# "전체 계정" 선택지. 실제 AccountInfo와 절대 같지 않음
ALL_ACCOUNTS: Final = "all"


@dataclass
class AccountInfo:
    """인증된 계정 정보를 나타내는 데이터 클래스

    Provider가 소유하며 선택 플로우는 읽기만 합니다.

    Attributes:
        email: 계정 이메일 (표시용)
        key: 계정 식별 키 (Firebase user id, 없으면 email)
        tokens: 인증 토큰 (해석하지 않고 그대로 보관)
        is_default: 기본(현재) 계정 여부
    """

    email: str
    key: str = ""
    tokens: dict[str, Any] = field(default_factory=dict, repr=False)
    is_default: bool = False

    def __post_init__(self):
        if not self.email:
            logger.warning("이메일이 없는 계정 정보: key=%r", self.key)
        if not self.key:
            self.key = self.email

    @classmethod
    def from_dict(cls, data: dict[str, Any], is_default: bool = False) -> AccountInfo:
        """Firebase CLI 계정 레코드({"user": {...}, "tokens": {...}})에서 생성"""
        user = data.get("user") or {}
        return cls(
            email=str(user.get("email") or ""),
            key=str(user.get("sub") or user.get("user_id") or ""),
            tokens=dict(data.get("tokens") or {}),
            is_default=is_default,
        )

    def __hash__(self):
        """계정 키 기반 해시값 반환."""
        return hash(self.key)

    def __eq__(self, other):
        """계정 키 기반 동등성 비교."""
        if isinstance(other, AccountInfo):
            return self.key == other.key
        return False


# =============================================================================
# Provider Interface (Abstract Base Class)
# =============================================================================


class Provider(ABC):
    """모든 인증 Provider가 구현해야 하는 추상 기본 클래스

    선택 플로우는 이 인터페이스만 사용합니다.

    Example:
        class MyProvider(Provider):
            def type(self) -> ProviderType:
                return ProviderType.STATIC

            def name(self) -> str:
                return "my-provider"

            # ... 나머지 메서드 구현
    """

    @abstractmethod
    def type(self) -> ProviderType:
        """Provider 타입을 반환합니다."""
        pass

    @abstractmethod
    def name(self) -> str:
        """Provider 이름(식별자)을 반환합니다."""
        pass

    @abstractmethod
    def get_account(self) -> AccountInfo | None:
        """현재(기본) 계정을 반환합니다. 없으면 None."""
        pass

    @abstractmethod
    def get_accounts(self) -> list[AccountInfo]:
        """인증된 계정 목록을 순서대로 반환합니다.

        호출할 때마다 최신 상태를 반영해야 합니다.
        """
        pass

    @abstractmethod
    def auth_with_browser(self) -> None:
        """브라우저 기반 로그인을 수행합니다.

        외부 프로세스의 로그인이 끝날 때까지 블록됩니다.
        완료 후 get_accounts()는 새 계정을 포함해야 합니다.

        Raises:
            ProviderError: 로그인 실패 시
        """
        pass

    def find_account(self, email: str) -> AccountInfo | None:
        """이메일로 계정 조회 (대소문자 무시)"""
        target = email.strip().lower()
        for account in self.get_accounts():
            if account.email.lower() == target:
                return account
        return None


# =============================================================================
# Error Classes
# =============================================================================


class AuthError(FPError):
    """인증 관련 기본 에러 클래스

    모든 인증 에러의 부모 클래스입니다.
    원인 예외(cause)를 체이닝하여 디버깅을 용이하게 합니다.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message, cause)


class NotAuthenticatedError(AuthError):
    """인증된 계정이 필요한데 없을 때 발생하는 에러"""

    def __init__(self, message: str = "인증이 필요합니다", cause: Exception | None = None):
        super().__init__(message, cause)


class ConfigurationError(AuthError):
    """계정 저장소 파싱 실패 등 설정 오류

    Attributes:
        config_key: 문제가 된 설정 키 또는 파일 경로 (옵션)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


class ProviderError(AuthError):
    """Provider에서 발생하는 에러

    에러 메시지 형식: "[provider] operation: message"

    Attributes:
        provider: 에러가 발생한 Provider 이름
        operation: 실패한 작업 이름 (예: "auth_with_browser")
    """

    def __init__(
        self,
        provider: str,
        operation: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"[{provider}] {operation}: {message}"
        super().__init__(full_message, cause)
        self.provider = provider
        self.operation = operation
        self.details.update({"provider": provider, "operation": operation})
