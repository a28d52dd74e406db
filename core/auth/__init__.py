# core/auth/__init__.py
"""
Firebase 계정 인증 모듈 (core/auth)

선택 플로우는 Provider 인터페이스만 사용합니다.
계정 저장, 토큰 갱신은 이 모듈의 범위가 아닙니다.

지원하는 Provider:
- StaticProvider: 메모리 기반 계정 목록 (테스트, 헤드리스 실행)
- ConfigstoreProvider: Firebase CLI 계정 저장소(firebase-tools.json) 읽기 전용

사용 예시:
    from core.auth import ConfigstoreProvider

    provider = ConfigstoreProvider()
    accounts = provider.get_accounts()

    if not accounts:
        provider.auth_with_browser()  # firebase login:add
        accounts = provider.get_accounts()

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    # Types
    "ProviderType",
    "Provider",
    "AccountInfo",
    "ALL_ACCOUNTS",
    "AuthError",
    "NotAuthenticatedError",
    "ProviderError",
    "ConfigurationError",
    # Providers
    "BaseProvider",
    "StaticProvider",
    "ConfigstoreProvider",
]

_IMPORT_MAPPING = {
    # Types
    "ProviderType": (".types", "ProviderType"),
    "Provider": (".types", "Provider"),
    "AccountInfo": (".types", "AccountInfo"),
    "ALL_ACCOUNTS": (".types", "ALL_ACCOUNTS"),
    "AuthError": (".types", "AuthError"),
    "NotAuthenticatedError": (".types", "NotAuthenticatedError"),
    "ProviderError": (".types", "ProviderError"),
    "ConfigurationError": (".types", "ConfigurationError"),
    # Providers
    "BaseProvider": (".provider", "BaseProvider"),
    "StaticProvider": (".provider", "StaticProvider"),
    "ConfigstoreProvider": (".provider", "ConfigstoreProvider"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
