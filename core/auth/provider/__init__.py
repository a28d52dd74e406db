# core/auth/provider/__init__.py
"""
인증 Provider 구현 모듈

이 모듈은 계정 목록 조회와 브라우저 로그인을 구현하는 Provider 클래스들을 제공합니다.

Provider 목록:
- StaticProvider: 메모리 기반 계정 목록 (테스트, 헤드리스 실행)
- ConfigstoreProvider: Firebase CLI 계정 저장소(firebase-tools.json) 기반

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    # Base
    "BaseProvider",
    # Static
    "StaticProvider",
    # Configstore
    "ConfigstoreProvider",
]

_IMPORT_MAPPING = {
    "BaseProvider": (".base", "BaseProvider"),
    "StaticProvider": (".static", "StaticProvider"),
    "ConfigstoreProvider": (".configstore", "ConfigstoreProvider"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
