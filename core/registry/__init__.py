# core/registry/__init__.py
"""
Firebase 프로젝트 레지스트리 모듈 (core/registry)

계정별로 접근 가능한 프로젝트 목록을 조회합니다.

구현 목록:
- StaticRegistry: 메모리 기반 (계정 이메일 -> 프로젝트 목록)
- FirebaseCLIRegistry: `firebase projects:list --json` 호출

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    "ProjectInfo",
    "ProjectList",
    "ProjectRegistry",
    "StaticRegistry",
    "FirebaseCLIRegistry",
]

_IMPORT_MAPPING = {
    "ProjectInfo": (".types", "ProjectInfo"),
    "ProjectList": (".types", "ProjectList"),
    "ProjectRegistry": (".types", "ProjectRegistry"),
    "StaticRegistry": (".static", "StaticRegistry"),
    "FirebaseCLIRegistry": (".firebase_cli", "FirebaseCLIRegistry"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
