# cli/flow/__init__.py
"""
CLI Flow Module - 계정/프로젝트 선택 플로우

questionary 기반 대화형 UI를 포함하므로 CLI 전용입니다.

구조:
    context.py      - SelectionContext (Prompts, Provider, Registry 주입)
    steps/          - 개별 Step 구현
        account.py  - 계정 선택 (계정 추가 제안, "all" 선택지)
        project.py  - 프로젝트 선택

사용법:
    from cli.flow import SelectionContext, select_account, select_project
    from core.auth import ConfigstoreProvider
    from core.registry import FirebaseCLIRegistry

    ctx = SelectionContext(provider=ConfigstoreProvider(), registry=FirebaseCLIRegistry())
    account = select_account(ctx, allow_all=False, prompt_to_add=True)
    project = select_project(ctx, account)

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈이 로드되어 CLI 시작 시간을 최적화합니다.
"""

__all__ = [
    # Context
    "SelectionContext",
    # Steps
    "AccountStep",
    "ProjectStep",
    "select_account",
    "select_project",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    # Context
    "SelectionContext": (".context", "SelectionContext"),
    # Steps
    "AccountStep": (".steps", "AccountStep"),
    "ProjectStep": (".steps", "ProjectStep"),
    "select_account": (".steps", "select_account"),
    "select_project": (".steps", "select_project"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
