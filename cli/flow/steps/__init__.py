# cli/flow/steps/__init__.py
"""Flow Steps 모듈"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .account import AccountStep, select_account
    from .project import ProjectStep, select_project

__all__ = [
    "AccountStep",
    "ProjectStep",
    "select_account",
    "select_project",
]

_IMPORT_MAPPING = {
    "AccountStep": (".account", "AccountStep"),
    "ProjectStep": (".project", "ProjectStep"),
    "select_account": (".account", "select_account"),
    "select_project": (".project", "select_project"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
