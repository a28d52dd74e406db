# core/registry/static.py
"""메모리 기반 프로젝트 레지스트리"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from .types import ProjectInfo, ProjectList, ProjectRegistry

if TYPE_CHECKING:
    from core.auth.types import AccountInfo

logger = logging.getLogger(__name__)

# 계정별 목록이 없을 때 사용하는 키
ANY_ACCOUNT = "*"


class StaticRegistry(ProjectRegistry):
    """계정 이메일 -> 프로젝트 목록 매핑

    Example:
        registry = StaticRegistry({
            "dev@example.com": [ProjectInfo("dev-app", "Dev App")],
            "*": [ProjectInfo("shared")],
        })
    """

    def __init__(self, projects: Mapping[str, Iterable[ProjectInfo]] | None = None):
        self._projects = {email.lower(): list(items) for email, items in (projects or {}).items()}

    def name(self) -> str:
        return "static"

    def get_projects(self, account: AccountInfo | None) -> ProjectList:
        key = account.email.lower() if account else ANY_ACCOUNT
        items = self._projects.get(key)
        if items is None:
            items = self._projects.get(ANY_ACCOUNT, [])

        logger.debug("[static] %s 프로젝트 %d개", key, len(items))
        return ProjectList(results=list(items))
