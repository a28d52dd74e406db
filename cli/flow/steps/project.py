# cli/flow/steps/project.py
"""
프로젝트 선택 Step

계정이 접근 가능한 Firebase 프로젝트 중 하나를 고릅니다.
프로젝트가 없으면 묻지 않고 None을 반환합니다.
"""

from __future__ import annotations

import logging

from cli.i18n import t
from cli.ui.prompts import Choice
from core.auth.types import AccountInfo
from core.registry.types import ProjectInfo

from ..context import SelectionContext

logger = logging.getLogger(__name__)


class ProjectStep:
    """프로젝트 선택 Step

    Registry 조회 실패는 잡지 않고 호출자에게 전파합니다.
    """

    def execute(self, ctx: SelectionContext, account: AccountInfo | None = None) -> ProjectInfo | None:
        """프로젝트 선택 실행

        Args:
            ctx: 선택 컨텍스트 (provider, registry, prompts)
            account: 조회에 사용할 계정 (기본: Provider의 현재 계정)

        Returns:
            선택된 ProjectInfo 또는 None (프로젝트 없음)
        """
        if account is None:
            account = ctx.provider.get_account()

        response = ctx.require_registry().get_projects(account)
        projects = list(response.results)
        logger.debug("프로젝트 %d개 (account=%s)", len(projects), account.email if account else None)

        choices = [Choice(label=project.label, value=project.project_id) for project in projects]
        if not choices:
            return None

        selected_id = ctx.prompts.select_one(t("flow.select_project"), choices)

        for project in projects:
            if project.project_id == selected_id:
                return project
        return None


def select_project(ctx: SelectionContext, account: AccountInfo | None = None) -> ProjectInfo | None:
    """Firebase 프로젝트 선택 (ProjectStep 단축 함수)"""
    return ProjectStep().execute(ctx, account)
