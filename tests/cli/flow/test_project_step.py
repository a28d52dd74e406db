# tests/cli/flow/test_project_step.py
"""
cli/flow/steps/project.py 단위 테스트

프로젝트 선택지 라벨, 빈 목록 처리, 선택 결과 매핑, 오류 전파 테스트.
"""

from unittest.mock import MagicMock

import pytest

from cli.flow.context import SelectionContext
from cli.flow.steps.project import ProjectStep, select_project
from cli.i18n import t
from core.auth.types import AccountInfo
from core.exceptions import RegistryError
from core.registry.types import ProjectInfo, ProjectList


class TestSelectProject:
    """select_project 테스트"""

    def test_empty_results_returns_none_without_prompt(self, make_context, fake_prompts, accounts):
        """프로젝트가 없으면 묻지 않고 None"""
        ctx = make_context(accounts, projects=[])

        assert select_project(ctx) is None
        assert fake_prompts.calls == []

    def test_labels(self, make_context, fake_prompts, accounts, projects):
        """display_name != project_id면 "name (id)", 같으면 id만"""
        ctx = make_context(accounts, projects=projects)
        fake_prompts.select_answer = "web-prod"

        select_project(ctx)

        _, message, choices, _ = fake_prompts.called("select_one")[0]
        assert message == t("flow.select_project")
        assert [c.label for c in choices] == [
            "Web Production (web-prod)",
            "web-staging",
            "Analytics (analytics)",
        ]
        assert [c.value for c in choices] == ["web-prod", "web-staging", "analytics"]

    def test_returns_full_record(self, make_context, fake_prompts, accounts, projects):
        """선택된 project_id에 해당하는 원래 레코드 반환"""
        ctx = make_context(accounts, projects=projects)
        fake_prompts.select_answer = "analytics"

        result = select_project(ctx)

        assert result is projects[2]
        assert result.project_id == "analytics"
        assert result.resources == {"hostingSite": "analytics"}

    def test_uses_current_account_by_default(self, make_context, fake_prompts, accounts, projects):
        """account 생략 시 Provider의 현재 계정으로 조회"""
        ctx = make_context(accounts, projects=projects)
        fake_prompts.select_answer = "web-prod"

        select_project(ctx)

        ctx.provider.get_account.assert_called_once()
        ctx.registry.get_projects.assert_called_once_with(accounts[0])

    def test_explicit_account(self, make_context, fake_prompts, accounts, projects):
        """account 지정 시 Provider의 현재 계정을 조회하지 않음"""
        ctx = make_context(accounts, projects=projects)
        fake_prompts.select_answer = "web-prod"

        select_project(ctx, accounts[1])

        ctx.provider.get_account.assert_not_called()
        ctx.registry.get_projects.assert_called_once_with(accounts[1])

    def test_no_current_account(self, make_context, fake_prompts, projects):
        """현재 계정이 없으면 None으로 조회"""
        ctx = make_context([], projects=projects)
        fake_prompts.select_answer = "web-prod"

        assert select_project(ctx).project_id == "web-prod"
        ctx.registry.get_projects.assert_called_once_with(None)

    def test_registry_error_propagates(self, fake_prompts, accounts):
        """Registry 오류는 잡지 않음"""
        registry = MagicMock()
        registry.get_projects.side_effect = RegistryError("test", "projects:list")
        provider = MagicMock()
        provider.get_account.return_value = accounts[0]
        ctx = SelectionContext(provider=provider, registry=registry, prompts=fake_prompts)

        with pytest.raises(RegistryError):
            select_project(ctx)

        assert fake_prompts.calls == []

    def test_same_display_name_different_ids(self, fake_prompts):
        """라벨이 같아도 값(project_id)으로 구분"""
        registry = MagicMock()
        registry.get_projects.return_value = ProjectList(
            results=[ProjectInfo("app-1", "App"), ProjectInfo("app-2", "App")]
        )
        ctx = SelectionContext(provider=MagicMock(), registry=registry, prompts=fake_prompts)
        fake_prompts.select_answer = "app-2"

        result = ProjectStep().execute(ctx, AccountInfo(email="a@b.c"))

        assert result.project_id == "app-2"

    def test_requires_registry(self, fake_prompts):
        """registry 없이 프로젝트 선택 불가"""
        ctx = SelectionContext(provider=MagicMock(), prompts=fake_prompts)

        with pytest.raises(ValueError):
            select_project(ctx, AccountInfo(email="a@b.c"))
