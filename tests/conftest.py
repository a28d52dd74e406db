"""
tests/conftest.py - pytest 공통 픽스처

입력 프리미티브, Provider, Registry 대체 구현을 제공합니다.

Usage:
    def test_something(fake_prompts, make_context):
        ctx = make_context(accounts=[...])
        fake_prompts.confirm_answers = [False]
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from cli.flow.context import SelectionContext  # noqa: E402
from cli.i18n import set_lang  # noqa: E402
from cli.ui.prompts import Prompts  # noqa: E402
from core.auth.provider.static import StaticProvider  # noqa: E402
from core.auth.types import AccountInfo  # noqa: E402
from core.registry.static import StaticRegistry  # noqa: E402
from core.registry.types import ProjectInfo  # noqa: E402

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment():
    """테스트마다 언어를 기본값(ko)으로 복원"""
    set_lang("ko")
    yield
    set_lang("ko")


# =============================================================================
# 입력 프리미티브 대체 구현
# =============================================================================


class FakePrompts(Prompts):
    """미리 정한 응답을 순서대로 돌려주는 Prompts

    Attributes:
        confirm_answers: confirm() 응답 목록 (앞에서부터 소비)
        select_answer: select_one() 응답. callable이면 choices를 받아 값을 반환
        calls: (메서드명, 인자) 호출 기록
    """

    def __init__(self, confirm_answers=None, select_answer=None):
        self.confirm_answers = list(confirm_answers or [])
        self.select_answer = select_answer
        self.calls = []

    def confirm(self, message, prefix=None):
        self.calls.append(("confirm", message))
        if not self.confirm_answers:
            raise AssertionError(f"예상하지 못한 confirm 호출: {message}")
        return self.confirm_answers.pop(0)

    def select_one(self, message, choices, prefix="🔥"):
        self.calls.append(("select_one", message, list(choices), prefix))
        if callable(self.select_answer):
            return self.select_answer(choices)
        if self.select_answer is None:
            raise AssertionError(f"예상하지 못한 select_one 호출: {message}")
        return self.select_answer

    def select_one_filtered(self, message, source=None, prefix="", suggest_only=False, answers=None):
        raise AssertionError("선택 플로우는 select_one_filtered를 사용하지 않음")

    def called(self, name):
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def fake_prompts():
    """FakePrompts 인스턴스"""
    return FakePrompts()


# =============================================================================
# 도메인 픽스처
# =============================================================================


@pytest.fixture
def accounts():
    """계정 3개"""
    return [
        AccountInfo(email="alice@example.com", key="uid-alice", is_default=True),
        AccountInfo(email="bob@example.com", key="uid-bob"),
        AccountInfo(email="carol@example.com", key="uid-carol"),
    ]


@pytest.fixture
def projects():
    """프로젝트 3개 (하나는 display_name == project_id)"""
    return [
        ProjectInfo(project_id="web-prod", display_name="Web Production", project_number="1001"),
        ProjectInfo(project_id="web-staging", display_name="web-staging", project_number="1002"),
        ProjectInfo(project_id="analytics", display_name="Analytics", resources={"hostingSite": "analytics"}),
    ]


@pytest.fixture
def make_context(fake_prompts):
    """SelectionContext 생성 헬퍼

    provider는 MagicMock(wraps=StaticProvider)로 감싸 호출 여부를 검증할 수 있습니다.
    """

    def _make(accounts=(), login=None, projects=None):
        provider = MagicMock(wraps=StaticProvider(accounts, login=login))
        registry = MagicMock(wraps=StaticRegistry({"*": projects or []}))
        return SelectionContext(provider=provider, registry=registry, prompts=fake_prompts)

    return _make
