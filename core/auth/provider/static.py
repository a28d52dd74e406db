# core/auth/provider/static.py
"""
메모리 기반 계정 Provider

계정 목록을 직접 주입받습니다. 브라우저 로그인은 주입된 login 콜백으로 대체되며,
콜백이 반환한 계정이 목록 끝에 추가됩니다.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..types import AccountInfo, ProviderError, ProviderType
from .base import BaseProvider

logger = logging.getLogger(__name__)


class StaticProvider(BaseProvider):
    """메모리 기반 Provider

    Example:
        provider = StaticProvider(
            [AccountInfo(email="dev@example.com")],
            login=lambda: AccountInfo(email="new@example.com"),
        )
    """

    def __init__(
        self,
        accounts: Iterable[AccountInfo] = (),
        login: Callable[[], AccountInfo] | None = None,
        name: str = "static",
    ):
        super().__init__(name)
        self._accounts = list(accounts)
        self._login_fn = login

    def type(self) -> ProviderType:
        return ProviderType.STATIC

    def get_accounts(self) -> list[AccountInfo]:
        # 호출자가 목록을 수정해도 내부 상태는 유지
        return list(self._accounts)

    def _login(self) -> None:
        if self._login_fn is None:
            raise ProviderError(self.name(), "auth_with_browser", "로그인 콜백이 설정되지 않았습니다")

        account = self._login_fn()
        if account in self._accounts:
            logger.info("[%s] 이미 등록된 계정: %s", self.name(), account.email)
            return

        self._accounts.append(account)
        logger.info("[%s] 계정 추가됨: %s", self.name(), account.email)
