# core/auth/provider/base.py
"""
Provider 공통 기반 클래스

- 현재 계정 결정 로직 (is_default 우선, 없으면 첫 번째 계정)
- 로그인 후 계정 수 변화 로깅
"""

from __future__ import annotations

import logging
from abc import abstractmethod

from ..types import AccountInfo, Provider

logger = logging.getLogger(__name__)


class BaseProvider(Provider):
    """Provider 구현을 위한 기본 클래스

    하위 클래스는 type(), get_accounts(), _login()만 구현하면 됩니다.
    """

    def __init__(self, name: str):
        self._name = name

    def name(self) -> str:
        return self._name

    def get_account(self) -> AccountInfo | None:
        accounts = self.get_accounts()
        for account in accounts:
            if account.is_default:
                return account
        return accounts[0] if accounts else None

    def auth_with_browser(self) -> None:
        before = len(self.get_accounts())
        logger.debug("[%s] 브라우저 로그인 시작 (현재 계정 %d개)", self._name, before)

        self._login()

        after = len(self.get_accounts())
        logger.debug("[%s] 브라우저 로그인 완료 (계정 %d개 -> %d개)", self._name, before, after)

    @abstractmethod
    def _login(self) -> None:
        """실제 로그인 수행. 실패 시 ProviderError."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"
