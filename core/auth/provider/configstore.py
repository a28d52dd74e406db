# core/auth/provider/configstore.py
"""
Firebase CLI 계정 저장소 기반 Provider

firebase-tools가 기록하는 ~/.config/configstore/firebase-tools.json을 읽어
계정 목록을 구성합니다. 이 Provider는 저장소를 절대 쓰지 않습니다.

저장소 형식 (필요한 부분만):
    {
        "user": {"email": "...", "sub": "..."},
        "tokens": {...},
        "additionalAccounts": [
            {"user": {"email": "..."}, "tokens": {...}}
        ]
    }

- 최상위 user/tokens: 기본 계정 (is_default=True)
- additionalAccounts: 추가 계정 (순서 유지)

브라우저 로그인은 설정된 로그인 명령(기본: firebase login:add)을 서브프로세스로 실행합니다.
"""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from core.config import get_configstore_path, settings

from ..types import AccountInfo, ConfigurationError, ProviderError, ProviderType
from .base import BaseProvider

logger = logging.getLogger(__name__)


class ConfigstoreProvider(BaseProvider):
    """firebase-tools.json 기반 Provider

    get_accounts()는 호출할 때마다 파일을 다시 읽습니다.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        login_command: Sequence[str] | None = None,
        name: str = "configstore",
    ):
        super().__init__(name)
        self.path = Path(path).expanduser() if path else get_configstore_path()
        self.login_command = list(login_command or settings.LOGIN_COMMAND)

    def type(self) -> ProviderType:
        return ProviderType.CONFIGSTORE

    def get_accounts(self) -> list[AccountInfo]:
        data = self._read_store()
        if not data:
            return []

        accounts: list[AccountInfo] = []

        if isinstance(data.get("user"), dict):
            self._append(accounts, AccountInfo.from_dict(data, is_default=True))

        for entry in data.get("additionalAccounts") or []:
            if not isinstance(entry, dict) or not isinstance(entry.get("user"), dict):
                logger.warning("[%s] 잘못된 추가 계정 항목 무시: %r", self.name(), entry)
                continue
            self._append(accounts, AccountInfo.from_dict(entry))

        logger.debug("[%s] 계정 %d개 로드: %s", self.name(), len(accounts), self.path)
        return accounts

    def _append(self, accounts: list[AccountInfo], account: AccountInfo) -> None:
        # 이메일 없는 계정은 선택지로 표시할 수 없음
        if not account.email:
            logger.warning("[%s] 이메일 없는 계정 항목 무시: key=%r", self.name(), account.key)
            return
        if account not in accounts:
            accounts.append(account)

    def _read_store(self) -> dict[str, Any]:
        """저장소 파일 읽기

        Returns:
            파싱된 dict (파일이 없으면 빈 dict)

        Raises:
            ConfigurationError: JSON 파싱 실패 또는 최상위가 객체가 아닌 경우
        """
        if not self.path.exists():
            logger.debug("[%s] 계정 저장소 없음: %s", self.name(), self.path)
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"계정 저장소를 파싱할 수 없습니다: {self.path}",
                config_key=str(self.path),
                cause=e,
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"계정 저장소 형식이 올바르지 않습니다: {self.path}",
                config_key=str(self.path),
            )

        return data

    def _login(self) -> None:
        if not self.login_command:
            raise ProviderError(self.name(), "auth_with_browser", "로그인 명령이 설정되지 않았습니다")

        logger.info("[%s] 로그인 명령 실행: %s", self.name(), " ".join(self.login_command))

        # 브라우저 로그인은 사용자 입력이 필요하므로 터미널을 그대로 넘김
        try:
            subprocess.run(self.login_command, check=True)
        except FileNotFoundError as e:
            raise ProviderError(
                self.name(),
                "auth_with_browser",
                f"로그인 명령을 찾을 수 없습니다: {self.login_command[0]}",
                cause=e,
            ) from e
        except subprocess.CalledProcessError as e:
            raise ProviderError(
                self.name(),
                "auth_with_browser",
                f"로그인 실패 (exit code {e.returncode})",
                cause=e,
            ) from e
