# core/registry/firebase_cli.py
"""
Firebase CLI 기반 프로젝트 레지스트리

`firebase projects:list --json --account <email>`를 실행하여 프로젝트 목록을 조회합니다.
HTTP 호출과 토큰 갱신은 firebase-tools가 담당합니다.

출력 형식:
    {"status": "success", "result": [{"projectId": "...", "displayName": "...", ...}]}
    {"status": "error", "error": "..."}
"""

from __future__ import annotations

import json
import logging
import subprocess
from typing import TYPE_CHECKING

from core.config import settings
from core.exceptions import RegistryError

from .types import ProjectInfo, ProjectList, ProjectRegistry

if TYPE_CHECKING:
    from core.auth.types import AccountInfo

logger = logging.getLogger(__name__)

_OPERATION = "projects:list"


class FirebaseCLIRegistry(ProjectRegistry):
    """firebase-tools CLI 래퍼"""

    def __init__(self, firebase_bin: str | None = None, timeout: int | None = None):
        self.firebase_bin = firebase_bin or settings.FIREBASE_BIN
        # 0 또는 None이면 무제한
        self.timeout = timeout if timeout is not None else settings.CLI_TIMEOUT

    def name(self) -> str:
        return "firebase-cli"

    def build_command(self, account: AccountInfo | None) -> list[str]:
        cmd = [self.firebase_bin, _OPERATION, "--json", "--non-interactive"]
        if account is not None and account.email:
            cmd.extend(["--account", account.email])
        return cmd

    def get_projects(self, account: AccountInfo | None) -> ProjectList:
        cmd = self.build_command(account)
        logger.debug("[%s] 실행: %s", self.name(), " ".join(cmd))

        try:
            completed = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout or None,
            )
        except FileNotFoundError as e:
            raise RegistryError(self.name(), _OPERATION, f"실행 파일을 찾을 수 없습니다: {self.firebase_bin}", e) from e
        except subprocess.TimeoutExpired as e:
            raise RegistryError(self.name(), _OPERATION, f"{self.timeout}초 내에 응답이 없습니다", e) from e

        return self.parse_output(completed.stdout, completed.returncode, completed.stderr)

    def parse_output(self, stdout: str, returncode: int = 0, stderr: str = "") -> ProjectList:
        """CLI JSON 출력을 ProjectList로 변환

        Raises:
            RegistryError: 종료 코드 비정상, JSON 아님, status != success
        """
        try:
            payload = json.loads(stdout or "")
        except json.JSONDecodeError as e:
            detail = (stderr or stdout or "").strip().splitlines()
            message = detail[-1] if detail else "JSON 출력이 아닙니다"
            if returncode:
                message = f"exit code {returncode}: {message}"
            raise RegistryError(self.name(), _OPERATION, message, e) from e

        if not isinstance(payload, dict) or payload.get("status") != "success":
            error = payload.get("error") if isinstance(payload, dict) else None
            raise RegistryError(self.name(), _OPERATION, str(error or f"exit code {returncode}"))

        if returncode:
            raise RegistryError(self.name(), _OPERATION, f"exit code {returncode}")

        items = payload.get("result") or []
        if not isinstance(items, list):
            raise RegistryError(self.name(), _OPERATION, f"result가 목록이 아닙니다: {type(items).__name__}")

        results = []
        for item in items:
            if not isinstance(item, dict):
                raise RegistryError(self.name(), _OPERATION, f"잘못된 프로젝트 항목: {item!r}")
            try:
                results.append(ProjectInfo.from_dict(item))
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise RegistryError(self.name(), _OPERATION, f"잘못된 프로젝트 항목: {item!r}", e) from e

        logger.debug("[%s] 프로젝트 %d개", self.name(), len(results))
        return ProjectList(results=results)
