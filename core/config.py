"""
core/config.py - 전역 설정

환경변수로 재정의 가능한 기본 설정값과 헬퍼 함수를 제공합니다.

환경변수:
    FIREPROMPT_LANG          - UI 언어 (ko/en)
    FIREPROMPT_CONFIGSTORE   - Firebase CLI 계정 저장소 경로
    FIREPROMPT_LOGIN_COMMAND - 브라우저 로그인 명령 (기본: "firebase login:add")
    FIREPROMPT_FIREBASE_BIN  - firebase 실행 파일 경로
    FIREPROMPT_DEBUG         - 디버그 로그 활성화
    FIREPROMPT_CLI_TIMEOUT   - firebase CLI 호출 타임아웃 (초, 0이면 무제한)

Usage:
    from core.config import settings

    provider = ConfigstoreProvider(path=get_configstore_path())
"""

from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(key: str, default: bool = False) -> bool:
    """환경변수를 bool로 읽기

    인식할 수 없는 값이면 경고를 남기고 기본값을 반환합니다.
    """
    value = os.environ.get(key)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False

    logger.warning("환경변수 %s 값을 bool로 해석할 수 없음: %r (기본값 사용)", key, value)
    return default


def get_env_int(key: str, default: int = 0) -> int:
    """환경변수를 int로 읽기"""
    value = os.environ.get(key)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        logger.warning("환경변수 %s 값을 int로 해석할 수 없음: %r (기본값 사용)", key, value)
        return default


def get_env_str(key: str, default: str = "") -> str:
    """환경변수를 문자열로 읽기 (빈 문자열은 기본값 처리)"""
    value = os.environ.get(key, "").strip()
    return value or default


# =============================================================================
# 경로 / 버전
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로 반환"""
    return Path(__file__).resolve().parent.parent


def get_version() -> str:
    """버전 문자열 반환 (version.txt)"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"


def default_configstore_path() -> Path:
    """Firebase CLI 계정 저장소 기본 경로

    XDG_CONFIG_HOME이 설정되어 있으면 따릅니다.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(config_home) / "configstore" / "firebase-tools.json"


# =============================================================================
# Settings
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """불변 설정 객체

    Attributes:
        LANG: 기본 UI 언어
        CONFIGSTORE_PATH: Firebase CLI 계정 저장소 경로 (None이면 기본 경로)
        LOGIN_COMMAND: 브라우저 로그인 명령 (argv)
        FIREBASE_BIN: firebase 실행 파일
        CLI_TIMEOUT: firebase CLI 호출 타임아웃 (초, 0이면 무제한)
        DEBUG: 디버그 로그 여부
    """

    LANG: str = "ko"
    CONFIGSTORE_PATH: str | None = None
    LOGIN_COMMAND: tuple[str, ...] = field(default=("firebase", "login:add"))
    FIREBASE_BIN: str = "firebase"
    CLI_TIMEOUT: int = 0
    DEBUG: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        """환경변수에서 설정 생성"""
        defaults = cls()

        login_command = get_env_str("FIREPROMPT_LOGIN_COMMAND")

        return cls(
            LANG=get_env_str("FIREPROMPT_LANG", defaults.LANG),
            CONFIGSTORE_PATH=get_env_str("FIREPROMPT_CONFIGSTORE") or None,
            LOGIN_COMMAND=tuple(shlex.split(login_command)) if login_command else defaults.LOGIN_COMMAND,
            FIREBASE_BIN=get_env_str("FIREPROMPT_FIREBASE_BIN", defaults.FIREBASE_BIN),
            CLI_TIMEOUT=max(0, get_env_int("FIREPROMPT_CLI_TIMEOUT", defaults.CLI_TIMEOUT)),
            DEBUG=get_env_bool("FIREPROMPT_DEBUG", defaults.DEBUG),
        )


settings = Settings.from_env()


def get_configstore_path(current: Settings | None = None) -> Path:
    """설정된 계정 저장소 경로 (없으면 기본 경로)"""
    current = current or settings
    if current.CONFIGSTORE_PATH:
        return Path(current.CONFIGSTORE_PATH).expanduser()
    return default_configstore_path()


__all__ = [
    "Settings",
    "settings",
    "get_env_bool",
    "get_env_int",
    "get_env_str",
    "get_project_root",
    "get_version",
    "default_configstore_path",
    "get_configstore_path",
]
