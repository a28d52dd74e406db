# cli/i18n - 다국어 메시지 (ko/en)
"""
사용자에게 보이는 문구의 번역 조회

현재 언어는 ContextVar에 보관합니다. `fp` 실행 시 cli.app이 --lang 값으로
한 번 설정하고, 이후 프롬프트/플로우/출력은 t()로 문구를 가져옵니다.

키 형식은 "네임스페이스.키"이며 네임스페이스별 사전은 cli.i18n.messages에 등록됩니다.

Usage:
    from cli.i18n import set_lang, t

    set_lang("en")
    t("flow.select_account")                             # "Select a Firebase Console account:"
    t("cli.selected_account", email="dev@example.com")   # "Selected account: dev@example.com"
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"

# cli.app의 --lang 값 (테스트는 conftest에서 매번 ko로 복원)
_lang: ContextVar[str] = ContextVar("fireprompt_lang", default=DEFAULT_LANG)


def _normalize(lang: str | None) -> str:
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANG


def get_lang() -> str:
    """현재 언어 코드"""
    return _lang.get()


def set_lang(lang: str) -> None:
    """현재 언어 설정 (지원하지 않는 코드는 ko)"""
    _lang.set(_normalize(lang))


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """메시지 키를 현재 언어 문구로 변환

    Args:
        key: "네임스페이스.키" (예: "flow.select_account")
        lang: 이번 호출에만 쓸 언어 (현재 언어는 바꾸지 않음)
        **kwargs: 문구의 {자리표시자} 값

    Returns:
        번역된 문구. 등록되지 않은 키는 키 자체를 반환합니다.
        자리표시자 값이 부족하면 포맷하지 않은 문구를 반환합니다.
    """
    from cli.i18n.messages import MESSAGES

    entry = MESSAGES.get(key)
    if entry is None:
        return key

    text = entry.get(_normalize(lang or get_lang())) or entry[DEFAULT_LANG]
    if not kwargs:
        return text

    try:
        return text.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return text


__all__ = ["t", "get_lang", "set_lang", "SUPPORTED_LANGS", "DEFAULT_LANG"]
