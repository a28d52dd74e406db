"""
cli/i18n/messages/common.py - Common Messages

Contains translations for errors, cancellation and general UI.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    "error": {
        "ko": "오류",
        "en": "Error",
    },
    "cancelled": {
        "ko": "취소되었습니다.",
        "en": "Cancelled.",
    },
    "yes": {
        "ko": "예",
        "en": "Yes",
    },
    "no": {
        "ko": "아니오",
        "en": "No",
    },
    "debug_hint": {
        "ko": "자세한 내용은 --debug 옵션으로 다시 실행하세요.",
        "en": "Run again with --debug for details.",
    },
}
