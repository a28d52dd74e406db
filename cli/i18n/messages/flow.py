"""
cli/i18n/messages/flow.py - Flow Step Messages

Contains translations for account and project selection.
"""

from __future__ import annotations

FLOW_MESSAGES = {
    # =========================================================================
    # Prompt primitives
    # =========================================================================
    "filter_footer": {
        "ko": "입력하여 목록을 좁히고, 화살표 키로 이동한 뒤 ENTER로 선택하세요",
        "en": "Start typing to filter choices, use arrow keys to navigate & ENTER to select",
    },
    "no_matching_choice": {
        "ko": "일치하는 항목이 없습니다: {value}",
        "en": "No matching choice: {value}",
    },
    # =========================================================================
    # Account Selection
    # =========================================================================
    "confirm_add_another_account": {
        "ko": "선택할 수 있는 계정이 하나뿐입니다. 다른 Firebase 계정을 추가하시겠습니까?",
        "en": "You only have one account to select from. Add another Firebase account?",
    },
    "confirm_add_first_account": {
        "ko": "계정이 없습니다 - 새 Firebase Console 계정을 추가하시겠습니까?",
        "en": "No accounts found - would you like to add a new Firebase Console account?",
    },
    "select_account": {
        "ko": "Firebase Console 계정을 선택하세요:",
        "en": "Select a Firebase Console account:",
    },
    # =========================================================================
    # Project Selection
    # =========================================================================
    "select_project": {
        "ko": "Firebase [projectId]를 선택하세요:",
        "en": "Select a Firebase [projectId]:",
    },
}
