"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for the fp click commands.
"""

from __future__ import annotations

CLI_MESSAGES = {
    "app_help": {
        "ko": "fireprompt - Firebase 계정/프로젝트 대화형 선택 도구",
        "en": "fireprompt - interactive Firebase account/project selection",
    },
    "lang_help": {
        "ko": "UI 언어 설정 / UI language (ko: 한국어, en: English)",
        "en": "UI language (ko: Korean, en: English)",
    },
    "debug_help": {
        "ko": "디버그 로그 출력",
        "en": "Print debug logs",
    },
    "json_help": {
        "ko": "JSON 형식으로 출력",
        "en": "Print as JSON",
    },
    "account_help": {
        "ko": "인증된 Firebase 계정 선택",
        "en": "Select an authenticated Firebase account",
    },
    "account_all_help": {
        "ko": "'all' (전체 계정) 선택지 추가",
        "en": "Offer an 'all' (every account) choice",
    },
    "account_no_add_help": {
        "ko": "계정 추가(브라우저 로그인)를 묻지 않음",
        "en": "Never offer to add an account (browser login)",
    },
    "project_help": {
        "ko": "Firebase 프로젝트 선택",
        "en": "Select a Firebase project",
    },
    "project_account_help": {
        "ko": "프로젝트 조회에 사용할 계정 이메일 (기본: 현재 계정)",
        "en": "Account email used to list projects (default: current account)",
    },
    "selected_account": {
        "ko": "선택된 계정: {email}",
        "en": "Selected account: {email}",
    },
    "selected_all_accounts": {
        "ko": "전체 계정이 선택되었습니다",
        "en": "All accounts selected",
    },
    "no_account_selected": {
        "ko": "선택된 계정이 없습니다",
        "en": "No account selected",
    },
    "selected_project": {
        "ko": "선택된 프로젝트: {label}",
        "en": "Selected project: {label}",
    },
    "no_projects": {
        "ko": "선택할 수 있는 프로젝트가 없습니다",
        "en": "No projects available",
    },
    "account_not_found": {
        "ko": "계정을 찾을 수 없습니다: {email}",
        "en": "Account not found: {email}",
    },
}
