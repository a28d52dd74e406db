# cli/flow/steps/account.py
"""
계정 선택 Step

인증된 Firebase 계정 중 하나를 고릅니다.
계정이 0개/1개이면 브라우저 로그인으로 계정 추가를 제안하고,
allow_all이면 "all"(전체 계정) 선택지를 맨 앞에 추가합니다.

선택지 값은 목록 인덱스입니다. 선택지를 만든 목록과
결과를 찾는 목록이 같아야 합니다.
"""

from __future__ import annotations

import logging

from cli.i18n import t
from cli.ui.prompts import Choice
from core.auth.types import ALL_ACCOUNTS, AccountInfo

from ..context import SelectionContext

logger = logging.getLogger(__name__)

ACCOUNT_PREFIX = "🔐"

# 선택 결과: 계정, "all", 또는 None(선택 없음)
AccountSelection = AccountInfo | str | None


class AccountStep:
    """계정 선택 Step

    상태 전이 (순서대로 평가):
    1. Provider에서 계정 목록 조회
    2. prompt_to_add일 때
       a. 계정 1개: 추가 여부 확인 → 거절 시 그 계정 반환 (allow_all 무시)
          수락 시 브라우저 로그인 후 목록 갱신
       b. 계정 0개: 추가 여부 확인 → 거절 시 None
          수락 시 브라우저 로그인 후 목록 갱신, 1개면 바로 반환
    3. allow_all이면 "all"을 맨 앞에 추가
    4. 인덱스 값으로 선택지 구성 후 선택
    """

    def __init__(self, allow_all: bool = False, prompt_to_add: bool = True):
        self.allow_all = allow_all
        self.prompt_to_add = prompt_to_add

    def execute(self, ctx: SelectionContext) -> AccountSelection:
        """계정 선택 실행

        Args:
            ctx: 선택 컨텍스트 (provider, prompts)

        Returns:
            선택된 AccountInfo, ALL_ACCOUNTS, 또는 None
        """
        provider = ctx.provider
        accounts = provider.get_accounts()
        logger.debug("계정 %d개 (allow_all=%s, prompt_to_add=%s)", len(accounts), self.allow_all, self.prompt_to_add)

        if self.prompt_to_add:
            if len(accounts) == 1:
                if not ctx.prompts.confirm(t("flow.confirm_add_another_account")):
                    logger.debug("계정 추가 거절 - 유일한 계정 반환: %s", accounts[0].email)
                    return accounts[0]

                provider.auth_with_browser()
                accounts = provider.get_accounts()

            if not accounts:
                if not ctx.prompts.confirm(t("flow.confirm_add_first_account")):
                    logger.debug("계정 추가 거절 - 선택 없음")
                    return None

                provider.auth_with_browser()
                accounts = provider.get_accounts()

                if len(accounts) == 1:
                    logger.debug("새 계정 1개 - 바로 반환: %s", accounts[0].email)
                    return accounts[0]

        entries: list[AccountInfo | str] = list(accounts)
        if self.allow_all:
            entries.insert(0, ALL_ACCOUNTS)

        choices = self.build_choices(entries)
        if not choices:
            logger.debug("선택할 계정 없음")
            return None

        index = ctx.prompts.select_one(t("flow.select_account"), choices, ACCOUNT_PREFIX)
        return entries[index]

    @staticmethod
    def build_choices(entries: list[AccountInfo | str]) -> list[Choice]:
        """entries -> 선택지 (값 = 인덱스)"""
        choices = []
        for index, entry in enumerate(entries):
            if entry == ALL_ACCOUNTS:
                choices.append(Choice(label=ALL_ACCOUNTS, value=index))
            else:
                choices.append(Choice(label=entry.email, value=index))
        return choices


def select_account(
    ctx: SelectionContext,
    allow_all: bool = False,
    prompt_to_add: bool = True,
) -> AccountSelection:
    """인증된 계정 선택 (AccountStep 단축 함수)"""
    return AccountStep(allow_all=allow_all, prompt_to_add=prompt_to_add).execute(ctx)
