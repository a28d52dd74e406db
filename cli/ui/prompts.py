"""
cli/ui/prompts.py - 대화형 입력 프리미티브 (questionary)

세 가지 상태 없는 입력 함수를 제공합니다.

    confirm              - 예/아니오 질문 (기본값: 예)
    select_one           - 필터 가능한 단일 선택 목록 (최대 6행 표시)
    select_one_filtered  - 입력할 때마다 source()로 후보를 다시 계산하는 자동완성

선택 플로우는 모듈 함수를 직접 부르지 않고 Prompts 객체를 주입받아 사용합니다.
테스트에서는 Prompts를 대체 구현으로 바꿔 끼웁니다.

Note:
    Ctrl-C 등으로 입력이 중단되면 KeyboardInterrupt가 호출자까지 전파됩니다.
    이 모듈은 중단을 삼키지 않습니다.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

import questionary
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.layout.dimension import Dimension
from questionary.prompts.common import InquirerControl

from cli.i18n import t

logger = logging.getLogger(__name__)

# 선택 목록에서 한 번에 보이는 최대 행 수
SELECT_PAGE_SIZE = 6

# 자동완성 메뉴에 확보하는 행 수
AUTOCOMPLETE_PAGE_SIZE = 12

DEFAULT_CONFIRM_PREFIX = "🤔"
DEFAULT_SELECT_PREFIX = "🔥"
DEFAULT_FILTERED_PREFIX = ""

CANCELLED_MESSAGE = "사용자가 취소했습니다."


@dataclass(frozen=True)
class Choice:
    """선택지 (표시 라벨, 값)

    값은 한 번의 선택 안에서 유일해야 하며 None이면 안 됩니다.
    """

    label: str
    value: Any

    def to_questionary(self) -> questionary.Choice:
        return questionary.Choice(title=self.label, value=self.value)


# source(answers_so_far, current_input) -> 후보 목록
SourceFn = Callable[[dict, str], Iterable["str | Choice"]]


def _qmark(prefix: str | None) -> str:
    return f"[{prefix or ''}]"


def _answer_or_cancel(answer: Any) -> Any:
    """questionary ask()는 Ctrl-C 시 None을 반환 → KeyboardInterrupt로 변환"""
    if answer is None:
        raise KeyboardInterrupt(CANCELLED_MESSAGE)
    return answer


def _cap_visible_rows(question: questionary.Question, rows: int) -> None:
    """선택 목록 창의 높이를 rows로 제한 (커서를 따라 스크롤됨)"""
    for window in question.application.layout.find_all_windows():
        if isinstance(window.content, InquirerControl):
            window.height = Dimension(max=rows)


# =============================================================================
# 프리미티브
# =============================================================================


def confirm(message: str, prefix: str | None = None) -> bool:
    """예/아니오 질문

    Args:
        message: 질문
        prefix: 질문 앞 표시 (기본: 🤔)

    Returns:
        사용자 응답 (Enter만 누르면 True)
    """
    answer = questionary.confirm(
        message,
        default=True,
        qmark=_qmark(prefix or DEFAULT_CONFIRM_PREFIX),
    ).ask()
    return bool(_answer_or_cancel(answer))


def select_one(message: str, choices: Sequence[Choice], prefix: str = DEFAULT_SELECT_PREFIX) -> Any:
    """목록에서 하나 선택

    입력하면 목록이 좁혀지고, 화살표 키로 이동한 뒤 Enter로 선택합니다.
    빈 목록 검사는 호출자 책임입니다.

    Args:
        message: 질문
        choices: 선택지 (순서대로 표시)
        prefix: 질문 앞 표시 (기본: 🔥)

    Returns:
        선택된 Choice의 value

    Raises:
        ValueError: choices가 비어 있는 경우
    """
    if not choices:
        raise ValueError("select_one()에는 최소 1개의 선택지가 필요합니다")

    question = questionary.select(
        message,
        choices=[choice.to_questionary() for choice in choices],
        qmark=_qmark(prefix),
        use_search_filter=True,
        use_jk_keys=False,
        instruction=t("flow.filter_footer"),
    )
    _cap_visible_rows(question, SELECT_PAGE_SIZE)

    return _answer_or_cancel(question.ask())


class SourceCompleter(Completer):
    """입력할 때마다 source(answers, text)로 후보를 다시 계산하는 Completer

    마지막으로 계산한 후보의 라벨 -> 값 매핑만 보관하여
    최종 입력을 검증하고 값으로 되돌릴 때 사용합니다.
    같은 라벨이 여러 번 나오면 먼저 나온 후보가 우선합니다.
    """

    def __init__(self, source: SourceFn | None, answers: dict | None = None):
        self.source = source
        self.answers = answers if answers is not None else {}
        self.latest: dict[str, Any] = {}

    def candidates(self, text: str) -> list[Choice]:
        if self.source is None:
            return []

        result: list[Choice] = []
        mapping: dict[str, Any] = {}
        for item in self.source(self.answers, text) or []:
            choice = item if isinstance(item, Choice) else Choice(label=str(item), value=item)
            mapping.setdefault(choice.label, choice.value)
            result.append(choice)

        # 완성은 별도 스레드에서 호출되므로 통째로 교체
        self.latest = mapping
        return result

    def get_completions(self, document: Document, complete_event):
        text = document.text_before_cursor
        for choice in self.candidates(text):
            yield Completion(choice.label, start_position=-len(text))

    def resolve(self, text: str) -> tuple[bool, Any]:
        """입력 텍스트 -> (후보 일치 여부, 값)"""
        if text in self.latest:
            return True, self.latest[text]
        return False, text


def select_one_filtered(
    message: str,
    source: SourceFn | None = None,
    prefix: str = DEFAULT_FILTERED_PREFIX,
    suggest_only: bool = False,
    answers: dict | None = None,
) -> Any:
    """자동완성 입력으로 하나 선택

    키 입력마다 source(answers_so_far, current_input)를 호출해 후보를 다시 계산합니다.
    source는 블록될 수 있습니다 (별도 스레드에서 호출됨).

    Args:
        message: 질문
        source: 후보 계산 함수 (None이면 후보 없음)
        prefix: 질문 앞 표시
        suggest_only: True면 후보에 없는 자유 입력도 그대로 허용
        answers: source에 전달할 이전 응답

    Returns:
        선택된 후보의 value, 또는 suggest_only일 때 입력 텍스트
    """
    completer = SourceCompleter(source, answers)

    def validate(text: str) -> bool | str:
        if suggest_only:
            return True
        matched, _ = completer.resolve(text)
        return True if matched else t("flow.no_matching_choice", value=text)

    answer = questionary.autocomplete(
        message,
        choices=[],
        qmark=_qmark(prefix),
        completer=completer,
        validate=validate,
        complete_in_thread=True,
        reserve_space_for_menu=AUTOCOMPLETE_PAGE_SIZE,
    ).ask()

    _, value = completer.resolve(_answer_or_cancel(answer))
    return value


# =============================================================================
# 주입용 묶음
# =============================================================================


class Prompts:
    """선택 플로우에 주입되는 입력 프리미티브 묶음

    기본 구현은 위 모듈 함수(questionary)를 그대로 호출합니다.
    """

    def confirm(self, message: str, prefix: str | None = None) -> bool:
        return confirm(message, prefix)

    def select_one(self, message: str, choices: Sequence[Choice], prefix: str = DEFAULT_SELECT_PREFIX) -> Any:
        return select_one(message, choices, prefix)

    def select_one_filtered(
        self,
        message: str,
        source: SourceFn | None = None,
        prefix: str = DEFAULT_FILTERED_PREFIX,
        suggest_only: bool = False,
        answers: dict | None = None,
    ) -> Any:
        return select_one_filtered(message, source, prefix, suggest_only, answers)


__all__ = [
    "Choice",
    "SourceFn",
    "SourceCompleter",
    "Prompts",
    "SELECT_PAGE_SIZE",
    "AUTOCOMPLETE_PAGE_SIZE",
    "confirm",
    "select_one",
    "select_one_filtered",
]
