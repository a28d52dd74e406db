# cli/ui - TUI 컴포넌트 (questionary, rich)
"""
TUI 컴포넌트 모듈

CLI 전용 UI 컴포넌트들 (대화형 선택, 콘솔 출력 등)
"""

# Direct imports (rich/questionary are commonly used, no lazy import needed)
from .console import (
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    SYMBOL_WARNING,
    console,
    err_console,
    get_console,
    get_logger,
    print_error,
    print_success,
    print_warning,
    setup_logging,
)
from .prompts import (
    SELECT_PAGE_SIZE,
    Choice,
    Prompts,
    SourceFn,
    confirm,
    select_one,
    select_one_filtered,
)

__all__: list[str] = [
    "console",
    "err_console",
    "get_console",
    "get_logger",
    "setup_logging",
    # 표준 출력 심볼
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    # 메시지 출력
    "print_success",
    "print_error",
    "print_warning",
    # 입력 프리미티브
    "Choice",
    "Prompts",
    "SourceFn",
    "SELECT_PAGE_SIZE",
    "confirm",
    "select_one",
    "select_one_filtered",
]
