# cli/flow/context.py
"""
선택 플로우 컨텍스트

플로우가 사용하는 입력 프리미티브와 외부 협력자(Provider, Registry)를 묶어
명시적으로 주입합니다. 플로우는 전역 상태를 참조하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cli.ui.prompts import Prompts

if TYPE_CHECKING:
    from core.auth.types import Provider
    from core.registry.types import ProjectRegistry


@dataclass
class SelectionContext:
    """선택 플로우 실행 컨텍스트

    Attributes:
        provider: 계정 Provider
        registry: 프로젝트 레지스트리 (프로젝트 선택에만 필요)
        prompts: 입력 프리미티브 (기본: questionary 구현)
    """

    provider: Provider
    registry: ProjectRegistry | None = None
    prompts: Prompts = field(default_factory=Prompts)

    def require_registry(self) -> ProjectRegistry:
        if self.registry is None:
            raise ValueError("프로젝트 선택에는 registry가 필요합니다")
        return self.registry
