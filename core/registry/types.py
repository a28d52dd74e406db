# core/registry/types.py
"""
프로젝트 레지스트리 타입 정의

- ProjectInfo: Firebase 프로젝트 정보
- ProjectList: get_projects() 응답 ({results: [...]})
- ProjectRegistry: 레지스트리 추상 기본 클래스
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from core.auth.types import AccountInfo


@dataclass(frozen=True)
class ProjectInfo:
    """Firebase 프로젝트 정보

    Attributes:
        project_id: 프로젝트 ID
        display_name: 표시 이름 (없으면 project_id)
        project_number: 프로젝트 번호 (옵션)
        resources: 부가 리소스 정보 (hostingSite 등)
    """

    project_id: str
    display_name: str = ""
    project_number: str | None = None
    resources: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        if not self.display_name:
            object.__setattr__(self, "display_name", self.project_id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectInfo:
        """API/CLI 응답 레코드(camelCase)에서 생성"""
        number = data.get("projectNumber")
        return cls(
            project_id=data["projectId"],
            display_name=data.get("displayName") or "",
            project_number=str(number) if number is not None else None,
            resources=dict(data.get("resources") or {}),
        )

    @property
    def label(self) -> str:
        """선택 목록 표시용 라벨

        display_name이 project_id와 같으면 중복 표시하지 않습니다.
        """
        if self.display_name != self.project_id:
            return f"{self.display_name} ({self.project_id})"
        return self.project_id


@dataclass
class ProjectList:
    """get_projects() 응답"""

    results: list[ProjectInfo] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)


class ProjectRegistry(ABC):
    """프로젝트 레지스트리 추상 기본 클래스"""

    @abstractmethod
    def name(self) -> str:
        """레지스트리 이름을 반환합니다."""
        pass

    @abstractmethod
    def get_projects(self, account: AccountInfo | None) -> ProjectList:
        """계정이 접근 가능한 프로젝트 목록을 반환합니다.

        Args:
            account: 조회에 사용할 계정 (None이면 레지스트리 기본 계정)

        Raises:
            RegistryError: 조회 실패 시
        """
        pass
