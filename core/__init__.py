# core/__init__.py
"""
core - fireprompt 도메인 계층

UI와 무관한 도메인 타입, 외부 협력자 인터페이스, 설정, 예외를 포함합니다.

아키텍처:
    core/
    ├── auth/           # 계정 Provider (Static, Configstore)
    ├── registry/       # 프로젝트 레지스트리 (Static, Firebase CLI)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import settings, get_configstore_path
    path = get_configstore_path()

    # 예외 처리
    from core.exceptions import FPError, format_error_for_user
    try:
        projects = registry.get_projects(account)
    except FPError as e:
        print(format_error_for_user(e))
"""
