"""빌드 컨텍스트

주변 CI 시스템이 알림 시점에 넘겨주는 값들의 모음입니다.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .change_set import BuildChangeLog
from .commit_data import Author


@dataclass
class BuildContext:
    """알림 계산에 필요한 빌드 정보

    Attributes:
        run_id: 현재 실행 식별자 (None 이면 실행을 찾지 못한 것)
        triggerer: 빌드를 시작한 사용자
        change_log: 빌드 변경 로그 (None 이면 SCM 이 연결되지 않은 실행)
        environment: 빌드 환경 변수
        workspace: 빌드 컨텍스트가 제공한 작업 공간 경로
        build_workspace: 빌드 자체가 노출하는 파일 시스템 작업 공간
        agent_host: 작업 공간이 있는 원격 빌드 에이전트 (None 이면 로컬)
    """
    run_id: Optional[str]
    triggerer: Optional[Author] = None
    change_log: Optional[BuildChangeLog] = None
    environment: Dict[str, str] = field(default_factory=dict)
    workspace: Optional[str] = None
    build_workspace: Optional[str] = None
    agent_host: Optional[str] = None
