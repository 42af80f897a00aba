"""현재 빌드 중인 브랜치 결정"""

import logging
from typing import Mapping, Optional

from branch_recipients.constants import DEFAULT_BRANCH_VARIABLE, HEAD

from .branch_name import normalize_branch_override
from .diagnostics import DiagnosticSink
from .repository_accessor import RepositoryAccessor


def get_branch_from_environment(environment: Mapping[str, str], diagnostics: DiagnosticSink,
                                variable: str = DEFAULT_BRANCH_VARIABLE) -> Optional[str]:
    """빌드 환경 변수에서 현재 브랜치 조회 (없거나 빈 값이면 None)"""
    branch = normalize_branch_override(environment.get(variable))
    if branch is not None:
        diagnostics.debug("Branch from environment: %s", branch)
    return branch


class BranchResolver:
    """현재 빌드 중인 브랜치 이름을 결정

    1. 빌드 환경이 준 브랜치가 있으면 저장소를 조회하지 않고 그대로 사용
    2. 없으면 HEAD 를 포함하는 브랜치 중 하나를 사용
       (로컬 브랜치는 upstream 이름으로 변환된 상태)
    3. 후보가 여럿이면 사전순 첫 번째를 고르고 모호함을 기록
    """

    def __init__(self, diagnostics: DiagnosticSink, override: Optional[str] = None):
        self.diagnostics = diagnostics
        self.override = normalize_branch_override(override)
        self.logger = logging.getLogger(__name__)

    def resolve(self, repository: RepositoryAccessor) -> Optional[str]:
        """현재 브랜치 이름, 결정할 수 없으면 None"""
        if self.override is not None:
            return self.override

        candidates = sorted(repository.branches_containing(HEAD))
        if not candidates:
            self.diagnostics.log("Cannot determine the checked out Git branch!")
            return None

        if len(candidates) > 1:
            self.diagnostics.log("Found multiple branches for HEAD: %s", candidates)
        self.diagnostics.log("Branch from repository: %s", candidates[0])
        return candidates[0]
