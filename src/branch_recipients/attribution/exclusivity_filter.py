"""브랜치 배타 커밋 판별"""

from typing import Iterable, List

from .diagnostics import DiagnosticSink
from .repository_accessor import RepositoryAccessor


class ExclusivityFilter:
    """커밋이 현재 브랜치에만 존재하는지 판별

    포함 브랜치가 정확히 하나이고 그 이름이 현재 브랜치와 같을 때만 배타 커밋이다.
    조회 실패는 빈 집합으로 취급되므로 배타 커밋이 되지 않는다.
    """

    def __init__(self, repository: RepositoryAccessor, diagnostics: DiagnosticSink):
        self.repository = repository
        self.diagnostics = diagnostics

    def is_exclusive(self, commit_id: str, current_branch: str) -> bool:
        branches = self.repository.branches_containing(commit_id)
        exclusive = len(branches) == 1 and current_branch in branches

        if exclusive:
            self.diagnostics.log("Commit %s can be only found on current branch (%s)",
                                 commit_id, current_branch)
        elif len(branches) > 1:
            self.diagnostics.log("Commit %s can be found on multiple branches (%s)",
                                 commit_id, sorted(branches))
        return exclusive

    def exclusive_commits(self, commit_ids: Iterable[str], current_branch: str) -> List[str]:
        """배타 커밋 ID 목록 (입력 순서 유지)"""
        return [commit_id for commit_id in commit_ids
                if self.is_exclusive(commit_id, current_branch)]
