"""배타 커밋 작성자 집계"""

import logging
from typing import Dict, List, Optional, Sequence

from .commit_data import Author, Commit
from .diagnostics import DiagnosticSink
from .exclusivity_filter import ExclusivityFilter
from .notification_set import NotificationSet


class AuthorAggregator:
    """배타 커밋의 작성자를 중복 없이 모아 NotificationSet 생성"""

    def __init__(self, exclusivity_filter: ExclusivityFilter, diagnostics: DiagnosticSink):
        self.exclusivity_filter = exclusivity_filter
        self.diagnostics = diagnostics
        self.logger = logging.getLogger(__name__)

    def aggregate(self, commits: Sequence[Commit], current_branch: Optional[str],
                  triggerer: Optional[Author] = None) -> NotificationSet:
        """배타 커밋 작성자와 빌드 시작자를 합친 알림 대상
        
        Args:
            commits: 빌드 변경 로그의 커밋 목록
            current_branch: 현재 브랜치 (None 이면 빌드 시작자만 알림)
            triggerer: 빌드 시작자
            
        Returns:
            NotificationSet: 알림 대상 집합
        """
        if current_branch is None:
            self.diagnostics.log("No branch resolved, only the user who triggered the build is notified")
            return NotificationSet(triggerer=triggerer)

        authors: Dict[Author, None] = {}
        exclusive_ids: List[str] = []
        for commit in commits:
            # 이미 포함된 작성자의 커밋은 결과를 바꾸지 않으므로 조회 생략
            if commit.author in authors:
                continue
            if self.exclusivity_filter.is_exclusive(commit.id, current_branch):
                authors[commit.author] = None
                exclusive_ids.append(commit.id)

        self.logger.info(f"배타 커밋 작성자 수: {len(authors)} (커밋 {len(commits)}개 중 {len(exclusive_ids)}개 확인)")
        return NotificationSet(
            triggerer=triggerer,
            authors=frozenset(authors),
            exclusive_commit_ids=tuple(exclusive_ids)
        )
