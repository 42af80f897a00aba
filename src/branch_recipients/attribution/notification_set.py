from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .commit_data import Author


@dataclass(frozen=True)
class NotificationSet:
    """알림 대상 집합 (빌드 시작자 + 배타 커밋 작성자)"""
    triggerer: Optional[Author] = None
    authors: FrozenSet[Author] = field(default_factory=frozenset)
    exclusive_commit_ids: Tuple[str, ...] = ()

    @property
    def recipients(self) -> FrozenSet[Author]:
        """중복 제거된 전체 수신자"""
        if self.triggerer is None:
            return self.authors
        return self.authors | {self.triggerer}

    def __len__(self) -> int:
        return len(self.recipients)

    def __contains__(self, author: object) -> bool:
        return author in self.recipients

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return {
            'triggerer': self.triggerer.to_dict() if self.triggerer else None,
            'authors': [a.to_dict() for a in sorted(self.authors, key=lambda a: a.user_id)],
            'recipients': sorted(a.user_id for a in self.recipients),
            'exclusive_commit_ids': list(self.exclusive_commit_ids)
        }
