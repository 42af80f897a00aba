"""빌드 변경 로그

빌드에는 체크아웃한 SCM 마다 하나씩 여러 변경 로그가 붙을 수 있습니다.
git 종류의 변경 로그만 골라 커밋 ID 기준으로 하나의 순서 있는 목록으로 펼칩니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List
import json

from branch_recipients.constants import GIT_CHANGE_LOG_KIND

from .commit_data import Commit


@dataclass
class ChangeLogSet:
    """단일 SCM 의 변경 로그"""
    kind: str
    entries: List[Commit] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """JSON 직렬화를 위한 딕셔너리 변환"""
        return {
            'kind': self.kind,
            'entries': [entry.to_dict() for entry in self.entries]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChangeLogSet':
        """딕셔너리에서 ChangeLogSet 객체 생성"""
        return cls(
            kind=data.get('kind', GIT_CHANGE_LOG_KIND),
            entries=[Commit.from_dict(entry) for entry in data.get('entries', [])]
        )


@dataclass
class BuildChangeLog:
    """빌드 하나에 연결된 변경 로그 전체"""
    change_sets: List[ChangeLogSet] = field(default_factory=list)

    def git_commits(self) -> List[Commit]:
        """git 변경 로그의 커밋을 순서대로 펼친 목록 (중복 ID 는 첫 항목만 유지)"""
        commits: Dict[str, Commit] = {}
        for change_set in self.change_sets:
            if change_set.kind != GIT_CHANGE_LOG_KIND:
                continue
            for entry in change_set.entries:
                commits.setdefault(entry.id, entry)
        return list(commits.values())

    def save_to_json(self, filepath: str) -> None:
        """JSON 파일로 저장"""
        data = {
            'change_sets': [change_set.to_dict() for change_set in self.change_sets]
        }
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @classmethod
    def from_json(cls, filepath: str) -> 'BuildChangeLog':
        """JSON 파일에서 BuildChangeLog 객체 생성"""
        with open(filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        return cls(change_sets=[
            ChangeLogSet.from_dict(change_set) for change_set in data.get('change_sets', [])
        ])
