"""브랜치 배타 커밋 작성자 계산 패키지

빌드 변경 로그의 커밋 중 현재 브랜치에서만 도달 가능한 커밋을 찾아
그 작성자와 빌드 시작자를 알림 대상으로 모읍니다.
"""

from .commit_data import Author, Commit
from .change_set import ChangeLogSet, BuildChangeLog
from .build_context import BuildContext
from .diagnostics import (
    DiagnosticSink,
    LoggingDiagnosticSink,
    StreamDiagnosticSink,
    RecordingDiagnosticSink,
)
from .errors import RecipientProviderError, RepositoryAccessError
from .repository_accessor import (
    RepositoryAccessor,
    GitRepositoryAccessor,
    RepositoryLocation,
    open_repository,
)
from .branch_resolver import BranchResolver, get_branch_from_environment
from .exclusivity_filter import ExclusivityFilter
from .author_aggregator import AuthorAggregator
from .notification_set import NotificationSet
from .recipient_provider import BranchDevelopersRecipientProvider

__all__ = [
    'Author',
    'Commit',
    'ChangeLogSet',
    'BuildChangeLog',
    'BuildContext',
    'DiagnosticSink',
    'LoggingDiagnosticSink',
    'StreamDiagnosticSink',
    'RecordingDiagnosticSink',
    'RecipientProviderError',
    'RepositoryAccessError',
    'RepositoryAccessor',
    'GitRepositoryAccessor',
    'RepositoryLocation',
    'open_repository',
    'BranchResolver',
    'get_branch_from_environment',
    'ExclusivityFilter',
    'AuthorAggregator',
    'NotificationSet',
    'BranchDevelopersRecipientProvider',
]
