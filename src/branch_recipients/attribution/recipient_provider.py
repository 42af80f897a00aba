"""브랜치 개발자 수신자 계산 진입점

빌드 하나에 대해 현재 브랜치에만 있는 커밋의 작성자와 빌드 시작자를 계산합니다.
어떤 실패도 빌드를 멈추지 않으며, 가장 보수적인 결과(빌드 시작자만 알림)로 바뀝니다.
"""

import logging
from typing import List, MutableSet, Optional

from branch_recipients.config.settings import RecipientProviderConfig
from branch_recipients.tools.tool_executor import ToolExecutor

from .author_aggregator import AuthorAggregator
from .branch_resolver import BranchResolver, get_branch_from_environment
from .build_context import BuildContext
from .commit_data import Author, Commit
from .diagnostics import DiagnosticSink, LoggingDiagnosticSink
from .errors import RepositoryAccessError
from .exclusivity_filter import ExclusivityFilter
from .notification_set import NotificationSet
from .repository_accessor import open_repository
from .workspace import resolve_repository_location


class BranchDevelopersRecipientProvider:
    """브랜치에서 작업한 개발자를 알림 대상으로 계산"""

    def __init__(self, config: Optional[RecipientProviderConfig] = None,
                 tool_executor: Optional[ToolExecutor] = None,
                 diagnostics: Optional[DiagnosticSink] = None):
        """
        Args:
            config: 수신자 계산 설정 (작업 공간/저장소 경로, 브랜치 변수 등)
            tool_executor: git 명령어 실행기
            diagnostics: 빌드 진단 로그
        """
        self.config = config or RecipientProviderConfig()
        self.tool_executor = tool_executor or ToolExecutor()
        self.diagnostics = diagnostics or LoggingDiagnosticSink(debug_enabled=self.config.debug)
        self.logger = logging.getLogger(__name__)

    def add_recipients(self, context: BuildContext, recipients: MutableSet[Author]) -> NotificationSet:
        """계산한 알림 대상을 외부 수신자 집합에 추가"""
        notification_set = self.compute(context)
        recipients.update(notification_set.recipients)
        return notification_set

    def compute(self, context: BuildContext) -> NotificationSet:
        """알림 대상 계산 (예외를 던지지 않음)"""
        if context.run_id is None:
            self.diagnostics.log("Cannot find the current run!")
            return NotificationSet()

        triggerer = context.triggerer
        if triggerer is None:
            self.diagnostics.debug("Cannot determine the user who triggered the build!")

        try:
            return self._compute_for_run(context, triggerer)
        except RepositoryAccessError as e:
            self.diagnostics.log("Cannot access the Git repository: %s", e)
        except Exception as e:
            self.logger.error(f"브랜치 개발자 계산 실패: {context.run_id} - {e}", exc_info=True)
            self.diagnostics.log("Cannot execute Git commands: %s", e)

        return NotificationSet(triggerer=triggerer)

    def _compute_for_run(self, context: BuildContext, triggerer: Optional[Author]) -> NotificationSet:
        location = resolve_repository_location(self.config, context, self.diagnostics)
        if location is None:
            return NotificationSet(triggerer=triggerer)

        commits = self._get_commits(context)
        override = get_branch_from_environment(
            context.environment, self.diagnostics, self.config.branch_variable
        )

        with open_repository(location, self.tool_executor, self.diagnostics,
                             self.config.git, self.config.remote) as repository:
            branch = BranchResolver(self.diagnostics, override).resolve(repository)
            aggregator = AuthorAggregator(ExclusivityFilter(repository, self.diagnostics),
                                          self.diagnostics)
            return aggregator.aggregate(commits, branch, triggerer)

    def _get_commits(self, context: BuildContext) -> List[Commit]:
        if context.change_log is None:
            self.diagnostics.log("No SCM associated with this run!")
            return []
        return context.change_log.git_commits()
