"""저장소 접근 계층

저장소가 어디에 있든(오케스트레이터와 같은 호스트 또는 원격 빌드 에이전트)
같은 방식으로 열고, 브랜치 포함 질의를 실행하고, 반드시 해제합니다.
명령어 전달 방식은 ToolExecutor 의 도구 이름으로만 구분되므로
배타성 판단 로직은 전송 방식을 알지 못합니다.
"""

import logging
import shlex
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set

from branch_recipients.config.settings import GitCommandConfig, RemoteExecutionConfig
from branch_recipients.constants import HEAD, LOCAL_REFS_PREFIX, REMOTE_REFS_PREFIX
from branch_recipients.tools.tool_executor import ToolExecutor
from branch_recipients.tools.tool_result import ToolResult

from .branch_name import to_remote_qualified
from .commit_data import Author, Commit
from .diagnostics import DiagnosticSink
from .errors import RepositoryAccessError

# refname, upstream, symref 를 탭으로 구분
BRANCH_REF_FORMAT = "%(refname)%09%(upstream)%09%(symref)"
COMMIT_LOG_FORMAT = "%H%x09%ae%x09%an%x09%s"


@dataclass(frozen=True)
class RepositoryLocation:
    """저장소 작업 사본 위치"""
    path: str
    host: Optional[str] = None

    @property
    def is_remote(self) -> bool:
        return self.host is not None

    def __str__(self) -> str:
        return f"{self.host}:{self.path}" if self.host else self.path


class RepositoryAccessor(ABC):
    """브랜치 포함 질의를 제공하는 저장소 핸들"""

    @abstractmethod
    def branches_containing(self, commit_id: str) -> Set[str]:
        """commit_id 를 포함하는 모든 브랜치 이름 (HEAD 의사 참조 제외)

        실패하면 진단 로그를 남기고 빈 집합을 반환하며 예외를 던지지 않는다.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """핸들 해제"""
        pass

    def __enter__(self) -> 'RepositoryAccessor':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def parse_branch_refs(output: str) -> Set[str]:
    """for-each-ref 출력을 정규화된 브랜치 이름 집합으로 변환

    upstream 이 없는 로컬 브랜치는 같은 출력에 같은 이름의 원격 추적 브랜치
    (<remote>/<name>)가 있으면 그 브랜치로 합친다. 빌드가 원격 브랜치를
    같은 이름의 로컬 브랜치로 체크아웃하는 경우에 해당한다.
    """
    branches: Set[str] = set()
    untracked_locals: Set[str] = set()
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split("\t")
        ref_name = parts[0].strip()
        upstream = parts[1].strip() if len(parts) > 1 else ""
        symref = parts[2].strip() if len(parts) > 2 else ""

        # origin/HEAD 같은 심볼릭 참조는 브랜치가 아니다
        if symref:
            continue
        if not ref_name.startswith((LOCAL_REFS_PREFIX, REMOTE_REFS_PREFIX)):
            continue

        name = to_remote_qualified(ref_name, upstream)
        if name is None:
            continue
        if ref_name.startswith(LOCAL_REFS_PREFIX) and not upstream:
            untracked_locals.add(name)
        else:
            branches.add(name)

    remote_short_names = {branch.split("/", 1)[1] for branch in branches if "/" in branch}
    branches.update(name for name in untracked_locals if name not in remote_short_names)
    return branches


class GitRepositoryAccessor(RepositoryAccessor):
    """git 명령어 기반 저장소 접근

    location.host 가 있으면 ssh 원격 실행 도구로, 없으면 로컬 실행 도구로
    같은 명령어를 전달한다.
    """

    def __init__(self, location: RepositoryLocation, tool_executor: ToolExecutor,
                 diagnostics: DiagnosticSink,
                 git_config: Optional[GitCommandConfig] = None,
                 remote_config: Optional[RemoteExecutionConfig] = None):
        self.location = location
        self.tool_executor = tool_executor
        self.diagnostics = diagnostics
        self.git_config = git_config or GitCommandConfig()
        self.remote_config = remote_config or RemoteExecutionConfig()
        self.logger = logging.getLogger(__name__)
        self._opened = False

    @property
    def is_open(self) -> bool:
        return self._opened

    def open(self) -> None:
        """저장소 확인 후 핸들 획득

        Raises:
            RepositoryAccessError: 원격 실행이 꺼져 있거나 git 저장소가 아닌 경우
        """
        if self.location.is_remote and not self.remote_config.enabled:
            raise RepositoryAccessError(
                f"Repository {self.location} is on a remote host and remote execution is disabled"
            )

        if not self.location.is_remote:
            path_result = self.tool_executor.execute_tool_call(
                "inspect_repository_path", {"path": self.location.path}
            )
            if not path_result.success:
                raise RepositoryAccessError(path_result.error_message)
            if not path_result.data["exists"]:
                raise RepositoryAccessError(f"Repository path does not exist: {self.location}")
            if not path_result.data["is_directory"]:
                raise RepositoryAccessError(f"Repository path is not a directory: {self.location}")

        result = self._run_git(["rev-parse", "--git-dir"])
        if not result.success:
            raise RepositoryAccessError(
                f"Not a git repository: {self.location} ({result.error_message})"
            )

        self._opened = True
        self.diagnostics.log("Invoked in %s", self.location)

    def close(self) -> None:
        if self._opened:
            self._opened = False
            self.logger.debug(f"저장소 핸들 해제: {self.location}")

    def branches_containing(self, commit_id: str) -> Set[str]:
        if not self._opened:
            self.diagnostics.log("Repository %s is not open, cannot query commit %s",
                                 self.location, commit_id)
            return set()

        result = self._run_git([
            "for-each-ref", "--contains", commit_id,
            f"--format={BRANCH_REF_FORMAT}",
            LOCAL_REFS_PREFIX.rstrip("/"), REMOTE_REFS_PREFIX.rstrip("/"),
        ])
        if not result.success:
            self.diagnostics.log("Cannot get the name of branches which contain commit %s: %s",
                                 commit_id, result.error_message)
            return set()

        return parse_branch_refs(result.stdout)

    def commits_between(self, since: str, until: str = HEAD) -> List[Commit]:
        """since..until 범위의 커밋 목록 (오래된 순)

        빌드 변경 로그가 없을 때 CLI 에서 변경 로그를 만드는 용도.

        Raises:
            RepositoryAccessError: git log 실행 실패
        """
        result = self._run_git([
            "log", "--reverse", f"--format={COMMIT_LOG_FORMAT}", f"{since}..{until}"
        ])
        if not result.success:
            raise RepositoryAccessError(f"git log failed: {result.error_message}")

        commits: List[Commit] = []
        for line in result.stdout.splitlines():
            parts = line.split("\t", 3)
            if len(parts) != 4:
                continue
            commit_id, email, name, subject = parts
            commits.append(Commit(
                id=commit_id,
                author=Author(user_id=email, full_name=name),
                message=subject
            ))
        return commits

    def _run_git(self, args: List[str]) -> ToolResult:
        """git 명령어를 저장소 위치에서 실행"""
        command = shlex.join([self.git_config.binary, *args])

        if self.location.is_remote:
            return self.tool_executor.execute_tool_call("execute_remote_command", {
                "command": command,
                "host": self.location.host,
                "cwd": self.location.path,
                "timeout": self.remote_config.timeout_seconds,
                "ssh_binary": self.remote_config.ssh_binary,
                "ssh_options": list(self.remote_config.ssh_options),
            })

        return self.tool_executor.execute_tool_call("execute_safe_command", {
            "command": command,
            "cwd": self.location.path,
            "timeout": self.git_config.timeout_seconds,
        })


@contextmanager
def open_repository(location: RepositoryLocation, tool_executor: ToolExecutor,
                    diagnostics: DiagnosticSink,
                    git_config: Optional[GitCommandConfig] = None,
                    remote_config: Optional[RemoteExecutionConfig] = None,
                    ) -> Iterator[GitRepositoryAccessor]:
    """저장소를 열고 블록 종료 시(예외 포함) 반드시 해제

    Raises:
        RepositoryAccessError: 저장소를 열 수 없는 경우
    """
    accessor = GitRepositoryAccessor(location, tool_executor, diagnostics,
                                     git_config, remote_config)
    accessor.open()
    try:
        yield accessor
    finally:
        accessor.close()
