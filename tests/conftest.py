"""branch_recipients 테스트를 위한 pytest 설정"""

import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Dict, Generator, Iterable, List, Optional, Set

import pytest

from branch_recipients.attribution import (
    Author,
    Commit,
    RecordingDiagnosticSink,
    RepositoryAccessor,
)
from branch_recipients.tools.tool_result import ToolResult


def pytest_configure(config):
    """pytest 설정을 구성합니다. 단위/통합 테스트용 마커들을 등록합니다."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


class FakeRepository(RepositoryAccessor):
    """브랜치 포함 결과가 고정된 저장소"""

    def __init__(self, containment: Dict[str, Iterable[str]]):
        self.containment = {commit_id: set(branches) for commit_id, branches in containment.items()}
        self.queries: List[str] = []
        self.closed = False

    def branches_containing(self, commit_id: str) -> Set[str]:
        self.queries.append(commit_id)
        return set(self.containment.get(commit_id, set()))

    def close(self) -> None:
        self.closed = True


class FakeGitExecutor:
    """ToolExecutor 대역 - git 명령어를 해석해 미리 정한 for-each-ref 출력을 반환"""

    def __init__(self, refs_by_commit: Optional[Dict[str, List[str]]] = None,
                 failing_commits: Iterable[str] = (), is_repository: bool = True):
        self.refs_by_commit = refs_by_commit or {}
        self.failing_commits = set(failing_commits)
        self.is_repository = is_repository
        self.calls: List[Dict] = []

    def execute_tool_call(self, tool_name: str, parameters: Dict) -> ToolResult:
        self.calls.append({"tool": tool_name, "parameters": parameters})

        if tool_name == "inspect_repository_path":
            return ToolResult(success=True, data={
                "exists": True, "is_directory": True, "path": parameters["path"]
            })

        tokens = shlex.split(parameters["command"])
        subcommand = tokens[1]
        if subcommand == "rev-parse":
            if not self.is_repository:
                return _failure("fatal: not a git repository")
            return _success(".git\n")

        if subcommand == "for-each-ref":
            commit_id = tokens[tokens.index("--contains") + 1]
            if commit_id in self.failing_commits:
                return _failure(f"error: malformed object name {commit_id}")
            lines = self.refs_by_commit.get(commit_id, [])
            return _success("".join(line + "\n" for line in lines))

        return _failure(f"unexpected command: {parameters['command']}")

    def queried_commits(self) -> List[str]:
        result = []
        for call in self.calls:
            tokens = shlex.split(call["parameters"].get("command", "git noop"))
            if "--contains" in tokens:
                result.append(tokens[tokens.index("--contains") + 1])
        return result


def _success(stdout: str) -> ToolResult:
    return ToolResult(success=True, data={"returncode": 0, "stdout": stdout, "stderr": ""})


def _failure(stderr: str) -> ToolResult:
    return ToolResult(success=False, data={"returncode": 128, "stdout": "", "stderr": stderr},
                      error_message=stderr)


def remote_ref(name: str) -> str:
    """for-each-ref 출력 형식의 원격 추적 브랜치 라인"""
    return f"refs/remotes/{name}\t\t"


def local_ref(name: str, upstream: str = "") -> str:
    """for-each-ref 출력 형식의 로컬 브랜치 라인"""
    upstream_ref = f"refs/remotes/{upstream}" if upstream else ""
    return f"refs/heads/{name}\t{upstream_ref}\t"


@pytest.fixture
def diagnostics() -> RecordingDiagnosticSink:
    return RecordingDiagnosticSink(debug_enabled=True)


@pytest.fixture
def alice() -> Author:
    return Author(user_id="alice", full_name="Alice Kim")


@pytest.fixture
def bob() -> Author:
    return Author(user_id="bob", full_name="Bob Lee")


@pytest.fixture
def carol() -> Author:
    return Author(user_id="carol", full_name="Carol Park")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """테스트용 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def make_commit(commit_id: str, author: Author) -> Commit:
    return Commit(id=commit_id, author=author)


# 실제 git 저장소 픽스처

class GitTestRepository:
    """통합 테스트용 git 저장소 빌더"""

    def __init__(self, path: Path):
        self.path = path
        self.m1 = self.m2 = self.f1 = self.f2 = ""

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", "-c", "commit.gpgsign=false", *args],
            cwd=self.path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def commit(self, message: str, author: str) -> str:
        self.git("-c", f"user.name={author.title()}", "-c", f"user.email={author}@example.com",
                 "commit", "--allow-empty", "-q", "-m", message)
        return self.git("rev-parse", "HEAD")

    def publish(self, branch: str, commit_id: str) -> None:
        """원격 추적 브랜치 생성 (fetch 를 흉내)"""
        self.git("update-ref", f"refs/remotes/origin/{branch}", commit_id)

    def track(self, branch: str) -> None:
        """로컬 브랜치의 upstream 을 origin/<branch> 로 설정"""
        self.git("config", f"branch.{branch}.remote", "origin")
        self.git("config", f"branch.{branch}.merge", f"refs/heads/{branch}")


@pytest.fixture
def git_repo(temp_dir: Path) -> GitTestRepository:
    """main 과 feature-x 브랜치가 있는 저장소

    main:      m1(alice) - m2(bob)
    feature-x:                    \\- f1(carol) - f2(dave)   <- HEAD

    origin/main, origin/feature-x 가 각 로컬 브랜치의 upstream 이며
    origin/HEAD 는 origin/main 을 가리킨다.
    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    repo = GitTestRepository(temp_dir / "repo")
    repo.path.mkdir()
    repo.git("init", "-q")
    repo.git("symbolic-ref", "HEAD", "refs/heads/main")
    repo.git("config", "remote.origin.url", str(temp_dir / "origin.git"))
    repo.git("config", "remote.origin.fetch", "+refs/heads/*:refs/remotes/origin/*")

    repo.m1 = repo.commit("initial", "alice")
    repo.m2 = repo.commit("main work", "bob")
    repo.publish("main", repo.m2)
    repo.track("main")

    repo.git("checkout", "-q", "-b", "feature-x")
    repo.f1 = repo.commit("feature work", "carol")
    repo.f2 = repo.commit("more feature work", "dave")
    repo.publish("feature-x", repo.f2)
    repo.track("feature-x")

    repo.git("symbolic-ref", "refs/remotes/origin/HEAD", "refs/remotes/origin/main")
    return repo
