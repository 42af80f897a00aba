"""CLI 진입점

CI 작업 스크립트에서 현재 브랜치에만 있는 커밋의 작성자를 계산합니다.
"""

import argparse
import json
import os
import sys
import logging
from typing import Optional

from branch_recipients.attribution import (
    Author,
    BranchDevelopersRecipientProvider,
    BuildChangeLog,
    BuildContext,
    ChangeLogSet,
    DiagnosticSink,
    RecordingDiagnosticSink,
    RepositoryAccessError,
    StreamDiagnosticSink,
    open_repository,
)
from branch_recipients.attribution.workspace import resolve_repository_location
from branch_recipients.constants import GIT_CHANGE_LOG_KIND
from branch_recipients.tools.tool_executor import ToolExecutor

from .config.settings import LOG_LEVELS, RecipientProviderConfig, load_config, get_default_config_path


def setup_logging(level: str = "INFO",
                  log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s") -> None:
    """로깅 설정

    Args:
        level: 로그 레벨
        log_format: 로그 형식
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="branch-recipients",
        description="현재 브랜치에만 있는 커밋의 작성자 계산",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
  branch-recipients --change-log changes.json --triggerer alice
  branch-recipients --since origin/main --branch origin/feature-x
  branch-recipients --repository ../app --host agent-01 --format json
        """
    )

    parser.add_argument("--config", "-c", type=str, default=None,
                        help="설정 파일 경로 (기본값: configs/branch-recipients.yml)")
    parser.add_argument("--workspace", "-w", type=str, default=None,
                        help="작업 공간 경로 (기본값: 현재 디렉토리)")
    parser.add_argument("--repository", "-r", type=str, default=None,
                        help="저장소 경로 (상대 경로는 작업 공간 기준)")
    parser.add_argument("--host", type=str, default=None,
                        help="작업 공간이 있는 원격 빌드 에이전트 (ssh 대상)")
    parser.add_argument("--branch", "-b", type=str, default=None,
                        help="현재 브랜치 (기본값: 설정된 환경 변수, 없으면 HEAD 에서 추론)")
    parser.add_argument("--triggerer", "-t", type=str, default=None,
                        help="빌드를 시작한 사용자 ID")

    commits = parser.add_mutually_exclusive_group()
    commits.add_argument("--change-log", type=str, default=None,
                         help="빌드 변경 로그 JSON 파일")
    commits.add_argument("--since", type=str, default=None,
                         help="since..HEAD 범위의 커밋을 변경 로그로 사용")

    parser.add_argument("--format", "-f", choices=["text", "json"], default="text",
                        help="출력 형식 (기본값: text)")
    parser.add_argument("--debug", action="store_true",
                        help="디버그 진단 메시지 출력")
    parser.add_argument("--log-level", "-l", type=str, default=None,
                        choices=LOG_LEVELS,
                        help="로그 레벨 (기본값: 설정 파일 값)")
    return parser


def load_effective_config(args: argparse.Namespace) -> RecipientProviderConfig:
    """설정 파일과 명령행 옵션을 합친 설정"""
    config_path = args.config or get_default_config_path()
    config = load_config(config_path) if config_path else RecipientProviderConfig()

    updates = {}
    if args.repository:
        updates["repository"] = args.repository
    if args.debug:
        updates["debug"] = True
    if args.host:
        updates["remote"] = config.remote.model_copy(update={"enabled": True})
    if args.log_level:
        updates["logging"] = config.logging.model_copy(update={"level": args.log_level})
    return config.model_copy(update=updates)


def build_change_log(args: argparse.Namespace, config: RecipientProviderConfig,
                     context: BuildContext, diagnostics: DiagnosticSink) -> Optional[BuildChangeLog]:
    """명령행 옵션으로 변경 로그 생성 (지정되지 않으면 None)"""
    if args.change_log:
        return BuildChangeLog.from_json(args.change_log)

    if args.since:
        location = resolve_repository_location(config, context, diagnostics)
        if location is None:
            raise RepositoryAccessError("Cannot resolve the repository location")
        with open_repository(location, ToolExecutor(), diagnostics,
                             config.git, config.remote) as repository:
            commits = repository.commits_between(args.since)
        return BuildChangeLog(change_sets=[ChangeLogSet(kind=GIT_CHANGE_LOG_KIND, entries=commits)])

    return None


def main(argv: Optional[list] = None) -> int:
    """메인 함수"""
    args = build_parser().parse_args(argv)

    try:
        config = load_effective_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] 설정을 로드할 수 없습니다: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level, config.logging.format)

    if args.format == "json":
        diagnostics: DiagnosticSink = RecordingDiagnosticSink(debug_enabled=config.debug)
    else:
        diagnostics = StreamDiagnosticSink(sys.stderr, debug_enabled=config.debug)

    environment = dict(os.environ)
    if args.branch:
        environment[config.branch_variable] = args.branch

    context = BuildContext(
        run_id="cli",
        triggerer=Author(user_id=args.triggerer) if args.triggerer else None,
        environment=environment,
        workspace=args.workspace or os.getcwd(),
        agent_host=args.host,
    )

    try:
        context.change_log = build_change_log(args, config, context, diagnostics)
    except (OSError, ValueError, KeyError, RepositoryAccessError) as e:
        print(f"[ERROR] 변경 로그를 읽을 수 없습니다: {e}", file=sys.stderr)
        return 1

    provider = BranchDevelopersRecipientProvider(config, ToolExecutor(), diagnostics)
    notification_set = provider.compute(context)

    if args.format == "json":
        output = notification_set.to_dict()
        output["diagnostics"] = diagnostics.lines
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        for user_id in sorted(author.user_id for author in notification_set.recipients):
            print(user_id)

    return 0


if __name__ == "__main__":
    sys.exit(main())
