"""저장소 위치 해석

우선순위:
- 작업 공간: 사용자 지정 작업 공간 > 빌드 컨텍스트 작업 공간 > 빌드의 파일 시스템 작업 공간
- 저장소: 사용자 지정 저장소 (절대 경로는 그대로, 상대 경로는 작업 공간 기준) > 작업 공간
"""

import os
from typing import Optional

from branch_recipients.config.settings import RecipientProviderConfig

from .build_context import BuildContext
from .diagnostics import DiagnosticSink
from .repository_accessor import RepositoryLocation


def resolve_workspace(config: RecipientProviderConfig, context: BuildContext,
                      diagnostics: DiagnosticSink) -> Optional[str]:
    """작업 공간 경로 해석 (찾지 못하면 None)"""
    if config.workspace is not None:
        diagnostics.debug("User-specified workspace path: %s", config.workspace)
        return config.workspace

    workspace = context.workspace or context.build_workspace
    if not workspace:
        diagnostics.debug("Cannot get the path of the workspace")
        return None

    diagnostics.debug("Workspace: %s", workspace)
    return workspace


def resolve_repository_location(config: RecipientProviderConfig, context: BuildContext,
                                diagnostics: DiagnosticSink) -> Optional[RepositoryLocation]:
    """저장소 위치 해석 (작업 공간을 찾지 못하면 None)"""
    workspace = resolve_workspace(config, context, diagnostics)
    if workspace is None:
        return None

    if config.repository is not None:
        repository = os.path.join(workspace, config.repository)
        diagnostics.debug("User-specified repository path: %s", repository)
    else:
        repository = workspace
        diagnostics.debug("Repository path is the same as the workspace path")

    return RepositoryLocation(path=repository, host=context.agent_host)
