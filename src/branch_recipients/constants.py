"""
Git 참조 관련 상수 정의 모듈

이 모듈은 브랜치 이름 정규화와 변경 로그 처리에 쓰이는 상수를 중앙에서 관리합니다.
"""

from typing import FrozenSet


# 현재 체크아웃된 커밋을 가리키는 의사 참조
HEAD = "HEAD"

# 참조 네임스페이스
LOCAL_REFS_PREFIX = "refs/heads/"
REMOTE_REFS_PREFIX = "refs/remotes/"

# 빌드 환경에서 현재 브랜치를 전달하는 기본 변수
DEFAULT_BRANCH_VARIABLE = "GIT_BRANCH"

# 처리 대상 변경 로그 종류
GIT_CHANGE_LOG_KIND = "git"

# 읽기 전용으로 허용되는 git 하위 명령어
READ_ONLY_GIT_COMMANDS: FrozenSet[str] = frozenset({
    'log', 'show', 'diff', 'status', 'branch', 'for-each-ref', 'rev-parse'
})
