"""브랜치 이름 정규화

git 참조 이름을 비교 가능한 브랜치 이름으로 바꿉니다.

- refs/remotes/origin/main -> origin/main
- refs/heads/main (upstream: refs/remotes/origin/main) -> origin/main
- refs/heads/topic (upstream 없음) -> topic
- HEAD, origin/HEAD -> 브랜치가 아님 (None)

커밋별 포함 브랜치와 HEAD 기준 현재 브랜치가 같은 규칙을 거치므로
정규화 후에는 문자열 동등 비교만 한다.
"""

from typing import Optional

from branch_recipients.constants import HEAD, LOCAL_REFS_PREFIX, REMOTE_REFS_PREFIX

# 빌드 환경 변수에 나타나는 참조 접두사
_OVERRIDE_PREFIXES = (REMOTE_REFS_PREFIX, "remotes/", LOCAL_REFS_PREFIX)


def is_head_reference(name: str) -> bool:
    """HEAD 의사 참조(HEAD, <remote>/HEAD) 여부"""
    return name == HEAD or name.endswith("/" + HEAD)


def strip_ref_prefix(ref_name: str) -> str:
    """refs/heads/, refs/remotes/ 접두사 제거"""
    for prefix in (REMOTE_REFS_PREFIX, LOCAL_REFS_PREFIX):
        if ref_name.startswith(prefix):
            return ref_name[len(prefix):]
    return ref_name


def to_remote_qualified(ref_name: str, upstream_ref: Optional[str] = None) -> Optional[str]:
    """참조를 원격 기준 브랜치 이름으로 변환
    
    로컬 브랜치는 upstream 이 설정되어 있으면 upstream 이름으로 바꿔
    원격 추적 브랜치와 같은 이름이 되도록 한다.
    
    Args:
        ref_name: 전체 참조 이름 (refs/heads/..., refs/remotes/...)
        upstream_ref: 로컬 브랜치의 upstream 참조 (없으면 None 또는 빈 문자열)
        
    Returns:
        정규화된 브랜치 이름, HEAD 의사 참조면 None
    """
    if ref_name.startswith(LOCAL_REFS_PREFIX) and upstream_ref:
        ref_name = upstream_ref
    name = strip_ref_prefix(ref_name)
    if not name or is_head_reference(name):
        return None
    return name


def normalize_branch_override(value: Optional[str]) -> Optional[str]:
    """빌드 환경에서 받은 브랜치 이름 정규화 (빈 값이나 HEAD 는 None)"""
    if value is None:
        return None
    name = value.strip()
    for prefix in _OVERRIDE_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix):]
            break
    if not name or is_head_reference(name):
        return None
    return name
