"""읽기 전용 git 명령어 실행 도구

ExecuteSafeCommandTool 클래스 정의입니다.
화이트리스트 기반으로 저장소를 변경하지 않는 git 명령어만 실행합니다.
"""

import subprocess
import re
import shlex
from typing import Any, Dict, Optional

from branch_recipients.constants import READ_ONLY_GIT_COMMANDS

from .tool import Tool
from .tool_result import ToolResult


FORBIDDEN_PATTERNS = [
    r'[;&|<>`]', r'\$\(',
    r"\s--output(=|\s)",
]


def is_read_only_git_command(command: str) -> bool:
    """명령어가 허용된 읽기 전용 git 명령어인지 검증
    
    Args:
        command: 검증할 명령어 문자열
        
    Returns:
        bool: 허용 여부
    """
    for pattern in FORBIDDEN_PATTERNS:
        if re.search(pattern, command):
            return False
    
    try:
        tokens = shlex.split(command)
    except ValueError:  # 따옴표 불일치
        return False
    
    if len(tokens) < 2:
        return False
    
    base_command = tokens[0].split('/')[-1]  # 경로에서 명령어만 추출
    if base_command != 'git':
        return False
    
    return tokens[1] in READ_ONLY_GIT_COMMANDS


class ExecuteSafeCommandTool(Tool):
    """읽기 전용 git 명령어를 로컬에서 실행하는 도구"""
    
    @property
    def name(self) -> str:
        return "execute_safe_command"
    
    @property
    def description(self) -> str:
        return "읽기 전용 git 명령어를 로컬 저장소에서 실행합니다"
    
    def validate_parameters(self, params: Dict[str, Any]) -> bool:
        """파라미터 유효성 검증
        
        Args:
            params: 검증할 파라미터 딕셔너리
            
        Returns:
            bool: 유효성 검증 결과
        """
        if not isinstance(params.get('command'), str) or not params['command'].strip():
            return False
        
        if params.get('cwd') is not None and not isinstance(params['cwd'], str):
            return False
        
        if 'timeout' in params and not isinstance(params['timeout'], int):
            return False
        
        return True
    
    def execute(self, command: str, cwd: Optional[str] = None,
                timeout: int = 60) -> ToolResult:
        """읽기 전용 git 명령어를 실행합니다
        
        Args:
            command: 실행할 git 명령어
            cwd: 명령어 실행 디렉토리 (선택사항)
            timeout: 타임아웃 (초, 기본값: 60)
            
        Returns:
            ToolResult: 명령어 실행 결과
        """
        if not is_read_only_git_command(command):
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Command blocked by safety filters: {command}"
            )
        
        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=timeout
            )
        except subprocess.TimeoutExpired:
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Command timed out after {timeout} seconds",
            )
        except OSError as e:
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Failed to execute command: {e}",
            )
        
        stdout = result.stdout or ""
        stderr = result.stderr or ""
        return ToolResult(
            success=result.returncode == 0,
            data={
                "returncode": result.returncode,
                "stdout": stdout,
                "stderr": stderr,
                "command": command
            },
            error_message=(
                stderr.strip() or f"git exited with status {result.returncode}"
            ) if result.returncode != 0 else None,
        )
