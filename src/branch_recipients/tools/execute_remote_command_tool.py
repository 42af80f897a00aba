"""원격 빌드 에이전트에서 git 명령어를 실행하는 도구

ExecuteRemoteCommandTool 클래스 정의입니다.
저장소 작업 사본이 다른 호스트에 있을 때 ssh로 명령어를 전달하고
표준 출력을 그대로 돌려받습니다.
"""

import shlex
import subprocess
from typing import Any, Dict, List, Optional

from .execute_safe_command_tool import is_read_only_git_command
from .tool import Tool
from .tool_result import ToolResult


class ExecuteRemoteCommandTool(Tool):
    """ssh를 통한 원격 읽기 전용 git 명령어 실행 도구"""
    
    @property
    def name(self) -> str:
        return "execute_remote_command"
    
    @property
    def description(self) -> str:
        return "읽기 전용 git 명령어를 원격 호스트의 저장소에서 실행합니다"
    
    def validate_parameters(self, params: Dict[str, Any]) -> bool:
        """파라미터 유효성 검증
        
        Args:
            params: 검증할 파라미터 딕셔너리
            
        Returns:
            bool: 유효성 검증 결과
        """
        for required in ('command', 'host'):
            if not isinstance(params.get(required), str) or not params[required].strip():
                return False
        
        if params.get('cwd') is not None and not isinstance(params['cwd'], str):
            return False
        
        if 'timeout' in params and not isinstance(params['timeout'], int):
            return False
        
        ssh_options = params.get('ssh_options')
        if ssh_options is not None:
            if not isinstance(ssh_options, list) or not all(isinstance(o, str) for o in ssh_options):
                return False
        
        return True
    
    def execute(self, command: str, host: str, cwd: Optional[str] = None,
                timeout: int = 60, ssh_binary: str = "ssh",
                ssh_options: Optional[List[str]] = None) -> ToolResult:
        """원격 호스트에서 읽기 전용 git 명령어를 실행합니다
        
        Args:
            command: 실행할 git 명령어
            host: ssh 대상 호스트 (user@host 형식 허용)
            cwd: 원격 호스트의 작업 디렉토리
            timeout: 타임아웃 (초, 기본값: 60)
            ssh_binary: ssh 실행 파일
            ssh_options: ssh 추가 옵션
            
        Returns:
            ToolResult: 명령어 실행 결과
        """
        if not is_read_only_git_command(command):
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Command blocked by safety filters: {command}"
            )
        
        remote_command = f"cd {shlex.quote(cwd)} && {command}" if cwd else command
        argv = [ssh_binary, *(ssh_options or []), host, remote_command]
        
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                timeout=timeout
            )
        except subprocess.TimeoutExpired:
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Remote command timed out after {timeout} seconds",
            )
        except OSError as e:
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Failed to start ssh: {e}",
            )
        
        stdout = result.stdout or ""
        stderr = result.stderr or ""
        return ToolResult(
            success=result.returncode == 0,
            data={
                "returncode": result.returncode,
                "stdout": stdout,
                "stderr": stderr,
                "command": command,
                "host": host
            },
            error_message=(
                stderr.strip() or f"ssh exited with status {result.returncode}"
            ) if result.returncode != 0 else None,
        )
