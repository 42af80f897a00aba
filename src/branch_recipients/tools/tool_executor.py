"""도구 이름 기반 실행기

도구 이름과 파라미터를 받아 검증 후 실제 도구를 호출합니다.
저장소 접근 계층은 이 실행기를 통해서만 명령어를 실행하므로
로컬/원격 실행 방식이 알고리즘에 드러나지 않습니다.
"""

import time
from typing import Any, Dict, Optional

from .execute_remote_command_tool import ExecuteRemoteCommandTool
from .execute_safe_command_tool import ExecuteSafeCommandTool
from .repository_path_tool import RepositoryPathTool
from .tool import Tool
from .tool_result import ToolResult


class ToolExecutor:
    """도구 실행기 - 도구 이름으로 실제 도구 함수 호출"""
    
    def __init__(self, generator: Optional["ToolGenerator"] = None):
        self.generator = generator or ToolGenerator()
    
    def execute_tool_call(self, tool_name: str, parameters: Dict[str, Any]) -> ToolResult:
        """도구 호출을 실행합니다
        
        Args:
            tool_name: 실행할 도구 이름
            parameters: 도구 실행에 필요한 파라미터
            
        Returns:
            ToolResult: 도구 실행 결과 (예외는 실패 결과로 변환됨)
        """
        start_time = time.time()
        try:
            tool = self.generator.generate_tool(tool_name)
            
            if not tool.validate_parameters(parameters):
                return ToolResult(
                    success=False,
                    data=None,
                    error_message=f"Invalid parameters for tool '{tool_name}': {parameters}",
                )
            
            result = tool.execute(**parameters)
            result.execution_time = time.time() - start_time
            return result
        
        except Exception as e:
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Tool execution failed: {str(e)}",
                execution_time=time.time() - start_time
            )
    

class ToolGenerator:
    """도구 이름으로 도구 인스턴스를 생성"""

    def generate_tool(self, tool_name: str) -> Tool:
        """Generate a tool"""
        if tool_name == "execute_safe_command":
            return ExecuteSafeCommandTool()
        elif tool_name == "execute_remote_command":
            return ExecuteRemoteCommandTool()
        elif tool_name == "inspect_repository_path":
            return RepositoryPathTool()
        else:
            raise ValueError(f"Unknown tool: {tool_name}")
