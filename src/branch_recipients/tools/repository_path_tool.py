"""저장소 경로 확인 도구

RepositoryPathTool 클래스 정의입니다.
"""

import os
from typing import Any, Dict

from .tool import Tool
from .tool_result import ToolResult


class RepositoryPathTool(Tool):
    """저장소 작업 사본 경로를 확인하는 도구"""
    
    @property
    def name(self) -> str:
        return "inspect_repository_path"
    
    @property
    def description(self) -> str:
        return "지정된 경로의 존재 여부와 디렉토리 여부를 확인합니다"
    
    def validate_parameters(self, params: Dict[str, Any]) -> bool:
        """파라미터 유효성 검증
        
        Args:
            params: 검증할 파라미터 딕셔너리
            
        Returns:
            bool: 유효성 검증 결과
        """
        path = params.get('path')
        return isinstance(path, str) and bool(path.strip())
    
    def execute(self, path: str) -> ToolResult:
        """지정된 경로를 확인합니다
        
        Args:
            path: 확인할 디렉토리 경로
            
        Returns:
            ToolResult: 경로 존재 여부 및 정보
        """
        try:
            return ToolResult(
                success=True,
                data={
                    "exists": os.path.exists(path),
                    "is_directory": os.path.isdir(path),
                    "path": path
                },
            )
        except OSError as e:
            return ToolResult(
                success=False,
                data=None,
                error_message=f"Failed to inspect path: {e}",
            )
