"""도구 실행 결과

ToolResult 클래스 정의입니다.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ToolResult:
    """도구 실행 결과"""
    success: bool
    data: Any
    error_message: Optional[str] = None
    execution_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def stdout(self) -> str:
        """명령어 표준 출력 (명령어 도구가 아니면 빈 문자열)"""
        if isinstance(self.data, dict):
            return self.data.get('stdout') or ""
        return ""

