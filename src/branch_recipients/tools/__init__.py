"""Tool implementations

Git command execution tools used by the repository accessor.
"""

from .tool import Tool
from .tool_result import ToolResult
from .execute_safe_command_tool import ExecuteSafeCommandTool, is_read_only_git_command
from .execute_remote_command_tool import ExecuteRemoteCommandTool
from .repository_path_tool import RepositoryPathTool
from .tool_executor import ToolExecutor, ToolGenerator

__all__ = [
    "Tool",
    "ToolResult",
    "ExecuteSafeCommandTool",
    "ExecuteRemoteCommandTool",
    "RepositoryPathTool",
    "ToolExecutor",
    "ToolGenerator",
    "is_read_only_git_command",
]
