"""tool_executor.py 단위 테스트

도구 실행기와 도구 생성기의 단위 테스트입니다.
"""

import pytest
from unittest.mock import MagicMock, patch

from branch_recipients.tools.tool_executor import ToolExecutor, ToolGenerator
from branch_recipients.tools.tool_result import ToolResult
from branch_recipients.tools.tool import Tool
from branch_recipients.tools.execute_safe_command_tool import ExecuteSafeCommandTool
from branch_recipients.tools.execute_remote_command_tool import ExecuteRemoteCommandTool
from branch_recipients.tools.repository_path_tool import RepositoryPathTool


@pytest.mark.unit
class TestToolExecutor:
    """ToolExecutor 단위 테스트"""
    
    def test_execute_tool_call_success(self):
        """도구 호출 성공 테스트"""
        mock_tool = MagicMock(spec=Tool)
        mock_tool.validate_parameters.return_value = True
        mock_tool.execute.return_value = ToolResult(
            success=True,
            data={"stdout": "refs/remotes/origin/main\t\t\n"},
        )
        
        with patch.object(ToolGenerator, 'generate_tool', return_value=mock_tool):
            result = ToolExecutor().execute_tool_call(
                tool_name="execute_safe_command",
                parameters={"command": "git for-each-ref refs/remotes"}
            )
        
        assert result.success is True
        assert result.stdout == "refs/remotes/origin/main\t\t\n"
        assert result.execution_time >= 0
        mock_tool.validate_parameters.assert_called_once_with({"command": "git for-each-ref refs/remotes"})
        mock_tool.execute.assert_called_once_with(command="git for-each-ref refs/remotes")
    
    def test_execute_tool_call_validation_failure(self):
        """파라미터 검증 실패 테스트"""
        mock_tool = MagicMock(spec=Tool)
        mock_tool.validate_parameters.return_value = False
        
        with patch.object(ToolGenerator, 'generate_tool', return_value=mock_tool):
            result = ToolExecutor().execute_tool_call(
                tool_name="execute_safe_command",
                parameters={"invalid_param": "value"}
            )
        
        assert result.success is False
        assert "Invalid parameters for tool 'execute_safe_command'" in result.error_message
        mock_tool.execute.assert_not_called()
    
    def test_execute_tool_call_exception_handling(self):
        """예외 처리 테스트"""
        mock_tool = MagicMock(spec=Tool)
        mock_tool.validate_parameters.return_value = True
        mock_tool.execute.side_effect = RuntimeError("broken pipe")
        
        with patch.object(ToolGenerator, 'generate_tool', return_value=mock_tool):
            result = ToolExecutor().execute_tool_call("execute_safe_command", {"command": "git status"})
        
        assert result.success is False
        assert "Tool execution failed" in result.error_message
        assert "broken pipe" in result.error_message
    
    def test_unknown_tool(self):
        """등록되지 않은 도구 테스트"""
        result = ToolExecutor().execute_tool_call("write_file", {"file_path": "/tmp/x"})
        
        assert result.success is False
        assert "Unknown tool: write_file" in result.error_message
    
    def test_custom_generator(self):
        """생성기 주입 테스트"""
        generator = MagicMock()
        generator.generate_tool.return_value = RepositoryPathTool()
        
        result = ToolExecutor(generator).execute_tool_call("anything", {"path": "/"})
        
        assert result.success is True
        generator.generate_tool.assert_called_once_with("anything")


@pytest.mark.unit
class TestToolGenerator:
    """ToolGenerator 단위 테스트"""
    
    @pytest.mark.parametrize("tool_name,tool_class", [
        ("execute_safe_command", ExecuteSafeCommandTool),
        ("execute_remote_command", ExecuteRemoteCommandTool),
        ("inspect_repository_path", RepositoryPathTool),
    ])
    def test_generate_tool(self, tool_name, tool_class):
        tool = ToolGenerator().generate_tool(tool_name)
        
        assert isinstance(tool, tool_class)
        assert tool.name == tool_name
    
    def test_generate_unknown_tool(self):
        with pytest.raises(ValueError, match="Unknown tool"):
            ToolGenerator().generate_tool("read_file")
