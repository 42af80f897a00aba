"""cli.py 단위 테스트"""

import pytest

from branch_recipients.cli import main


@pytest.mark.unit
class TestCliConfigErrors:
    
    def test_invalid_log_level_in_config(self, temp_dir, capsys):
        config_file = temp_dir / "branch-recipients.yml"
        config_file.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
        
        exit_code = main(["--config", str(config_file), "--workspace", str(temp_dir)])
        
        assert exit_code == 1
        captured = capsys.readouterr()
        assert "[ERROR]" in captured.err
        assert "LOUD" in captured.err
        assert captured.out == ""
    
    def test_missing_config_file(self, temp_dir, capsys):
        exit_code = main(["--config", str(temp_dir / "absent.yml")])
        
        assert exit_code == 1
        assert "Config file not found" in capsys.readouterr().err
