"""설정 관리 모듈

YAML 설정 파일을 로드하고 검증하는 기능을 제공합니다.
Pydantic을 사용하여 타입 안전성과 검증을 보장합니다.
"""

import os
from typing import List, Optional
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator
import logging

from branch_recipients.constants import DEFAULT_BRANCH_VARIABLE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "branch-recipients.yml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GitCommandConfig(BaseModel):
    """git 명령어 실행 설정"""
    binary: str = "git"
    timeout_seconds: int = Field(default=60, gt=0)


class RemoteExecutionConfig(BaseModel):
    """원격 빌드 에이전트 실행 설정"""
    enabled: bool = False
    ssh_binary: str = "ssh"
    ssh_options: List[str] = Field(default_factory=lambda: ["-o", "BatchMode=yes"])
    timeout_seconds: int = 120

    @field_validator('timeout_seconds')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError(f"Remote timeout must be positive: {v}")
        return v


class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}: {v}")
        return level


class RecipientProviderConfig(BaseModel):
    """수신자 계산 설정"""
    workspace: Optional[str] = None
    repository: Optional[str] = None
    branch_variable: str = DEFAULT_BRANCH_VARIABLE
    debug: bool = False
    git: GitCommandConfig = Field(default_factory=GitCommandConfig)
    remote: RemoteExecutionConfig = Field(default_factory=RemoteExecutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator('workspace', 'repository')
    @classmethod
    def blank_path_is_unset(cls, v):
        if v is not None and not v.strip():
            return None
        return v


def load_config(config_path: str) -> RecipientProviderConfig:
    """설정 파일 로드
    
    Args:
        config_path: 설정 파일 경로
        
    Returns:
        로드된 설정 객체
        
    Raises:
        FileNotFoundError: 설정 파일이 존재하지 않는 경우
        ValueError: 설정 파일 형식이 잘못된 경우
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}
        
        config = RecipientProviderConfig(**config_data)
        logger.info(f"Loaded configuration from: {config_path}")
        return config
        
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML format: {e}")
    except Exception as e:
        raise ValueError(f"Failed to load config: {e}")


def get_default_config_path() -> Optional[str]:
    """기본 설정 파일 경로 반환 (없으면 None)"""
    current_dir_config = Path("./configs") / DEFAULT_CONFIG_FILENAME
    if current_dir_config.exists():
        return str(current_dir_config)
    
    # 패키지 디렉토리에서 설정 파일 찾기
    package_dir = Path(__file__).parent.parent.parent.parent
    package_config = package_dir / "configs" / DEFAULT_CONFIG_FILENAME
    if package_config.exists():
        return str(package_config)
    
    return None
