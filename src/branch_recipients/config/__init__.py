"""Configuration management

YAML configuration file loading and management implementations.
"""

from .settings import RecipientProviderConfig, load_config, get_default_config_path

__all__ = [
    "RecipientProviderConfig",
    "load_config", 
    "get_default_config_path",
]
