"""
Configuration management for the AgentQL MCP Server.

This module builds the immutable server configuration from environment
variables and an optional YAML configuration file.
"""

import math
import os
import yaml
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from pathlib import Path

from .constants import (
    AGENTQL_API_URL,
    DEFAULT_TIMEOUT_SECONDS,
    ENV_API_KEY,
    ENV_API_URL,
    ENV_CONFIG_FILE,
    ENV_LOG_FORMAT,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
    ErrorMessage,
    SERVER_NAME,
    SERVER_VERSION,
)
from .exceptions import ConfigurationError, MissingCredentialError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent.parent.parent / "config" / "server.yaml"

LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration, constructed once at startup.
    
    The API key is never read from the YAML file, only from the environment.
    """
    
    api_key: str
    api_url: str = AGENTQL_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    name: str = SERVER_NAME
    version: str = SERVER_VERSION
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        if not (math.isfinite(self.timeout) and self.timeout > 0):
            raise ConfigurationError(ErrorMessage.INVALID_TIMEOUT)
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Invalid log format '{self.log_format}'. "
                f"Supported: {', '.join(LOG_FORMATS)}"
            )

    def __repr__(self) -> str:
        return (
            f"ServerConfig(api_url={self.api_url!r}, timeout={self.timeout}, "
            f"name={self.name!r}, version={self.version!r}, "
            f"log_level={self.log_level!r}, log_format={self.log_format!r})"
        )


def load_yaml_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the optional YAML configuration file.
    
    Args:
        config_file: Path to the YAML file. Defaults to config/server.yaml
                     relative to the project root.
    
    Returns:
        Parsed configuration, or an empty dict if the file is missing
        or unreadable
    """
    config_path = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
    if not config_path.exists():
        logger.debug(f"Config file not found: {config_path}")
        return {}
    
    try:
        with open(config_path, 'r') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config file {config_path}: {e}")
        return {}
    
    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {config_path}: expected a mapping")
        return {}
    
    logger.info(f"Loaded configuration from {config_path}")
    return data


def _parse_timeout(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"{ErrorMessage.INVALID_TIMEOUT}, got {value!r}"
        ) from e


def load_config(
    config_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ServerConfig:
    """
    Build the server configuration.
    
    Precedence, highest first:
    1. Environment variables
    2. YAML configuration file
    3. Default values
    
    Args:
        config_file: Optional YAML file path. Falls back to the
                     AGENTQL_MCP_CONFIG variable, then config/server.yaml
        environ: Environment mapping (default: os.environ)
    
    Returns:
        Immutable ServerConfig
    
    Raises:
        MissingCredentialError: If AGENTQL_API_KEY is not set
        ConfigurationError: If a configured value is invalid
    """
    env = os.environ if environ is None else environ
    
    api_key = (env.get(ENV_API_KEY) or "").strip()
    if not api_key:
        raise MissingCredentialError(ErrorMessage.MISSING_CREDENTIAL)
    
    if config_file is None and env.get(ENV_CONFIG_FILE):
        config_file = Path(env[ENV_CONFIG_FILE])
    data = load_yaml_config(config_file)
    
    server_section = data.get("server") or {}
    upstream_section = data.get("upstream") or {}
    logging_section = data.get("logging") or {}
    
    timeout = env.get(ENV_TIMEOUT) or upstream_section.get("timeout", DEFAULT_TIMEOUT_SECONDS)
    
    return ServerConfig(
        api_key=api_key,
        api_url=env.get(ENV_API_URL) or upstream_section.get("url", AGENTQL_API_URL),
        timeout=_parse_timeout(timeout),
        name=server_section.get("name", SERVER_NAME),
        version=str(server_section.get("version", SERVER_VERSION)),
        log_level=env.get(ENV_LOG_LEVEL) or logging_section.get("level", "INFO"),
        log_format=env.get(ENV_LOG_FORMAT) or logging_section.get("format", "json"),
        log_file=logging_section.get("file"),
    )
