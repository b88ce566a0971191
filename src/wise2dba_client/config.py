"""Configuration management for the Wise2DBA client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ConfigurationError

DEFAULT_ENDPOINT = "https://www.ebi.ac.uk/Tools/services/rest/wise2dba"

# Environment variable naming a YAML file with ClientConfig fields
CONFIG_ENV_VAR = "WISE2DBA_CLIENT_CONFIG"


@dataclass
class ClientConfig:
    """Web service client settings."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = 30.0
    poll_interval: float = 3.0
    user_agent_name: str = "wise2dba-client"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not self.endpoint or not self.endpoint.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid endpoint: {self.endpoint}", parameter="endpoint")

        if self.timeout <= 0:
            raise ConfigurationError(f"Invalid timeout: {self.timeout}", parameter="timeout")

        if self.poll_interval < 0:
            raise ConfigurationError(f"Invalid poll_interval: {self.poll_interval}", parameter="poll_interval")

        self.endpoint = self.endpoint.rstrip("/")

    @classmethod
    def from_yaml(cls, yaml_file: Path) -> "ClientConfig":
        """Load configuration from YAML file."""
        yaml_file = Path(yaml_file)
        if not yaml_file.exists():
            raise ConfigurationError(f"Config file not found: {yaml_file}")

        try:
            with open(yaml_file, 'r') as f:
                data = yaml.safe_load(f) or {}
            return cls(**data)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML config: {e}", config_file=str(yaml_file))
        except TypeError as e:
            raise ConfigurationError(f"Invalid config parameters: {e}", config_file=str(yaml_file))

    @classmethod
    def load(cls, endpoint: Optional[str] = None) -> "ClientConfig":
        """
        Build the effective configuration for one invocation.

        Args:
            endpoint: Service endpoint given on the command line, wins over file settings
        """
        config_file = os.environ.get(CONFIG_ENV_VAR)
        config = cls.from_yaml(Path(config_file)) if config_file else cls()

        if endpoint:
            config = cls(
                endpoint=endpoint,
                timeout=config.timeout,
                poll_interval=config.poll_interval,
                user_agent_name=config.user_agent_name,
            )
        return config
