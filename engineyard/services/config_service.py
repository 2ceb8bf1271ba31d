"""
Configuration Service

Loads the per-repository ey.yml and the per-user ~/.eyrc token file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from engineyard.constants import (
    CONFIG_FILE_PATHS,
    DEFAULT_ENDPOINT,
    DEFAULT_EYRC_PATH,
    ENV_ENDPOINT,
    ENV_EYRC,
)
from engineyard.exceptions import ConfigurationError


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}", context=str(e))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


class EYConfig:
    """
    Repository configuration from config/ey.yml or ey.yml.

    Example:
        endpoint: https://cloud.engineyard.com/
        environments:
          myapp_production:
            default: true
            branch: main
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, path: Optional[Path] = None):
        self.data = data or {}
        self.path = path

    @classmethod
    def load(cls, root: Optional[Path] = None) -> "EYConfig":
        root = Path(root) if root else Path.cwd()
        for relative in CONFIG_FILE_PATHS:
            path = root / relative
            if path.is_file():
                return cls(_load_yaml(path), path)
        return cls()

    @property
    def endpoint(self) -> str:
        endpoint = os.environ.get(ENV_ENDPOINT) or self.data.get("endpoint") or DEFAULT_ENDPOINT
        return endpoint if endpoint.endswith("/") else endpoint + "/"

    @property
    def environments(self) -> Dict[str, Dict[str, Any]]:
        environments = self.data.get("environments") or {}
        if not isinstance(environments, dict):
            raise ConfigurationError("'environments' in ey.yml must be a mapping")
        return environments

    @property
    def default_environment(self) -> Optional[str]:
        """Name of the environment marked ``default: true``."""
        for name, settings in self.environments.items():
            if isinstance(settings, dict) and settings.get("default"):
                return name
        return None

    def default_branch(self, env_name: str) -> Optional[str]:
        settings = self.environments.get(env_name) or {}
        if not isinstance(settings, dict):
            return None
        return settings.get("branch")


class TokenStore:
    """The ~/.eyrc file holding the API token."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or os.environ.get(ENV_EYRC) or DEFAULT_EYRC_PATH).expanduser()

    def read(self) -> Dict[str, Any]:
        if not self.path.is_file():
            return {}
        return _load_yaml(self.path)

    @property
    def token(self) -> Optional[str]:
        return self.read().get("api_token")

    def save_token(self, token: str) -> None:
        data = self.read()
        data["api_token"] = token
        self.path.write_text(yaml.safe_dump(data, default_flow_style=False))
        self.path.chmod(0o600)
