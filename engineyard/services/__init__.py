"""
Engine Yard CLI Service Layer

Services that talk to the outside world: the API, git, SSH and local files.
"""

from .api_service import APIService
from .config_service import EYConfig, TokenStore
from .repo_service import Repo
from .server_side_service import ServerSideService
from .ssh_service import SSHService

__all__ = [
    "APIService",
    "EYConfig",
    "TokenStore",
    "Repo",
    "ServerSideService",
    "SSHService",
]
