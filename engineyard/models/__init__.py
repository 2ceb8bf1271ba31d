"""
Engine Yard CLI Domain Models

Dataclass views of the API objects the CLI works with.
"""

from .results import SSHResult
from .ssh import SSHConfig, SSHConnection
from .collections import AppCollection, EnvironmentCollection, NamedCollection
from .environment import Environment, Instance, LogEntry
from .app import App

__all__ = [
    # Results
    "SSHResult",
    # SSH
    "SSHConfig",
    "SSHConnection",
    # Collections
    "NamedCollection",
    "AppCollection",
    "EnvironmentCollection",
    # API objects
    "App",
    "Environment",
    "Instance",
    "LogEntry",
]
