"""
App Model

An application registered with Engine Yard Cloud.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from engineyard.models.collections import EnvironmentCollection
from engineyard.models.environment import Environment


@dataclass
class App:
    """Application and the environments it is linked to."""

    id: Optional[int]
    name: str
    repository_uri: str = ""
    account_name: Optional[str] = None
    environments: EnvironmentCollection = field(default_factory=EnvironmentCollection)

    @classmethod
    def from_api(cls, data: Dict[str, Any], api: Any = None, config: Any = None) -> "App":
        """
        Build an app from an API payload.

        Nested environments do not repeat their owning app, so this app's
        name is recorded on each of them.
        """
        environments = EnvironmentCollection()
        for env_data in data.get("environments") or []:
            default_branch = config.default_branch(env_data["name"]) if config else None
            env = Environment.from_api(env_data, api=api, default_branch=default_branch)
            if data["name"] not in env.app_names:
                env.app_names.append(data["name"])
            environments.append(env)

        account = data.get("account") or {}
        return cls(
            id=data.get("id"),
            name=data["name"],
            repository_uri=data.get("repository_uri", ""),
            account_name=account.get("name"),
            environments=environments,
        )
