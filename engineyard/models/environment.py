"""
Environment Models

Read-only views of environments, their instances and logs, as returned by
the Engine Yard Cloud API. Actions on an environment delegate to the API
client or to the server-side component on the app master.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from engineyard.exceptions import BranchMismatchError, NoAppMasterError
from engineyard.models.ssh import SSHConfig


@dataclass
class Instance:
    """A server inside an environment."""

    id: Optional[int]
    role: str = ""
    status: str = ""
    public_hostname: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Instance":
        return cls(
            id=data.get("id"),
            role=data.get("role", ""),
            status=data.get("status", ""),
            public_hostname=data.get("public_hostname", ""),
        )


@dataclass
class LogEntry:
    """Configuration logs of one instance."""

    instance_name: str
    main: Optional[str] = None
    custom: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "LogEntry":
        return cls(
            instance_name=data.get("instance_name", ""),
            main=data.get("main") or None,
            custom=data.get("custom") or None,
        )


@dataclass
class Environment:
    """A named deployment target (set of servers) running one or more apps."""

    id: Optional[int]
    name: str
    username: str = ""
    app_master: Optional[Instance] = None
    instances: List[Instance] = field(default_factory=list)
    instances_count: int = 0
    framework_env: str = "production"
    app_names: List[str] = field(default_factory=list)
    account_name: Optional[str] = None
    default_branch: Optional[str] = None
    api: Any = field(default=None, repr=False, compare=False)

    @classmethod
    def from_api(
        cls,
        data: Dict[str, Any],
        api: Any = None,
        default_branch: Optional[str] = None,
    ) -> "Environment":
        """
        Build an environment from an API payload.

        Args:
            data: Environment JSON object
            api: API client used for environment actions
            default_branch: Deploy branch configured locally for this environment
        """
        app_master = data.get("app_master")
        instances = [Instance.from_api(i) for i in data.get("instances") or []]
        account = data.get("account") or {}
        return cls(
            id=data.get("id"),
            name=data["name"],
            username=data.get("ssh_username") or data.get("username", ""),
            app_master=Instance.from_api(app_master) if app_master else None,
            instances=instances,
            instances_count=data.get("instances_count", len(instances)),
            framework_env=data.get("framework_env") or "production",
            app_names=[a["name"] for a in data.get("apps") or [] if "name" in a],
            account_name=account.get("name"),
            default_branch=default_branch,
            api=api,
        )

    def resolve_branch(self, ref: Optional[str], force: bool = False) -> Optional[str]:
        """
        Pick the ref to deploy.

        An explicit ref wins over the configured default branch only when
        ``force`` is set or it names the same branch.

        Raises:
            BranchMismatchError: If ref conflicts with the default branch
        """
        if ref and self.default_branch and ref != self.default_branch and not force:
            raise BranchMismatchError(self.default_branch, ref)
        return ref or self.default_branch

    def require_app_master(self) -> Instance:
        if self.app_master is None:
            raise NoAppMasterError(self.name)
        return self.app_master

    @property
    def ssh_config(self) -> SSHConfig:
        return SSHConfig(user=self.username)

    @property
    def hostnames(self) -> List[str]:
        return [i.public_hostname for i in self.instances if i.public_hostname]

    def server_side(self):
        """Server-side component driver bound to the app master."""
        from engineyard.services.server_side_service import ServerSideService

        return ServerSideService(self.require_app_master().public_hostname, self.ssh_config)

    def ensure_server_component(self, callback: Optional[Callable[[str], None]] = None) -> None:
        self.server_side().ensure_present(callback)

    def deploy(self, app, ref: str, migrate: Optional[str] = None) -> bool:
        return self.server_side().deploy(
            app_name=app.name,
            repository_uri=app.repository_uri,
            ref=ref,
            framework_env=self.framework_env,
            instances=self.hostnames,
            migrate=migrate,
        )

    def rollback(self, app) -> bool:
        return self.server_side().rollback(
            app_name=app.name,
            framework_env=self.framework_env,
            instances=self.hostnames,
        )

    def put_up_maintenance_page(self, app) -> bool:
        return self.server_side().enable_maintenance_page(app.name, self.hostnames)

    def take_down_maintenance_page(self, app) -> bool:
        return self.server_side().disable_maintenance_page(app.name, self.hostnames)

    def rebuild(self) -> bool:
        return self.api.rebuild_environment(self.id)

    def run_custom_recipes(self) -> bool:
        return self.api.run_custom_recipes(self.id)

    def upload_recipes(self, root: Path) -> bool:
        from engineyard.services.recipes_service import archive_recipes

        return self.api.upload_recipes(self.id, archive_recipes(root))

    def download_recipes(self, root: Path) -> None:
        from engineyard.services.recipes_service import ensure_no_recipes, extract_recipes

        ensure_no_recipes(root)
        extract_recipes(self.api.download_recipes(self.id), root)

    def logs(self) -> List[LogEntry]:
        return self.api.environment_logs(self.id)
