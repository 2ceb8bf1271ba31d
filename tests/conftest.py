"""Shared pytest fixtures for the engineyard test suite.

Guidelines
----------
* No network, git or ssh in any test.
* The API client is replaced by ``FakeAPI``; the repository by ``FakeRepo``.
* Command log files go to a temporary directory.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pytest
from click.testing import CliRunner

from engineyard.context import EYContext
from engineyard.exceptions import NoRemotesError
from engineyard.main import cli
from engineyard.models import App, AppCollection, Environment, EnvironmentCollection, Instance, LogEntry
from engineyard.services import EYConfig
from engineyard.ui import UI

MYAPP_URI = "git@github.com:acme/myapp.git"
OTHERAPP_URI = "git@github.com:acme/otherapp.git"


class FakeRepo:
    def __init__(self, urls: Optional[List[str]] = None, current_branch: Optional[str] = "main"):
        self._urls = list(urls or [])
        self.current_branch = current_branch
        self.path = "/src/myapp"

    @property
    def urls(self) -> List[str]:
        if not self._urls:
            raise NoRemotesError(self.path)
        return self._urls


class FakeAPI:
    """In-memory stand-in for APIService."""

    def __init__(self, apps: List[App], environments: List[Environment]):
        self._apps = AppCollection(apps)
        self._environments = EnvironmentCollection(environments)
        self.rebuilt: List[int] = []
        self.recipes_run: List[int] = []
        self.uploads: Dict[int, bytes] = {}
        self.recipe_archive = b""
        self.logs: Dict[int, List[LogEntry]] = {}

    def apps(self) -> AppCollection:
        return self._apps

    def environments(self) -> EnvironmentCollection:
        return self._environments

    def rebuild_environment(self, env_id: int) -> bool:
        self.rebuilt.append(env_id)
        return True

    def run_custom_recipes(self, env_id: int) -> bool:
        self.recipes_run.append(env_id)
        return True

    def upload_recipes(self, env_id: int, archive: bytes) -> bool:
        self.uploads[env_id] = archive
        return True

    def download_recipes(self, env_id: int) -> bytes:
        return self.recipe_archive

    def environment_logs(self, env_id: int) -> List[LogEntry]:
        return self.logs.get(env_id, [])


def build_api(config: Optional[EYConfig] = None) -> FakeAPI:
    """
    Two apps and four environments.

    myapp      -> myapp_production, myapp_staging (no app master)
    otherapp   -> other_production
    (no app)   -> orphan_env
    """
    config = config or EYConfig()

    def env(env_id, name, apps, app_master=True):
        master = Instance(id=env_id * 10, role="app_master", status="running",
                          public_hostname=f"{name}.example.com") if app_master else None
        return Environment(
            id=env_id,
            name=name,
            username="deploy",
            app_master=master,
            instances=[master] if master else [],
            instances_count=1 if master else 0,
            app_names=list(apps),
            default_branch=config.default_branch(name),
        )

    production = env(1, "myapp_production", ["myapp"])
    staging = env(2, "myapp_staging", ["myapp"], app_master=False)
    other = env(3, "other_production", ["otherapp"])
    orphan = env(4, "orphan_env", [])

    myapp = App(id=1, name="myapp", repository_uri=MYAPP_URI, account_name="acme",
                environments=EnvironmentCollection([production, staging]))
    otherapp = App(id=2, name="otherapp", repository_uri=OTHERAPP_URI, account_name="acme",
                   environments=EnvironmentCollection([other]))

    api = FakeAPI([myapp, otherapp], [production, staging, other, orphan])
    for environment in api.environments():
        environment.api = api
    return api


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("EY_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("EYRC", str(tmp_path / "eyrc"))
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.delenv("CLOUD_URL", raising=False)


@pytest.fixture
def log_dir(tmp_path):
    return tmp_path / "logs"


@pytest.fixture
def make_context(tmp_path):
    """Build an EYContext around FakeAPI/FakeRepo."""

    def _make(config_data=None, urls=(MYAPP_URI,), current_branch="main", api=None):
        config = EYConfig(config_data or {})
        workdir = tmp_path / "work"
        workdir.mkdir(exist_ok=True)
        return EYContext(
            ui=UI(),
            config=config,
            repo=FakeRepo(list(urls), current_branch),
            cwd=workdir,
            api=api or build_api(config),
        )

    return _make


@pytest.fixture
def run_cli():
    runner = CliRunner()

    def _run(context, *args):
        return runner.invoke(cli, list(args), obj=context)

    return _run
