"""
Environment/App Resolver

Decides which app and environment a command acts on, from explicit
options, ey.yml defaults and the local repository's remotes.
"""

from typing import List, Optional

from engineyard.exceptions import (
    EnvironmentUnlinkedError,
    NoAppError,
    NoEnvironmentError,
    NoRemotesError,
    NoSingleEnvironmentError,
)
from engineyard.models import App, Environment


class EnvironmentResolver:
    """
    App and environment lookups for one invocation.

    Args:
        context: EYContext providing config, repo and the API client
    """

    def __init__(self, context):
        self.context = context

    @property
    def api(self):
        return self.context.ensure_api()

    def fetch_app(self, name: Optional[str]) -> Optional[App]:
        """Named app, or None when no name was given."""
        if name is None:
            return None
        return self.api.apps().match_one_or_raise(name)

    def find_app_for_repo(self) -> Optional[App]:
        """App whose repository URI is one of the local remotes."""
        urls = self.context.repo.urls
        for app in self.api.apps():
            if app.repository_uri in urls:
                return app
        return None

    def app_for_repo(self) -> App:
        """
        Like find_app_for_repo, but a missing app is an error.

        Raises:
            NoRemotesError: If the repository has no remotes
            NoAppError: If no app uses any of the remotes
        """
        app = self.find_app_for_repo()
        if app is None:
            raise NoAppError(self.context.repo.urls, self.context.config.endpoint)
        return app

    def get_apps(self, all_apps: bool = False) -> List[App]:
        if all_apps:
            return list(self.api.apps())
        app = self.find_app_for_repo_quietly()
        return [app] if app else []

    def fetch_environment(self, env_name: Optional[str] = None, app: Optional[App] = None) -> Environment:
        """
        Resolve exactly one environment.

        A named environment is looked up among all environments unless an
        app is given, in which case only that app's environments count.

        Args:
            env_name: Environment name or unambiguous fragment; defaults to
                the ey.yml default environment
            app: App whose environments to search. Without a name it is
                inferred from the repository.

        Raises:
            NoSingleEnvironmentError: No name and the app has zero or several environments
            EnvironmentUnlinkedError: The name exists but not among the given app's environments
            NoEnvironmentError: The name exists nowhere
            AmbiguousEnvironmentNameError: The fragment matches several environments
        """
        env_name = env_name or self.context.config.default_environment

        if not env_name:
            app = app or self.app_for_repo()
            if len(app.environments) != 1:
                raise NoSingleEnvironmentError(app.name, len(app.environments))
            return app.environments[0]

        if app is None:
            return self.api.environments().match_one_or_raise(env_name)

        try:
            return app.environments.match_one_or_raise(env_name)
        except NoEnvironmentError:
            if self.api.environments().named(env_name):
                raise EnvironmentUnlinkedError(env_name)
            raise

    def find_app_for_repo_quietly(self) -> Optional[App]:
        """find_app_for_repo that treats a directory without remotes as no app."""
        try:
            return self.find_app_for_repo()
        except NoRemotesError:
            return None
