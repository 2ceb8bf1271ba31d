"""Engine Yard CLI - Deploy command"""

from typing import Optional

import click

from engineyard.base import EnvironmentCommand
from engineyard.constants import DEFAULT_MIGRATE_COMMAND
from engineyard.exceptions import DeployArgumentError, EngineYardError


class DeployCommand(EnvironmentCommand):
    """Deploy a git ref of the current app to an environment."""

    def __init__(
        self,
        context,
        environment_name: Optional[str] = None,
        ref: Optional[str] = None,
        app_name: Optional[str] = None,
        migrate: Optional[str] = DEFAULT_MIGRATE_COMMAND,
        force: bool = False,
    ):
        super().__init__(context, environment_name)
        self.ref = ref
        self.app_name = app_name
        self.migrate = migrate
        self.force = force

    def resolve_ref(self, environment) -> str:
        """
        Pick the ref to deploy.

        Precedence: --ref (subject to the default branch check), the
        configured default branch, then the checked-out local branch.
        The local branch is not consulted when --app is given.
        """
        ref = environment.resolve_branch(self.ref, self.force)
        if ref:
            return ref

        if self.app_name:
            raise EngineYardError(
                "When specifying the application, you must also specify the ref to deploy",
                context="Usage: ey deploy --app <app name> --ref <branch|tag|ref>",
            )

        ref = self.context.repo.current_branch
        if not ref:
            raise DeployArgumentError()
        return ref

    def execute(self) -> None:
        app = self.resolver.fetch_app(self.app_name) or self.resolver.app_for_repo()
        environment = self.fetch_environment(app)
        ref = self.resolve_ref(environment)

        self.init_logger("deploy", environment.name)
        self.ui.debug(f"Deploying {app.name} ref '{ref}' to {environment.name}")

        self.ui.info("Connecting to the server...")
        self.loudly_check_server_side(environment)

        self.ui.info(f"Running deploy for '{environment.name}' on server...")
        if environment.deploy(app, ref, self.migrate):
            self.ui.success("Deploy complete")
        else:
            raise EngineYardError("Deploy failed")


@click.command("deploy")
@click.option("-e", "--environment", help="Environment in which to deploy this application")
@click.option(
    "-r",
    "--ref",
    "--branch",
    "--tag",
    "ref",
    help="Git ref to deploy. May be a branch, a tag, or a SHA.",
)
@click.option("-a", "--app", "app_name", help="Name of the application to deploy")
@click.option(
    "-m",
    "--migrate",
    default=DEFAULT_MIGRATE_COMMAND,
    show_default=True,
    help="Run migrations via MIGRATE",
)
@click.option("--no-migrate", is_flag=True, help="Do not run migrations")
@click.option(
    "-f",
    "--force",
    is_flag=True,
    help="Force a deploy of the specified ref even if a default branch is set",
)
@click.pass_obj
def deploy(context, environment, ref, app_name, migrate, no_migrate, force):
    """
    Deploy a branch, tag or SHA to an environment.

    \b
    Run from the directory containing the app to deploy. If ey.yml sets a
    default branch for the environment, --ref can be omitted, and a
    different ref is refused unless --force is given.

    \b
    Examples:
      ey deploy
      ey deploy -e production --ref v1.2.0
      ey deploy --app myapp --ref main --no-migrate
    """
    cmd = DeployCommand(
        context,
        environment_name=environment,
        ref=ref,
        app_name=app_name,
        migrate=None if no_migrate else migrate,
        force=force,
    )
    cmd.run()
