"""Engine Yard CLI - Recipes commands"""

import click

from engineyard.base import EnvironmentCommand
from engineyard.exceptions import EngineYardError


class RecipesApplyCommand(EnvironmentCommand):
    """Run uploaded chef recipes on an environment."""

    def execute(self) -> None:
        env = self.fetch_environment()
        self.init_logger("recipes-apply", env.name)
        if not env.run_custom_recipes():
            raise EngineYardError(f"Could not start recipes for {env.name}")
        self.ui.say(f"Uploaded recipes started for {env.name}")


class RecipesUploadCommand(EnvironmentCommand):
    """Upload ./cookbooks to an environment."""

    def execute(self) -> None:
        env = self.fetch_environment()
        self.init_logger("recipes-upload", env.name)
        if not env.upload_recipes(self.context.cwd):
            raise EngineYardError(f"Recipe upload failed for {env.name}")
        self.ui.say(f"Recipes uploaded successfully for {env.name}")


class RecipesDownloadCommand(EnvironmentCommand):
    """Download an environment's recipes into ./cookbooks."""

    def execute(self) -> None:
        env = self.fetch_environment()
        self.init_logger("recipes-download", env.name)
        env.download_recipes(self.context.cwd)
        self.ui.say(f"Recipes downloaded successfully for {env.name}")


@click.group("recipes")
def recipes():
    """Commands related to chef recipes."""


@recipes.command("apply")
@click.option("-e", "--environment", help="Environment in which to apply recipes")
@click.pass_obj
def recipes_apply(context, environment):
    """
    Run uploaded chef recipes on specified environment.

    \b
    This is similar to 'ey rebuild' except Engine Yard's main configuration
    step is skipped.
    """
    RecipesApplyCommand(context, environment).run()


@recipes.command("upload")
@click.option("-e", "--environment", help="Environment that will receive the recipes")
@click.pass_obj
def recipes_upload(context, environment):
    """
    Upload custom chef recipes to specified environment.

    \b
    The current directory should contain a subdirectory named "cookbooks"
    to be uploaded.
    """
    RecipesUploadCommand(context, environment).run()


@recipes.command("download")
@click.option("-e", "--environment", help="Environment for which to download the recipes")
@click.pass_obj
def recipes_download(context, environment):
    """
    Download custom chef recipes from specified environment.

    \b
    The recipes are unpacked into a directory called "cookbooks" in the
    current directory, which must not exist yet.
    """
    RecipesDownloadCommand(context, environment).run()
