"""
Engine Yard CLI Exception Hierarchy

Clean exception hierarchy for consistent error handling across the CLI.
"""

from typing import Optional


class EngineYardError(Exception):
    """Base exception for all Engine Yard CLI errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\n{self.context}"
        return self.message


class ConfigurationError(EngineYardError):
    """Raised when local configuration is invalid."""

    pass


class InvalidCredentialsError(EngineYardError):
    """Raised when the API rejects the stored token."""

    def __init__(self, context: Optional[str] = None):
        super().__init__("Authentication failed", context)


class RequestFailedError(EngineYardError):
    """Raised when an API request fails."""

    pass


class NoCommandError(EngineYardError):
    """Raised when help is requested for an unknown command."""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Could not find command \"{command}\".")


class NoRemotesError(EngineYardError):
    """Raised when the local repository has no git remotes."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"fatal: No git remotes found in {path}")


class NoAppError(EngineYardError):
    """Raised when no app matches the local repository remotes."""

    def __init__(self, urls: list[str], endpoint: str):
        self.urls = urls
        self.endpoint = endpoint
        remotes = "\n\t".join(urls)
        message = (
            "There is no application configured for any of the following remotes:"
            f"\n\t{remotes}"
        )
        context = f"You can add this application at {endpoint}"
        super().__init__(message, context)


class InvalidAppError(EngineYardError):
    """Raised when a named app does not exist."""

    def __init__(self, app_name: str):
        self.app_name = app_name
        super().__init__(f"App '{app_name}' does not exist.")


class AmbiguousAppNameError(EngineYardError):
    """Raised when an app name matches several apps."""

    def __init__(self, app_name: str, matches: list[str]):
        self.app_name = app_name
        self.matches = matches
        message = (
            f"The name '{app_name}' is ambiguous; "
            "it matches all of the following applications:"
        )
        context = "\n".join(f"\t{name}" for name in matches)
        super().__init__(message, context)


class EnvironmentStateError(EngineYardError):
    """Base class for environment lookup and state errors."""

    pass


class NoEnvironmentError(EnvironmentStateError):
    """Raised when a named environment does not exist."""

    def __init__(self, env_name: str):
        self.env_name = env_name
        message = f"No environment named '{env_name}'"
        context = "Run `ey environments` to see the environments for this app."
        super().__init__(message, context)


class EnvironmentUnlinkedError(EnvironmentStateError):
    """Raised when an environment exists but does not run this app."""

    def __init__(self, env_name: str):
        self.env_name = env_name
        super().__init__(
            f"Environment '{env_name}' exists but does not run this application."
        )


class AmbiguousEnvironmentNameError(EnvironmentStateError):
    """Raised when an environment name matches several environments."""

    def __init__(self, env_name: str, matches: list[str]):
        self.env_name = env_name
        self.matches = matches
        message = (
            f"The name '{env_name}' is ambiguous; "
            "it matches all of the following environments:"
        )
        context = "\n".join(f"\t{name}" for name in matches)
        super().__init__(message, context)


class NoSingleEnvironmentError(EnvironmentStateError):
    """Raised when no environment name was given and the app has zero or many."""

    def __init__(self, app_name: str, count: int):
        self.app_name = app_name
        self.count = count
        message = (
            "Unable to determine a single environment for the current application "
            f"'{app_name}' (found {count} environments)"
        )
        context = "Specify one with --environment <name>."
        super().__init__(message, context)


class NoAppMasterError(EnvironmentStateError):
    """Raised when an environment has no app master instance."""

    def __init__(self, env_name: str):
        self.env_name = env_name
        super().__init__(f"There is no app master in environment '{env_name}'")


class ServerSideError(EnvironmentStateError):
    """Raised when the server-side component cannot be checked or installed."""

    pass


class BranchMismatchError(EngineYardError):
    """Raised when an explicit ref conflicts with the configured default branch."""

    def __init__(self, default_branch: str, branch: str):
        self.default_branch = default_branch
        self.branch = branch
        message = f"Your deploy branch is set to '{default_branch}'."
        context = f"If you want to deploy branch '{branch}', use --force."
        super().__init__(message, context)


class DeployArgumentError(EngineYardError):
    """Raised when no ref to deploy can be determined."""

    def __init__(self):
        super().__init__(
            "Please specify a branch to deploy.",
            "Usage: ey deploy [--environment <env>] --ref <branch|tag|ref>",
        )
