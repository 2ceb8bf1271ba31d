"""
Engine Yard Cloud API Service

Thin requests-based client for the v2 API. Responses are cached for the
lifetime of the client, which is one CLI invocation.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

import requests

from engineyard.constants import API_PATH, API_TOKEN_HEADER, REQUEST_TIMEOUT, VERSION
from engineyard.exceptions import InvalidCredentialsError, RequestFailedError
from engineyard.models import App, AppCollection, Environment, EnvironmentCollection, LogEntry


class APIService:
    """
    Client for the Engine Yard Cloud API.

    Provides:
    - Authentication (token exchange)
    - App and environment listing
    - Environment actions (rebuild, recipes, logs)
    """

    def __init__(
        self,
        token: Optional[str],
        endpoint: str,
        config: Any = None,
        session: Optional[requests.Session] = None,
    ):
        self.token = token
        self.endpoint = endpoint
        self.config = config
        self.session = session or requests.Session()
        self._apps: Optional[AppCollection] = None
        self._environments: Optional[EnvironmentCollection] = None

    def url(self, path: str) -> str:
        return urljoin(urljoin(self.endpoint, API_PATH), path)

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        """
        Send an API request.

        Raises:
            InvalidCredentialsError: On HTTP 401
            RequestFailedError: On transport errors or other non-2xx responses
        """
        url = self.url(path)
        headers = {
            "Accept": "application/json",
            "User-Agent": f"EngineYardCLI/{VERSION}",
        }
        if self.token:
            headers[API_TOKEN_HEADER] = self.token
        headers.update(kwargs.pop("headers", {}))

        try:
            response = self.session.request(
                method, url, headers=headers, timeout=REQUEST_TIMEOUT, **kwargs
            )
        except requests.RequestException as e:
            raise RequestFailedError(f"Could not reach {url}", context=str(e))

        if response.status_code == 401:
            raise InvalidCredentialsError(
                context="Your API token was rejected. Remove ~/.eyrc and log in again."
            )
        if not response.ok:
            raise RequestFailedError(
                f"{method} {url} failed with HTTP {response.status_code}",
                context=_error_detail(response),
            )
        return response

    @classmethod
    def authenticate(
        cls,
        endpoint: str,
        email: str,
        password: str,
        session: Optional[requests.Session] = None,
    ) -> str:
        """
        Exchange credentials for an API token.

        Returns:
            API token
        """
        client = cls(token=None, endpoint=endpoint, session=session)
        try:
            response = client.request("POST", "authenticate", data={"email": email, "password": password})
        except InvalidCredentialsError:
            raise InvalidCredentialsError(context="Invalid email or password.")
        token = response.json().get("api_token")
        if not token:
            raise RequestFailedError("Authentication response did not include a token")
        return token

    def _default_branch(self, env_name: str) -> Optional[str]:
        return self.config.default_branch(env_name) if self.config else None

    def apps(self) -> AppCollection:
        if self._apps is None:
            payload = self.request("GET", "apps").json()
            self._apps = AppCollection(
                App.from_api(data, api=self, config=self.config)
                for data in payload.get("apps", [])
            )
        return self._apps

    def environments(self) -> EnvironmentCollection:
        if self._environments is None:
            payload = self.request("GET", "environments").json()
            self._environments = EnvironmentCollection(
                Environment.from_api(data, api=self, default_branch=self._default_branch(data["name"]))
                for data in payload.get("environments", [])
            )
        return self._environments

    def rebuild_environment(self, env_id: int) -> bool:
        self.request("PUT", f"environments/{env_id}/update_instances")
        return True

    def run_custom_recipes(self, env_id: int) -> bool:
        self.request("PUT", f"environments/{env_id}/run_custom_recipes")
        return True

    def upload_recipes(self, env_id: int, archive: bytes) -> bool:
        files = {"file": ("recipes.tgz", archive, "application/x-gzip")}
        self.request("POST", f"environments/{env_id}/recipes", files=files)
        return True

    def download_recipes(self, env_id: int) -> bytes:
        response = self.request(
            "GET",
            f"environments/{env_id}/recipes",
            headers={"Accept": "application/octet-stream"},
        )
        return response.content

    def environment_logs(self, env_id: int) -> List[LogEntry]:
        payload = self.request("GET", f"environments/{env_id}/logs").json()
        return [LogEntry.from_api(data) for data in payload.get("logs", [])]


def _error_detail(response: requests.Response) -> Optional[str]:
    try:
        body: Dict[str, Any] = response.json()
    except ValueError:
        return response.text[:200] or None
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or None
    return None
