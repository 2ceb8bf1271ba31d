"""Tests for the API client. The HTTP session is mocked."""

from unittest.mock import MagicMock

import pytest
import requests

from engineyard.constants import API_TOKEN_HEADER
from engineyard.exceptions import InvalidCredentialsError, RequestFailedError
from engineyard.services import APIService, EYConfig

ENDPOINT = "https://cloud.example.com/"


def _response(status=200, payload=None, content=b""):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 300
    response.json.return_value = payload if payload is not None else {}
    response.content = content
    response.text = ""
    return response


def _client(*responses, config=None):
    session = MagicMock()
    session.request.side_effect = list(responses)
    return APIService(token="secret", endpoint=ENDPOINT, config=config, session=session), session


APPS = {
    "apps": [
        {
            "id": 1,
            "name": "myapp",
            "repository_uri": "git@github.com:acme/myapp.git",
            "account": {"name": "acme"},
            "environments": [
                {"id": 11, "name": "myapp_production", "ssh_username": "deploy",
                 "app_master": {"id": 5, "public_hostname": "am.example.com"}},
            ],
        }
    ]
}


class TestRequests:
    def test_apps_are_parsed_and_cached(self) -> None:
        config = EYConfig({"environments": {"myapp_production": {"branch": "main"}}})
        client, session = _client(_response(payload=APPS), config=config)

        apps = client.apps()
        assert client.apps() is apps
        assert session.request.call_count == 1

        method, url = session.request.call_args.args
        assert (method, url) == ("GET", "https://cloud.example.com/api/v2/apps")
        assert session.request.call_args.kwargs["headers"][API_TOKEN_HEADER] == "secret"

        env = apps.named("myapp").environments.named("myapp_production")
        assert env.app_master.public_hostname == "am.example.com"
        assert env.default_branch == "main"
        assert env.api is client

    def test_environments(self) -> None:
        payload = {"environments": [{"id": 2, "name": "solo", "apps": [{"name": "a"}, {"name": "b"}]}]}
        client, _ = _client(_response(payload=payload))
        env = client.environments().named("solo")
        assert env.app_names == ["a", "b"]

    def test_logs(self) -> None:
        payload = {"logs": [{"instance_name": "i-1", "main": "main log", "custom": None}]}
        client, session = _client(_response(payload=payload))
        logs = client.environment_logs(11)
        assert session.request.call_args.args[1].endswith("/api/v2/environments/11/logs")
        assert logs[0].instance_name == "i-1"
        assert logs[0].custom is None

    def test_rebuild(self) -> None:
        client, session = _client(_response())
        assert client.rebuild_environment(11) is True
        assert session.request.call_args.args == ("PUT", "https://cloud.example.com/api/v2/environments/11/update_instances")

    def test_upload_recipes_sends_file(self) -> None:
        client, session = _client(_response())
        client.upload_recipes(11, b"tarball")
        files = session.request.call_args.kwargs["files"]
        assert files["file"][1] == b"tarball"


class TestErrors:
    def test_unauthorized(self) -> None:
        client, _ = _client(_response(status=401))
        with pytest.raises(InvalidCredentialsError):
            client.apps()

    def test_server_error(self) -> None:
        response = _response(status=500, payload={"message": "boom"})
        client, _ = _client(response)
        with pytest.raises(RequestFailedError) as exc:
            client.environments()
        assert "HTTP 500" in str(exc.value)
        assert exc.value.context == "boom"

    def test_connection_error(self) -> None:
        client, _ = _client(requests.ConnectionError("refused"))
        with pytest.raises(RequestFailedError, match="Could not reach"):
            client.apps()


class TestAuthenticate:
    def test_returns_token(self) -> None:
        session = MagicMock()
        session.request.return_value = _response(payload={"api_token": "abc"})
        assert APIService.authenticate(ENDPOINT, "me@example.com", "pw", session=session) == "abc"
        assert session.request.call_args.kwargs["data"] == {"email": "me@example.com", "password": "pw"}

    def test_bad_password(self) -> None:
        session = MagicMock()
        session.request.return_value = _response(status=401)
        with pytest.raises(InvalidCredentialsError, match="Invalid email or password"):
            APIService.authenticate(ENDPOINT, "me@example.com", "pw", session=session)
