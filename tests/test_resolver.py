"""Tests for app/environment resolution (core/resolver.py)."""

import pytest

from conftest import MYAPP_URI

from engineyard.core import EnvironmentResolver
from engineyard.exceptions import (
    AmbiguousEnvironmentNameError,
    EnvironmentUnlinkedError,
    InvalidAppError,
    NoAppError,
    NoEnvironmentError,
    NoRemotesError,
    NoSingleEnvironmentError,
)


@pytest.fixture
def resolver(make_context):
    return EnvironmentResolver(make_context())


class TestFetchApp:
    def test_no_name_returns_none(self, resolver) -> None:
        assert resolver.fetch_app(None) is None

    def test_named_app(self, resolver) -> None:
        assert resolver.fetch_app("otherapp").repository_uri.endswith("otherapp.git")

    def test_unknown_app(self, resolver) -> None:
        with pytest.raises(InvalidAppError):
            resolver.fetch_app("nope")


class TestAppForRepo:
    def test_matches_remote_url(self, resolver) -> None:
        assert resolver.app_for_repo().name == "myapp"

    def test_unknown_remote(self, make_context) -> None:
        resolver = EnvironmentResolver(make_context(urls=["git@github.com:acme/unknown.git"]))
        with pytest.raises(NoAppError) as exc:
            resolver.app_for_repo()
        assert "git@github.com:acme/unknown.git" in str(exc.value)

    def test_no_remotes(self, make_context) -> None:
        resolver = EnvironmentResolver(make_context(urls=()))
        with pytest.raises(NoRemotesError):
            resolver.app_for_repo()

    def test_get_apps(self, make_context) -> None:
        resolver = EnvironmentResolver(make_context(urls=["git@github.com:acme/unknown.git"]))
        assert resolver.get_apps(all_apps=False) == []
        assert [a.name for a in resolver.get_apps(all_apps=True)] == ["myapp", "otherapp"]

    def test_get_apps_without_remotes(self, make_context) -> None:
        resolver = EnvironmentResolver(make_context(urls=()))
        assert resolver.get_apps(all_apps=False) == []


class TestFetchEnvironment:
    def test_named_linked_environment(self, resolver) -> None:
        assert resolver.fetch_environment("myapp_production").id == 1

    def test_fragment_of_linked_environment(self, resolver) -> None:
        assert resolver.fetch_environment("staging").id == 2

    def test_ambiguous_fragment(self, resolver) -> None:
        with pytest.raises(AmbiguousEnvironmentNameError):
            resolver.fetch_environment("myapp")

    def test_environment_of_another_app_without_app(self, resolver) -> None:
        assert resolver.fetch_environment("other_production").id == 3
        assert resolver.fetch_environment("orphan_env").id == 4

    def test_environment_of_another_app_is_unlinked(self, resolver) -> None:
        myapp = resolver.app_for_repo()
        with pytest.raises(EnvironmentUnlinkedError) as exc:
            resolver.fetch_environment("other_production", app=myapp)
        assert "exists but does not run this application" in str(exc.value)

    def test_unknown_environment_is_not_found(self, resolver) -> None:
        with pytest.raises(NoEnvironmentError):
            resolver.fetch_environment("nowhere")
        with pytest.raises(NoEnvironmentError):
            resolver.fetch_environment("nowhere", app=resolver.app_for_repo())

    def test_default_environment_from_config(self, make_context) -> None:
        context = make_context({"environments": {"myapp_staging": {"default": True}}})
        assert EnvironmentResolver(context).fetch_environment().name == "myapp_staging"

    def test_no_name_and_several_environments(self, resolver) -> None:
        with pytest.raises(NoSingleEnvironmentError) as exc:
            resolver.fetch_environment()
        assert exc.value.count == 2

    def test_no_name_and_single_environment(self, resolver) -> None:
        otherapp = resolver.fetch_app("otherapp")
        assert resolver.fetch_environment(app=otherapp).name == "other_production"

    def test_explicit_app_scopes_the_search(self, resolver) -> None:
        otherapp = resolver.fetch_app("otherapp")
        assert resolver.fetch_environment("other", app=otherapp).id == 3
        with pytest.raises(EnvironmentUnlinkedError):
            resolver.fetch_environment("myapp_production", app=otherapp)

    def test_outside_any_repo_searches_all_environments(self, make_context) -> None:
        resolver = EnvironmentResolver(make_context(urls=()))
        assert resolver.fetch_environment("orphan_env").id == 4

    def test_unrecognised_repo_searches_all_environments(self, make_context) -> None:
        resolver = EnvironmentResolver(make_context(urls=["git@example.com:x.git", MYAPP_URI + ".bak"]))
        assert resolver.fetch_environment("other_production").id == 3
