"""Tests for name matching in app and environment collections."""

import pytest

from engineyard.exceptions import (
    AmbiguousAppNameError,
    AmbiguousEnvironmentNameError,
    InvalidAppError,
    NoEnvironmentError,
)
from engineyard.models import App, AppCollection, Environment, EnvironmentCollection


def _envs(*names):
    return EnvironmentCollection(Environment(id=i, name=n) for i, n in enumerate(names))


class TestEnvironmentCollection:
    def test_named_requires_exact_name(self) -> None:
        envs = _envs("app_production", "app_staging")
        assert envs.named("app_staging").name == "app_staging"
        assert envs.named("staging") is None

    def test_exact_match_beats_substring_matches(self) -> None:
        envs = _envs("production", "production_old")
        assert envs.match_one("production").name == "production"

    def test_unique_substring_matches(self) -> None:
        envs = _envs("app_production", "app_staging")
        assert envs.match_one("stag").name == "app_staging"

    def test_several_substring_matches_are_ambiguous(self) -> None:
        envs = _envs("app_production", "app_staging")
        with pytest.raises(AmbiguousEnvironmentNameError) as exc:
            envs.match_one("app")
        assert exc.value.matches == ["app_production", "app_staging"]
        assert "ambiguous" in str(exc.value)

    def test_no_match(self) -> None:
        envs = _envs("app_production")
        assert envs.match_one("qa") is None
        with pytest.raises(NoEnvironmentError, match="No environment named 'qa'"):
            envs.match_one_or_raise("qa")


class TestAppCollection:
    def test_errors_are_app_specific(self) -> None:
        apps = AppCollection([App(id=1, name="blog"), App(id=2, name="blog_admin"), App(id=3, name="shop")])
        assert apps.match_one_or_raise("shop").id == 3
        with pytest.raises(InvalidAppError):
            apps.match_one_or_raise("crm")
        with pytest.raises(AmbiguousAppNameError):
            apps.match_one_or_raise("og")
