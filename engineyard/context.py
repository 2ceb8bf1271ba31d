"""
Invocation Context

Everything a command needs from its surroundings, created once per run
and handed to each command through click's ``Context.obj``.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click

from engineyard.constants import ENV_DEBUG
from engineyard.services import APIService, EYConfig, Repo, TokenStore
from engineyard.ui import UI


@dataclass
class EYContext:
    """UI, configuration, repository and (lazily) the API client."""

    ui: UI
    config: EYConfig
    repo: Repo
    cwd: Path
    api: Optional[APIService] = None
    token_store: Optional[TokenStore] = None

    @classmethod
    def from_environment(cls, cwd: Optional[Path] = None) -> "EYContext":
        cwd = Path(cwd) if cwd else Path.cwd()
        return cls(
            ui=UI(verbose=bool(os.environ.get(ENV_DEBUG))),
            config=EYConfig.load(cwd),
            repo=Repo(cwd),
            cwd=cwd,
            token_store=TokenStore(),
        )

    def ensure_api(self) -> APIService:
        """
        Ensure the API client is initialized.

        Prompts for credentials when no token is stored yet.
        """
        if self.api is None:
            store = self.token_store or TokenStore()
            token = store.token
            if not token:
                token = self.login(store)
            self.api = APIService(token=token, endpoint=self.config.endpoint, config=self.config)
        return self.api

    def login(self, store: TokenStore) -> str:
        self.ui.info(f"We need to fetch your API token; please log in to {self.config.endpoint}")
        email = click.prompt("Email")
        password = click.prompt("Password", hide_input=True)
        token = APIService.authenticate(self.config.endpoint, email, password)
        store.save_token(token)
        return token
