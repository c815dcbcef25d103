"""Shared test fixtures for the slatus test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from slatus.commands import CommandContext


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own config and API overrides out of every test."""
    monkeypatch.delenv("SLATUS_CONFIG_DIR", raising=False)
    monkeypatch.delenv("SLATUS_API_URL", raising=False)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """A configuration root that does not exist yet (first run)."""
    return tmp_path / "config"


class FakeSlack:
    """Records requests and answers with canned Slack Web API bodies."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.profile: dict = {"status_text": "", "status_emoji": ""}
        self.error: str | None = None
        self.responder: Callable[[httpx.Request], httpx.Response] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responder is not None:
            return self.responder(request)
        if self.error is not None:
            return httpx.Response(200, json={"ok": False, "error": self.error})
        if request.url.path.endswith("users.profile.set"):
            body = json.loads(request.content)
            self.profile = dict(body["profile"])
        return httpx.Response(200, json={"ok": True, "profile": self.profile})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def last_payload(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def fake_slack() -> FakeSlack:
    return FakeSlack()


@pytest.fixture
def ctx(config_dir: Path, fake_slack: FakeSlack) -> CommandContext:
    """Command context wired to *config_dir* and the fake Slack API."""
    return CommandContext.from_config_dir(config_dir, transport=fake_slack.transport)
