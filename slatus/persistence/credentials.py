"""Credential (Slack user token) store."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import InvalidInput, NotConfigured
from ..log import logger
from ..platform import TOKEN_FILE

USER_TOKEN_PREFIX = "xoxp-"


def validate_token(token: str) -> str:
    """Return *token* stripped, or raise if it is not a user token."""
    token = token.strip()
    if not token.startswith(USER_TOKEN_PREFIX):
        raise InvalidInput(
            f"Token should start with '{USER_TOKEN_PREFIX}' (user token)"
        )
    return token


class CredentialStore:
    """Single bearer token kept as the whole content of ``token``."""

    def __init__(self, config_dir: Path) -> None:
        self.path = config_dir / TOKEN_FILE

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, token: str) -> None:
        """Write *token* verbatim and restrict it to the owning user."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        if os.name == "posix":
            os.chmod(self.path, 0o600)
        logger.debug("saved token to %s", self.path)

    def load(self) -> str:
        """Return the saved token, raising :class:`NotConfigured` if absent."""
        try:
            return self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            raise NotConfigured(
                "No token configured. Run: slatus config <token>"
            ) from exc
        except UnicodeDecodeError as exc:
            logger.debug("token file %s is not UTF-8", self.path, exc_info=True)
            raise InvalidInput(
                f"Token file {self.path} is unreadable. Run: slatus config <token>"
            ) from exc
