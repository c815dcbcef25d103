"""Slack profile-status client.

Two calls, ``users.profile.set`` and ``users.profile.get``, each a single
request with no retries.  Responses are decoded into a tagged variant
(:class:`ApiSuccess` or :class:`ApiFailure`) keyed on Slack's ``ok`` field,
so a caller cannot reach the profile without having checked it.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Union

import httpx

from .errors import DecodeFailure, RemoteRejected, TransportFailure
from .log import logger
from .preferences import DEFAULT_API_URL

PROFILE_SET = "users.profile.set"
PROFILE_GET = "users.profile.get"


@dataclass(frozen=True)
class ApiSuccess:
    profile: dict[str, Any] | None = None


@dataclass(frozen=True)
class ApiFailure:
    message: str


ApiResult = Union[ApiSuccess, ApiFailure]


@dataclass(frozen=True)
class RemoteStatus:
    """The live status as reported by Slack."""

    text: str = ""
    emoji: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.text and not self.emoji


@dataclass(frozen=True)
class StatusUpdate:
    """Body of a ``users.profile.set`` call."""

    text: str
    emoji: str
    expiration: int = 0

    def to_payload(self) -> dict[str, Any]:
        return {
            "profile": {
                "status_text": self.text,
                "status_emoji": self.emoji,
                "status_expiration": self.expiration,
            }
        }


def expiration_from_minutes(minutes: int, now: float | None = None) -> int:
    """Turn "N minutes from now" into an absolute epoch-seconds expiration.

    ``0`` (or less) means no expiration.
    """
    if minutes <= 0:
        return 0
    if now is None:
        now = time.time()
    return int(now) + minutes * 60


def _text_field(profile: dict[str, Any], key: str) -> str:
    value = profile.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeFailure(f"Failed to parse Slack response: {key} is not a string")
    return value


def decode_response(response: httpx.Response) -> ApiResult:
    """Decode a Slack Web API response body."""
    try:
        body = response.json()
    except ValueError as exc:
        logger.debug(
            "non-JSON response (HTTP %s): %.200r", response.status_code, response.text
        )
        raise DecodeFailure("Failed to parse Slack response") from exc
    if not isinstance(body, dict) or not isinstance(body.get("ok"), bool):
        raise DecodeFailure("Failed to parse Slack response")

    if not body["ok"]:
        return ApiFailure(message=str(body.get("error") or "Unknown error"))

    profile = body.get("profile")
    if profile is not None and not isinstance(profile, dict):
        raise DecodeFailure("Failed to parse Slack response: profile is not an object")
    return ApiSuccess(profile=profile)


class StatusClient:
    """Set and read the authenticated user's Slack status.

    Use as a context manager so the underlying connection pool is closed::

        with StatusClient() as client:
            client.apply_status(token, "Lunch", ":sandwich:", 0)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(transport=transport)

    def __enter__(self) -> StatusClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    # -- operations -----------------------------------------------------------

    def apply_status(self, token: str, text: str, emoji: str, expiration: int) -> None:
        """Overwrite the remote status; ``expiration == 0`` never expires."""
        update = StatusUpdate(text=text, emoji=emoji, expiration=expiration)
        self._unwrap(self._call("POST", PROFILE_SET, token, json=update.to_payload()))
        logger.info("status set: %r %r (expiration=%d)", emoji, text, expiration)

    def clear_status(self, token: str) -> None:
        """Clearing is a set with empty text, empty emoji and no expiration."""
        self.apply_status(token, "", "", 0)

    def fetch_status(self, token: str) -> RemoteStatus:
        """Read the current remote status; missing fields come back empty."""
        profile = self._unwrap(self._call("GET", PROFILE_GET, token))
        if profile is None:
            raise DecodeFailure("No profile in response")
        return RemoteStatus(
            text=_text_field(profile, "status_text"),
            emoji=_text_field(profile, "status_emoji"),
        )

    # -- internals ------------------------------------------------------------

    def _call(self, method: str, endpoint: str, token: str, **kwargs: Any) -> ApiResult:
        url = f"{self.base_url}/{endpoint}"
        headers = {"Authorization": f"Bearer {token}"}
        logger.debug("%s %s", method, url)
        try:
            response = self._http.request(method, url, headers=headers, **kwargs)
        except httpx.TransportError as exc:
            logger.debug("request to %s failed", url, exc_info=True)
            raise TransportFailure(f"Failed to connect to Slack API: {exc}") from exc
        except httpx.DecodingError as exc:
            logger.debug("undecodable body from %s", url, exc_info=True)
            raise DecodeFailure("Failed to parse Slack response") from exc
        return decode_response(response)

    @staticmethod
    def _unwrap(result: ApiResult) -> dict[str, Any] | None:
        if isinstance(result, ApiFailure):
            raise RemoteRejected(result.message)
        return result.profile
