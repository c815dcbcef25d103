"""Persistence layer – each store owns its file path, data format, and I/O."""

from .credentials import CredentialStore, validate_token
from .presets import Preset, PresetStore

__all__ = [
    "CredentialStore",
    "Preset",
    "PresetStore",
    "validate_token",
]
