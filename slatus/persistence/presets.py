"""Saved-status preset store."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from ..errors import CorruptStore, NotFound
from ..log import logger
from ..platform import PRESETS_FILE
from ._base import JsonStore


@dataclass(frozen=True)
class Preset:
    """A named status: display text plus emoji (e.g. ``:calendar:``)."""

    text: str
    emoji: str


class PresetStore(JsonStore):
    """Named presets (``{name: {text, emoji}}``) in ``statuses.json``.

    Every mutation is a full load / modify / save cycle.  There is no
    locking, so two concurrent invocations can lose an update.
    """

    def __init__(self, config_dir: Path) -> None:
        super().__init__(config_dir / PRESETS_FILE)

    def load_all(self) -> dict[str, Preset]:
        """Load every preset; an absent file is an empty store."""
        raw = self.load_raw()
        if not isinstance(raw, dict):
            raise CorruptStore(f"Failed to parse {self.path.name}: expected an object")
        presets: dict[str, Preset] = {}
        for name, entry in raw.items():
            if (
                not isinstance(entry, dict)
                or not isinstance(entry.get("text"), str)
                or not isinstance(entry.get("emoji"), str)
            ):
                raise CorruptStore(
                    f"Failed to parse {self.path.name}: bad entry for {name!r}"
                )
            presets[name] = Preset(text=entry["text"], emoji=entry["emoji"])
        return presets

    def save_all(self, presets: dict[str, Preset]) -> None:
        """Replace the whole store with *presets*."""
        self.save_raw(
            {name: asdict(preset) for name, preset in presets.items()},
            sort_keys=True,
        )

    def get(self, name: str) -> Preset:
        """Return the preset called *name* or raise :class:`NotFound`."""
        preset = self.load_all().get(name)
        if preset is None:
            raise NotFound(
                f"Status '{name}' not found. Use 'list' to see saved statuses."
            )
        return preset

    def upsert(self, name: str, text: str, emoji: str) -> Preset:
        """Insert or replace *name* (last write wins)."""
        presets = self.load_all()
        preset = Preset(text=text, emoji=emoji)
        if name in presets:
            logger.debug("overwriting preset %r", name)
        presets[name] = preset
        self.save_all(presets)
        return preset

    def remove(self, name: str) -> bool:
        """Delete *name*; returns False (and writes nothing) if absent."""
        presets = self.load_all()
        if name not in presets:
            return False
        del presets[name]
        self.save_all(presets)
        return True
