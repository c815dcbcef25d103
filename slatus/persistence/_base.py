"""Base JSON persistence store."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from ..errors import CorruptStore
from ..log import logger


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class JsonStore:
    """JSON file store with atomic write.

    Subclasses override ``_default()`` to provide the empty-state value,
    returned only when the file is absent.  A file that exists but does not
    parse raises :class:`CorruptStore`.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict | list:
        """Read and parse the JSON file, returning ``_default()`` if absent."""
        if not self.path.exists():
            return self._default()
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.debug("failed to load JSON store from %s", self.path, exc_info=True)
            raise CorruptStore(f"Failed to parse {self.path.name}: {exc}") from exc

    def save_raw(self, data: dict | list, *, sort_keys: bool = False) -> None:
        """Write *data* as pretty-printed JSON, creating parents as needed.

        The document goes to a temp file in the same directory which is then
        renamed over the target, so a crash never leaves a truncated file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        tmp = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text + "\n")
            if os.name == "posix":
                # mkstemp creates 0600; give the store the mode open() would
                os.chmod(tmp, 0o666 & ~_current_umask())
            tmp.replace(self.path)
        except BaseException:
            tmp.unlink(missing_ok=True)
            raise

    # -- override point -------------------------------------------------------

    def _default(self) -> dict | list:  # noqa: PLR6301
        """Return the empty-state value for this store (dict by default)."""
        return {}
