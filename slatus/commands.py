"""Command handlers for the ``slatus`` CLI.

Each ``cmd_*`` function takes a :class:`CommandContext` plus the parsed
arguments and returns a process exit code.  Domain errors propagate to
``__main__.main`` which reports them.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import httpx
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .client import StatusClient, expiration_from_minutes
from .completions import render_completion
from .errors import CorruptStore, InvalidInput
from .log import logger
from .persistence import CredentialStore, PresetStore, validate_token
from .preferences import Preferences, load_preferences, write_default_preferences


def _console() -> Console:
    # emoji=False: ":calendar:" must print as typed, not as a glyph
    return Console(emoji=False, highlight=False, soft_wrap=True)


@dataclass
class CommandContext:
    """Everything a command needs, built once per process."""

    config_dir: Path
    prefs: Preferences
    presets: PresetStore
    credentials: CredentialStore
    console: Console = field(default_factory=_console)
    transport: httpx.BaseTransport | None = None

    @classmethod
    def from_config_dir(
        cls,
        config_dir: Path,
        *,
        console: Console | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> CommandContext:
        return cls(
            config_dir=config_dir,
            prefs=load_preferences(config_dir),
            presets=PresetStore(config_dir),
            credentials=CredentialStore(config_dir),
            console=console or _console(),
            transport=transport,
        )

    def client(self) -> StatusClient:
        return StatusClient(self.prefs.api.base_url, transport=self.transport)


# ---------------------------------------------------------------------------
# Preset management
# ---------------------------------------------------------------------------


def cmd_list(ctx: CommandContext, args: argparse.Namespace) -> int:
    presets = ctx.presets.load_all()

    if getattr(args, "names", False):
        for name in sorted(presets):
            ctx.console.out(name)
        return 0

    if not presets:
        ctx.console.print(
            "No saved statuses. Add one with: slatus add <name> <text> <emoji>"
        )
        return 0

    table = Table(box=None, show_edge=False, pad_edge=False)
    table.add_column("NAME", min_width=15)
    table.add_column("TEXT", min_width=30)
    table.add_column("EMOJI")
    for name in sorted(presets):
        preset = presets[name]
        table.add_row(escape(name), escape(preset.text), escape(preset.emoji))
    ctx.console.print(table)
    return 0


def cmd_add(ctx: CommandContext, args: argparse.Namespace) -> int:
    preset = ctx.presets.upsert(args.name, args.text, args.emoji)
    ctx.console.print(
        f"Saved status '{escape(args.name)}': "
        f"{escape(preset.emoji)} {escape(preset.text)}"
    )
    return 0


def cmd_remove(ctx: CommandContext, args: argparse.Namespace) -> int:
    if ctx.presets.remove(args.name):
        ctx.console.print(f"Removed status '{escape(args.name)}'")
    else:
        ctx.console.print(f"Status '{escape(args.name)}' not found")
    return 0


# ---------------------------------------------------------------------------
# Remote status
# ---------------------------------------------------------------------------


def cmd_set(ctx: CommandContext, args: argparse.Namespace) -> int:
    if args.expires < 0:
        raise InvalidInput("--expires must be zero or a positive number of minutes")
    token = ctx.credentials.load()
    preset = ctx.presets.get(args.name)
    expiration = expiration_from_minutes(args.expires)

    with ctx.client() as client:
        client.apply_status(token, preset.text, preset.emoji, expiration)

    line = f"Status set: {escape(preset.emoji)} {escape(preset.text)}"
    if args.expires > 0:
        line += f" (expires in {args.expires} min)"
    ctx.console.print(line)
    return 0


def cmd_clear(ctx: CommandContext, args: argparse.Namespace) -> int:
    token = ctx.credentials.load()
    with ctx.client() as client:
        client.clear_status(token)
    ctx.console.print("Status cleared")
    return 0


def cmd_current(ctx: CommandContext, args: argparse.Namespace) -> int:
    token = ctx.credentials.load()
    with ctx.client() as client:
        status = client.fetch_status(token)

    if status.is_empty:
        ctx.console.print("No status currently set")
    else:
        ctx.console.print(
            f"Current status: {escape(status.emoji)} {escape(status.text)}"
        )
    return 0


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------


def cmd_config(ctx: CommandContext, args: argparse.Namespace) -> int:
    token = validate_token(args.token)
    ctx.credentials.save(token)
    write_default_preferences(ctx.config_dir)
    ctx.console.print("Token saved")
    return 0


def cmd_completions(ctx: CommandContext, args: argparse.Namespace) -> int:
    ctx.console.out(render_completion(args.shell), end="")
    return 0


def cmd_doctor(ctx: CommandContext, args: argparse.Namespace) -> int:
    """Print where slatus keeps its files and whether they are usable."""
    write_default_preferences(ctx.config_dir)
    ok = True
    lines = [
        "slatus -- configuration check",
        "",
        f"  Config dir:  {ctx.config_dir}",
        f"  API URL:     {ctx.prefs.api.base_url}",
        "",
    ]

    if ctx.credentials.exists():
        lines.append(f"  [ok] {'Token':20s}  {ctx.credentials.path}")
    else:
        lines.append(
            f"  [!!] {'Token':20s}  not configured (run: slatus config <token>)"
        )
        ok = False

    try:
        count = len(ctx.presets.load_all())
    except CorruptStore as exc:
        logger.debug("preset store unreadable", exc_info=True)
        lines.append(f"  [!!] {'Saved statuses':20s}  {exc}")
        ok = False
    else:
        lines.append(f"  [ok] {'Saved statuses':20s}  {count} saved")

    lines.append("")
    lines.append("  All checks passed." if ok else "  Some checks failed.")
    for line in lines:
        ctx.console.print(line, markup=False)
    return 0 if ok else 1


COMMANDS: dict[str, Callable[[CommandContext, argparse.Namespace], int]] = {
    "list": cmd_list,
    "add": cmd_add,
    "remove": cmd_remove,
    "set": cmd_set,
    "clear": cmd_clear,
    "current": cmd_current,
    "config": cmd_config,
    "completions": cmd_completions,
    "doctor": cmd_doctor,
}
