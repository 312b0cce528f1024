# haunt/clues/commands.py
"""
Plugin command handlers for the clue codex.

Event scripts issue commands by name with positional string args:

    DiscoverClue 7
    DiscoverAllClues

Trait / story commands belong to other handlers and are not handled here.
"""

from __future__ import annotations

from typing import Callable, Dict, Sequence

from haunt.clues.registry import ClueRegistry
from haunt.debug.debug_logger import log

CommandHandler = Callable[[Sequence[str], ClueRegistry], None]


def _discover_clue(args: Sequence[str], registry: ClueRegistry) -> None:
    if not args:
        log("commands", "DiscoverClue: missing clue id, skipping")
        return
    try:
        clue_id = int(str(args[0]).strip())
    except ValueError:
        log("commands", f"DiscoverClue: {args[0]!r} is not a clue id, skipping")
        return
    registry.discover(clue_id)


def _discover_all_clues(args: Sequence[str], registry: ClueRegistry) -> None:
    added = registry.discover_all()
    log("commands", f"DiscoverAllClues: {added} new clue(s)")


COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "DiscoverClue": _discover_clue,
    "DiscoverAllClues": _discover_all_clues,
}


def run_plugin_command(command: str, args: Sequence[str], registry: ClueRegistry) -> bool:
    """
    Dispatch one plugin command.

    Returns True when the command belongs to the clue codex (even if its
    arguments were bad and it did nothing), False for anyone else's command.
    """
    handler = COMMAND_HANDLERS.get(command)
    if handler is None:
        return False
    handler(list(args), registry)
    return True
