"""Live Minecraft command adapters.

These adapters let the matcher run against a real game instance through
minescript, while the rest of the package stays testable in CI where the mod is
not available.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from types import ModuleType
from typing import Callable

from mc_patterns.adapters.game_command import GameCommand, GameCommandAdapter


class MinescriptUnavailableError(RuntimeError):
    """Raised when minescript is not installed or has no supported command API."""


@dataclass(slots=True)
class MinescriptGameCommandAdapter(GameCommandAdapter):
    """Adapter that dispatches commands through a locally-imported `minescript` module."""

    command_prefix: str = "/"

    def __post_init__(self) -> None:
        module = _import_minescript()
        self._executor = self._resolve_executor(module)
        self._block_reader = getattr(module, "getblock", None)

    def send(self, payload: GameCommand) -> str | None:
        command = payload.command
        if self.command_prefix and not command.startswith(self.command_prefix):
            command = f"{self.command_prefix}{command}"

        result = self._executor(command)
        return "" if result is None else str(result)

    def read_block(self, x: int, y: int, z: int) -> str | None:
        if not callable(self._block_reader):
            raise MinescriptUnavailableError("Imported minescript but it exposes no getblock API.")
        return self._block_reader(x, y, z)

    @staticmethod
    def _resolve_executor(module: ModuleType) -> Callable[[str], str | None]:
        for attr in ("execute", "run", "command", "chat_command"):
            fn = getattr(module, attr, None)
            if callable(fn):
                return fn

        raise MinescriptUnavailableError(
            "Imported minescript but found no supported API (expected execute/run/command/chat_command)."
        )


def _import_minescript() -> ModuleType:
    try:
        return importlib.import_module("minescript")
    except Exception as exc:  # noqa: BLE001
        raise MinescriptUnavailableError(
            "Unable to import minescript. Install it and ensure Minecraft + the mod are running."
        ) from exc
