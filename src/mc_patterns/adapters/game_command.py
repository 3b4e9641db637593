"""Boundary for game command transport integrations."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class GameCommand:
    """Canonical command payload directed to the game integration layer."""

    command: str


class GameCommandAdapter(Protocol):
    """Interface to send commands to a running Minecraft instance."""

    def send(self, payload: GameCommand) -> str | None:
        """Dispatch a command payload to the running game instance."""


class BlockReader(Protocol):
    def __call__(self, x: int, y: int, z: int) -> str | None:
        """Return the block id at the given block position, or ``None``."""
