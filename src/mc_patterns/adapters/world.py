"""World query/mutation collaborators consumed by the block matcher."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Protocol

from mc_patterns.adapters.game_command import BlockReader, GameCommand, GameCommandAdapter
from mc_patterns.vector import Vector3

BlockPos = tuple[int, int, int]


class BlockLookup(Protocol):
    def block_type_at(self, location: Vector3) -> str | None:
        """Return the block id at ``location`` or ``None`` when nothing can be read."""


class BlockRemover(Protocol):
    def remove_block(self, location: Vector3, *, suppress_drops: bool = False) -> None:
        """Destroy the block at ``location``; ``suppress_drops`` applies to this call only."""


class EntitySpawner(Protocol):
    def spawn_entity(self, entity_type: str, location: Vector3) -> None:
        """Spawn ``entity_type`` at ``location``."""


class WorldAccess(BlockLookup, BlockRemover, Protocol):
    """Lookup plus removal, the two capabilities the matcher needs."""


@dataclass(slots=True)
class SpawnedEntity:
    entity_type: str
    location: Vector3


@dataclass(slots=True)
class InMemoryWorld:
    """Dict-backed block grid for simulations, demos and tests."""

    blocks: dict[BlockPos, str] = field(default_factory=dict)
    drops: list[str] = field(default_factory=list)
    removed: list[BlockPos] = field(default_factory=list)
    entities: list[SpawnedEntity] = field(default_factory=list)
    drops_suppressed: bool = False

    def set_block(self, location: Vector3, block_type: str) -> None:
        self.blocks[location.block_position()] = block_type

    def fill(self, placements: Iterable[tuple[Vector3, str]]) -> None:
        for location, block_type in placements:
            self.set_block(location, block_type)

    def block_type_at(self, location: Vector3) -> str | None:
        return self.blocks.get(location.block_position())

    def remove_block(self, location: Vector3, *, suppress_drops: bool = False) -> None:
        position = location.block_position()
        self.drops_suppressed = suppress_drops
        try:
            block_type = self.blocks.pop(position, None)
            self.removed.append(position)
            if block_type is not None and not suppress_drops:
                self.drops.append(block_type)
        finally:
            self.drops_suppressed = False

    def spawn_entity(self, entity_type: str, location: Vector3) -> None:
        self.entities.append(SpawnedEntity(entity_type=entity_type, location=location))


class CommandWorldAdapter:
    """World collaborators implemented with vanilla commands.

    Drop suppression is scoped to a single removal: the ``doTileDrops`` game rule
    is turned off right before the ``setblock`` and back on right after it.
    """

    def __init__(
        self,
        adapter: GameCommandAdapter,
        *,
        block_reader: BlockReader | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._adapter = adapter
        self._block_reader = block_reader
        self._logger = logger or logging.getLogger("mc_patterns.adapters.world")

    def block_type_at(self, location: Vector3) -> str | None:
        if self._block_reader is None:
            return None
        x, y, z = location.block_position()
        try:
            raw = self._block_reader(x, y, z)
        except Exception:  # noqa: BLE001 - unreadable positions count as absent blocks.
            self._logger.debug("block_lookup_failed", extra={"position": (x, y, z)}, exc_info=True)
            return None
        return normalize_block_id(raw)

    def remove_block(self, location: Vector3, *, suppress_drops: bool = False) -> None:
        x, y, z = location.block_position()
        if not suppress_drops:
            self._send(f"setblock {x} {y} {z} air destroy")
            return

        self._send("gamerule doTileDrops false")
        try:
            self._send(f"setblock {x} {y} {z} air destroy")
        finally:
            self._send("gamerule doTileDrops true")

    def spawn_entity(self, entity_type: str, location: Vector3) -> None:
        self._send(f"summon {entity_type} {_fmt(location.x)} {_fmt(location.y)} {_fmt(location.z)}")

    def _send(self, command: str) -> str | None:
        return self._adapter.send(GameCommand(command=command))


def normalize_block_id(raw: str | None) -> str | None:
    """Strip block-state suffixes (``minecraft:oak_stairs[facing=east]``)."""
    if raw is None:
        return None
    block_id = str(raw).strip().split("[", 1)[0]
    return block_id or None


def _fmt(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)
