"""Example trigger policy: a placed block checks for a structure and spawns an entity."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Protocol

from mc_patterns.adapters.world import BlockLookup, BlockRemover, EntitySpawner
from mc_patterns.matcher import BlockMatcher
from mc_patterns.models import MatchOptions, MatchResult, PatternDefinition
from mc_patterns.vector import Vector3


@dataclass(frozen=True, slots=True)
class BlockPlacedEvent:
    block_type: str
    location: Vector3


class PolicyWorld(BlockLookup, BlockRemover, EntitySpawner, Protocol):
    """World capabilities the trigger policy needs."""


BlockPlacedHandler = Callable[[BlockPlacedEvent], object]


class BlockPlacedDispatcher:
    """Minimal publish/subscribe for block placement events."""

    def __init__(self) -> None:
        self._handlers: dict[str | None, list[BlockPlacedHandler]] = defaultdict(list)

    def subscribe(self, handler: BlockPlacedHandler, *, block_type: str | None = None) -> None:
        """Register ``handler`` for ``block_type``, or for every block when ``None``."""
        self._handlers[block_type].append(handler)

    def publish(self, event: BlockPlacedEvent) -> list[object]:
        handlers = [*self._handlers.get(event.block_type, []), *self._handlers.get(None, [])]
        return [handler(event) for handler in handlers]


class TriggerPolicy:
    """Runs the matcher when the trigger block is placed.

    On a match the configured entity is spawned at the anchor; otherwise a
    warning is logged and the world is left as it was.
    """

    def __init__(
        self,
        world: PolicyWorld,
        *,
        trigger_block: str,
        pattern_factory: Callable[[Vector3], PatternDefinition],
        spawn_entity: str,
        destroy: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        self._world = world
        self._matcher = BlockMatcher(world)
        self._trigger_block = trigger_block
        self._pattern_factory = pattern_factory
        self._spawn_entity = spawn_entity
        self._destroy = destroy
        self._logger = logger or logging.getLogger("mc_patterns.policy")

    def on_block_placed(self, event: BlockPlacedEvent) -> MatchResult | None:
        if event.block_type != self._trigger_block:
            return None

        pattern = self._pattern_factory(event.location)
        result = self._matcher.match(pattern, MatchOptions(destroy=self._destroy))
        if not result.matched:
            self._logger.warning("pattern_not_matched", extra={"anchor": str(event.location)})
            return result

        self._world.spawn_entity(self._spawn_entity, result.anchor)
        self._logger.info(
            "entity_spawned",
            extra={"entity": self._spawn_entity, "anchor": str(result.anchor)},
        )
        return result

    def attach(self, dispatcher: BlockPlacedDispatcher) -> None:
        dispatcher.subscribe(self.on_block_placed, block_type=self._trigger_block)
