"""Game command adapters and world collaborators."""

from .game_command import GameCommand, GameCommandAdapter
from .live_minecraft import MinescriptGameCommandAdapter, MinescriptUnavailableError
from .world import (
    BlockLookup,
    BlockRemover,
    CommandWorldAdapter,
    EntitySpawner,
    InMemoryWorld,
    SpawnedEntity,
    WorldAccess,
)

__all__ = [
    "BlockLookup",
    "BlockRemover",
    "CommandWorldAdapter",
    "EntitySpawner",
    "GameCommand",
    "GameCommandAdapter",
    "InMemoryWorld",
    "MinescriptGameCommandAdapter",
    "MinescriptUnavailableError",
    "SpawnedEntity",
    "WorldAccess",
]
