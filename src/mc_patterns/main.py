"""CLI entrypoint for the block pattern matcher."""

from __future__ import annotations

import logging
from typing import Callable

import typer
from rich import print

from mc_patterns.adapters import (
    CommandWorldAdapter,
    InMemoryWorld,
    MinescriptGameCommandAdapter,
    MinescriptUnavailableError,
)
from mc_patterns.config import settings
from mc_patterns.matcher import BlockMatcher, generate_variants
from mc_patterns.models import MatchOptions, MatchResult, PatternDefinition
from mc_patterns.patterns import PatternFileError, load_pattern_file, t_pose_pattern
from mc_patterns.policy import BlockPlacedDispatcher, BlockPlacedEvent, TriggerPolicy
from mc_patterns.vector import Vector3

app = typer.Typer(help="Block pattern matcher tools")

PatternFactory = Callable[[Vector3], PatternDefinition]


@app.callback()
def _configure(log_level: str = typer.Option(None, help="Override MC_PATTERNS_LOG_LEVEL")) -> None:
    level = (log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _pattern_factory(pattern_file: str | None) -> PatternFactory:
    path = pattern_file or settings.pattern_file
    if not path:
        return t_pose_pattern
    try:
        document = load_pattern_file(path)
    except PatternFileError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return document.at


def _build_live_world():
    backend = settings.world_adapter.lower()
    if backend == "minescript":
        try:
            adapter = MinescriptGameCommandAdapter(command_prefix=settings.minescript_command_prefix)
        except MinescriptUnavailableError as exc:
            print({"warning": str(exc), "fallback": "memory"})
            return InMemoryWorld()
        return CommandWorldAdapter(adapter, block_reader=adapter.read_block)
    return InMemoryWorld()


def _format_result(result: MatchResult) -> dict:
    if not result.matched:
        return {"matched": False}
    return {
        "matched": True,
        "anchor": str(result.anchor),
        "variant": [{"offset": list(block.offset), "block": block.block_type} for block in result.variant],
    }


@app.command()
def start() -> None:
    """Show runtime backend configuration."""
    print(
        {
            "app_name": settings.app_name,
            "world_adapter": settings.world_adapter,
            "trigger_block": settings.trigger_block,
            "spawn_entity": settings.spawn_entity,
            "destroy_on_match": settings.destroy_on_match,
            "pattern_file": settings.pattern_file,
        }
    )


@app.command()
def variants(pattern_file: str = typer.Option(None, help="JSON pattern file")) -> None:
    """Print every symmetry variant of the pattern in search order."""
    pattern = _pattern_factory(pattern_file)(Vector3())
    found = generate_variants(pattern.offsets)
    print(
        {
            "variant_count": len(found),
            "variants": [[list(block.offset) for block in variant] for variant in found],
        }
    )


@app.command()
def simulate(
    pattern_file: str = typer.Option(None, help="JSON pattern file"),
    x: int = typer.Option(0, help="Anchor X"),
    y: int = typer.Option(64, help="Anchor Y"),
    z: int = typer.Option(0, help="Anchor Z"),
    break_offset: int = typer.Option(None, help="Index of an offset block to replace with stone"),
    keep_blocks: bool = typer.Option(False, help="Leave matched blocks in place"),
) -> None:
    """Build the pattern in an in-memory world and fire a placement event at the anchor."""
    factory = _pattern_factory(pattern_file)
    anchor = Vector3(x, y, z)
    pattern = factory(anchor)

    world = InMemoryWorld()
    world.set_block(anchor, pattern.trigger.block_type)
    world.fill(
        (anchor + block.as_vector(), "minecraft:stone" if index == break_offset else block.block_type)
        for index, block in enumerate(pattern.offsets)
    )

    policy = TriggerPolicy(
        world,
        trigger_block=pattern.trigger.block_type,
        pattern_factory=factory,
        spawn_entity=settings.spawn_entity,
        destroy=not keep_blocks,
    )
    dispatcher = BlockPlacedDispatcher()
    policy.attach(dispatcher)
    results = dispatcher.publish(BlockPlacedEvent(block_type=pattern.trigger.block_type, location=anchor))
    result = results[0]

    print(
        {
            "result": _format_result(result),
            "remaining_blocks": len(world.blocks),
            "entities": [f"{entity.entity_type} @ {entity.location}" for entity in world.entities],
        }
    )
    if not result.matched:
        raise typer.Exit(code=1)


@app.command()
def match(
    x: int = typer.Option(..., help="Anchor X"),
    y: int = typer.Option(..., help="Anchor Y"),
    z: int = typer.Option(..., help="Anchor Z"),
    pattern_file: str = typer.Option(None, help="JSON pattern file"),
    destroy: bool = typer.Option(None, help="Remove matched blocks (default from settings)"),
) -> None:
    """Run the matcher at an anchor against the configured world backend."""
    pattern = _pattern_factory(pattern_file)(Vector3(x, y, z))
    matcher = BlockMatcher(_build_live_world())
    should_destroy = settings.destroy_on_match if destroy is None else destroy
    result = matcher.match(pattern, MatchOptions(destroy=should_destroy))
    print({"match": _format_result(result)})
    if not result.matched:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
