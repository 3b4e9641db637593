"""Structural block-pattern matching with rotation and reflection variants."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from mc_patterns.adapters.world import WorldAccess
from mc_patterns.models import NO_MATCH, MatchOptions, MatchResult, Offset, PatternDefinition, PatternOffset
from mc_patterns.vector import Vector3

Transform = Callable[[Offset], Offset]

# Fixed, hand-picked list; not the full 24-element cube rotation group.
ROTATIONS: tuple[Transform, ...] = (
    lambda o: (o[0], o[1], o[2]),
    # around Y: 90, 180, 270
    lambda o: (o[2], o[1], -o[0]),
    lambda o: (-o[0], o[1], -o[2]),
    lambda o: (-o[2], o[1], o[0]),
    # around X: 90, 180, 270
    lambda o: (o[0], -o[2], o[1]),
    lambda o: (o[0], -o[1], -o[2]),
    lambda o: (o[0], o[2], -o[1]),
    # around Z: 90, 180, 270
    lambda o: (-o[1], o[0], o[2]),
    lambda o: (-o[0], -o[1], o[2]),
    lambda o: (o[1], -o[0], o[2]),
)

# The "Y" mirror negates both y and z.
REFLECTIONS: tuple[Transform, ...] = (
    lambda o: (o[0], o[1], o[2]),
    lambda o: (-o[0], o[1], o[2]),
    lambda o: (o[0], -o[1], -o[2]),
    lambda o: (o[0], o[1], -o[2]),
)

Variant = tuple[PatternOffset, ...]


def generate_variants(offsets: Sequence[PatternOffset]) -> list[Variant]:
    """Return every rotation/reflection of ``offsets`` in search order.

    Variants are produced rotation-major (each rotation followed by its four
    reflections) and deduplicated by value, keeping the first occurrence.
    """
    unique: dict[Variant, None] = {}
    for rotate in ROTATIONS:
        rotated = tuple(block.transformed(rotate) for block in offsets)
        for reflect in REFLECTIONS:
            variant = tuple(block.transformed(reflect) for block in rotated)
            unique.setdefault(variant, None)
    return list(unique)


class BlockMatcher:
    """Tests block patterns against a world and optionally clears matches."""

    def __init__(self, world: WorldAccess, *, logger: logging.Logger | None = None) -> None:
        self._world = world
        self._logger = logger or logging.getLogger("mc_patterns.matcher")

    def match(self, pattern: PatternDefinition, options: MatchOptions | None = None) -> MatchResult:
        options = options or MatchOptions()
        anchor = pattern.trigger.location
        variants = generate_variants(pattern.offsets)

        for index, variant in enumerate(variants):
            if not self.matches_at(anchor, variant):
                continue

            self._logger.info(
                "pattern_matched",
                extra={"anchor": str(anchor), "variant_index": index, "variant_count": len(variants)},
            )
            if options.destroy:
                self.destroy(anchor, variant)
            return MatchResult.hit(variant=variant, anchor=anchor)

        self._logger.debug(
            "pattern_not_matched",
            extra={"anchor": str(anchor), "variant_count": len(variants)},
        )
        return NO_MATCH

    def matches_at(self, anchor: Vector3, variant: Sequence[PatternOffset]) -> bool:
        """Check ``variant`` at ``anchor``, stopping at the first wrong or missing block."""
        for block in variant:
            observed = self._world.block_type_at(anchor + block.as_vector())
            if observed is None or observed != block.block_type:
                return False
        return True

    def destroy(self, anchor: Vector3, variant: Sequence[PatternOffset]) -> None:
        """Remove the anchor block and every block of ``variant`` without drops."""
        for location in [anchor, *(anchor + block.as_vector() for block in variant)]:
            self._world.remove_block(location, suppress_drops=True)
            self._logger.debug("block_removed", extra={"location": str(location)})
