"""Patterns shipped with the package."""

from mc_patterns.models import PatternDefinition, PatternOffset, TriggerBlock
from mc_patterns.vector import Vector3

DIAMOND_BLOCK = "minecraft:diamond_block"
IRON_BLOCK = "minecraft:iron_block"

# Diamond head over an iron "T": body column plus two arms.
T_POSE_OFFSETS: tuple[PatternOffset, ...] = (
    PatternOffset.at(0, -1, 0, IRON_BLOCK),
    PatternOffset.at(0, -2, 0, IRON_BLOCK),
    PatternOffset.at(0, -1, 1, IRON_BLOCK),
    PatternOffset.at(0, -1, -1, IRON_BLOCK),
)


def t_pose_pattern(location: Vector3) -> PatternDefinition:
    return PatternDefinition(
        trigger=TriggerBlock(block_type=DIAMOND_BLOCK, location=location),
        offsets=T_POSE_OFFSETS,
    )
