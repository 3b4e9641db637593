"""Detect fixed 3D block structures around a trigger block."""

from .matcher import BlockMatcher, generate_variants
from .models import NO_MATCH, MatchOptions, MatchResult, PatternDefinition, PatternOffset, TriggerBlock
from .vector import Vector3

__all__ = [
    "BlockMatcher",
    "MatchOptions",
    "MatchResult",
    "NO_MATCH",
    "PatternDefinition",
    "PatternOffset",
    "TriggerBlock",
    "Vector3",
    "generate_variants",
]
