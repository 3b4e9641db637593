from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from .vector import Vector3

Offset = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class PatternOffset:
    """One required block, relative to the pattern anchor."""

    offset: Offset
    block_type: str

    @classmethod
    def at(cls, dx: int, dy: int, dz: int, block_type: str) -> PatternOffset:
        return cls(offset=(dx, dy, dz), block_type=block_type)

    def as_vector(self) -> Vector3:
        return Vector3.of(self.offset)

    def transformed(self, transform: Callable[[Offset], Offset]) -> PatternOffset:
        return PatternOffset(offset=transform(self.offset), block_type=self.block_type)


@dataclass(frozen=True, slots=True)
class TriggerBlock:
    """Block that fired the check; its location is the pattern anchor."""

    block_type: str
    location: Vector3


@dataclass(frozen=True, slots=True)
class PatternDefinition:
    trigger: TriggerBlock
    offsets: tuple[PatternOffset, ...] = ()


@dataclass(frozen=True, slots=True)
class MatchOptions:
    destroy: bool = False


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of a pattern match.

    ``variant`` holds the offsets of the first symmetry variant that matched,
    ``anchor`` the location it matched at. Both are empty for a miss.
    """

    matched: bool
    variant: tuple[PatternOffset, ...] = field(default=())
    anchor: Vector3 | None = None

    @classmethod
    def hit(cls, variant: tuple[PatternOffset, ...], anchor: Vector3) -> MatchResult:
        return cls(matched=True, variant=variant, anchor=anchor)

    def __bool__(self) -> bool:
        return self.matched


NO_MATCH = MatchResult(matched=False)
