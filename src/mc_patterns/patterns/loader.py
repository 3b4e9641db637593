"""Reading pattern definitions from JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from mc_patterns.models import PatternDefinition, PatternOffset, TriggerBlock
from mc_patterns.vector import Vector3


class PatternFileError(ValueError):
    """Raised when a pattern document cannot be read or validated."""


class OffsetEntry(BaseModel):
    offset: tuple[int, int, int]
    block: str = Field(min_length=1)


class PatternDocument(BaseModel):
    """On-disk pattern layout.

    Example::

        {"trigger": "minecraft:diamond_block",
         "offsets": [{"offset": [0, -1, 0], "block": "minecraft:iron_block"}]}
    """

    trigger: str = Field(min_length=1)
    offsets: list[OffsetEntry] = Field(default_factory=list)

    def offsets_tuple(self) -> tuple[PatternOffset, ...]:
        return tuple(PatternOffset(offset=entry.offset, block_type=entry.block) for entry in self.offsets)

    def at(self, location: Vector3) -> PatternDefinition:
        return PatternDefinition(
            trigger=TriggerBlock(block_type=self.trigger, location=location),
            offsets=self.offsets_tuple(),
        )


def load_pattern_text(text: str) -> PatternDocument:
    try:
        return PatternDocument.model_validate(json.loads(text))
    except json.JSONDecodeError as exc:
        raise PatternFileError(f"Pattern is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise PatternFileError(f"Invalid pattern document: {exc}") from exc


def load_pattern_file(path: str | Path) -> PatternDocument:
    target = Path(path).expanduser()
    if not target.exists():
        raise PatternFileError(f"Pattern file not found: {target}")
    return load_pattern_text(target.read_text(encoding="utf-8"))
