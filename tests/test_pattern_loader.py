from __future__ import annotations

from pathlib import Path

import pytest

from mc_patterns.models import PatternOffset
from mc_patterns.patterns import PatternFileError, load_pattern_file, load_pattern_text
from mc_patterns.vector import Vector3


def test_loads_pattern_file(tmp_path: Path) -> None:
    path = tmp_path / "golem.json"
    path.write_text(
        """
        {
          "trigger": "minecraft:carved_pumpkin",
          "offsets": [
            {"offset": [0, -1, 0], "block": "minecraft:snow_block"},
            {"offset": [0, -2, 0], "block": "minecraft:snow_block"}
          ]
        }
        """,
        encoding="utf-8",
    )

    document = load_pattern_file(path)
    pattern = document.at(Vector3(3, 4, 5))

    assert pattern.trigger.block_type == "minecraft:carved_pumpkin"
    assert pattern.trigger.location == Vector3(3, 4, 5)
    assert pattern.offsets == (
        PatternOffset.at(0, -1, 0, "minecraft:snow_block"),
        PatternOffset.at(0, -2, 0, "minecraft:snow_block"),
    )


def test_missing_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(PatternFileError, match="not found"):
        load_pattern_file(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        '{"offsets": []}',
        '{"trigger": "minecraft:stone", "offsets": [{"offset": [0, 1], "block": "minecraft:stone"}]}',
        '{"trigger": "minecraft:stone", "offsets": [{"offset": [0, 1, 0], "block": ""}]}',
    ],
)
def test_invalid_documents_raise(text: str) -> None:
    with pytest.raises(PatternFileError):
        load_pattern_text(text)
